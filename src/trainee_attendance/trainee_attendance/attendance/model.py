from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Mapping, Optional, Union

from ..core.enums import AttendanceStatus

DateLike = Union[str, date, datetime, int, float, None]


@dataclass(frozen=True)
class AttendanceEvent:
    """Raw check-in event as returned by the attendance-records service."""

    date: DateLike
    status: Optional[str]
    notes: Optional[str] = None


@dataclass(frozen=True)
class DayEntry:
    """One calendar day in the attendance map."""

    status: Optional[AttendanceStatus]
    notes: Optional[str] = None


AttendanceMap = Mapping[str, DayEntry]


@dataclass(frozen=True)
class StatusCounts:
    present: int = 0
    late: int = 0
    absent: int = 0

    @property
    def total(self) -> int:
        return self.present + self.late + self.absent

    def as_dict(self) -> dict:
        return {"present": self.present, "late": self.late, "absent": self.absent}


@dataclass(frozen=True)
class DateRange:
    start: str
    end: str

    def as_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class AttendanceStats:
    """Read-model for the last N days of attendance."""

    counts: StatusCounts
    percentages: StatusCounts
    total_days: int
    range: Optional[DateRange]

    def as_dict(self) -> dict:
        return {
            "counts": self.counts.as_dict(),
            "percentages": self.percentages.as_dict(),
            "totalDays": self.total_days,
            "range": self.range.as_dict() if self.range else None,
        }


@dataclass(frozen=True)
class AttendanceTotals:
    """Read-model for attendance since enrollment."""

    counts: StatusCounts
    total_days: int
    range: Optional[DateRange]

    def as_dict(self) -> dict:
        return {
            "counts": self.counts.as_dict(),
            "totalDays": self.total_days,
            "range": self.range.as_dict() if self.range else None,
        }
