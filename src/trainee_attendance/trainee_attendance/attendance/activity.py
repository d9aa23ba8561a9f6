from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import resolve_today
from ..core.constants import DEFAULT_CALENDAR_MONTHS
from ..core.enums import AttendanceStatus
from .builder import event_field
from .model import AttendanceMap, DateLike
from .status import normalise_status

_VARIANTS = {
    AttendanceStatus.PRESENT: ("present", "Present"),
    AttendanceStatus.LATE: ("late", "Late"),
    AttendanceStatus.ABSENT: ("absent", "Absent"),
}
_EMPTY = ("empty", "No activity")


@dataclass(frozen=True)
class CalendarDay:
    date: str
    day_of_month: int
    status: Optional[AttendanceStatus]
    variant: str
    label: str
    notes: Optional[str] = None


@dataclass(frozen=True)
class CalendarMonth:
    name: str
    year: int
    month: int
    days: list  # CalendarDay, with None placeholders before the 1st


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _build_day(attendance_map: Optional[AttendanceMap], day: date) -> CalendarDay:
    key = day.isoformat()
    entry = attendance_map.get(key) if attendance_map else None
    status = normalise_status(event_field(entry, "status")) if entry is not None else None
    variant, label = _VARIANTS.get(status, _EMPTY)
    return CalendarDay(
        date=key,
        day_of_month=day.day,
        status=status,
        variant=variant,
        label=label,
        notes=event_field(entry, "notes") if entry is not None else None,
    )


def build_activity_calendar(
    attendance_map: Optional[AttendanceMap],
    *,
    today: DateLike = None,
    months: int = DEFAULT_CALENDAR_MONTHS,
) -> list[CalendarMonth]:
    """Month-by-month activity grid ending with the current month.

    Each month starts with ``None`` placeholders so the 1st falls in its
    weekday column, Sunday being column 0.
    """
    end = resolve_today(today)
    result: list[CalendarMonth] = []

    for back in range(max(months, 0) - 1, -1, -1):
        year, month = _shift_month(end.year, end.month, -back)
        if year < 1:
            continue

        first_weekday, days_in_month = calendar.monthrange(year, month)
        days: list = [None] * ((first_weekday + 1) % 7)
        days.extend(_build_day(attendance_map, date(year, month, dom)) for dom in range(1, days_in_month + 1))

        result.append(
            CalendarMonth(
                name=date(year, month, 1).strftime("%b"),
                year=year,
                month=month,
                days=days,
            )
        )

    return result
