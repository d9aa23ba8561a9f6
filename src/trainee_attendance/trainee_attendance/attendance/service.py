from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Iterable, Optional

from ..common.datetime_utils import resolve_today
from ..core.constants import DEFAULT_CALENDAR_MONTHS, DEFAULT_LOOKBACK_DAYS, DEFAULT_RECENT_RECORDS_LIMIT
from .activity import CalendarMonth, build_activity_calendar
from .builder import build_attendance_map, event_field, iter_events
from .model import AttendanceMap, AttendanceStats, AttendanceTotals, DateLike
from .stats import get_attendance_stats, get_attendance_totals, get_current_streak, get_max_streak
from .status import normalise_status


@dataclass(frozen=True)
class AttendanceSummary:
    """Dashboard overview for one trainee."""

    current_streak: int
    max_streak: int
    window: AttendanceStats
    totals: AttendanceTotals
    last_check_in: Optional[str]
    recent_records: list[dict]

    def to_dict(self) -> dict:
        return {
            "streak": self.current_streak,
            "maxStreak": self.max_streak,
            "presentPercentage": self.window.percentages.present,
            "latePercentage": self.window.percentages.late,
            "absentPercentage": self.window.percentages.absent,
            "window": self.window.as_dict(),
            "totals": self.totals.as_dict(),
            "lastCheckIn": self.last_check_in,
            "records": list(self.recent_records),
        }


class AttendanceSummaryService:
    def __init__(
        self,
        *,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        recent_limit: int = DEFAULT_RECENT_RECORDS_LIMIT,
        calendar_months: int = DEFAULT_CALENDAR_MONTHS,
    ):
        self._lookback_days = int(lookback_days)
        self._recent_limit = int(recent_limit)
        self._calendar_months = int(calendar_months)

    def build_summary(
        self,
        events: Optional[Iterable[Any]],
        enrollment_start: DateLike = None,
        *,
        today: DateLike = None,
    ) -> AttendanceSummary:
        today = resolve_today(today)
        events = list(iter_events(events))
        attendance_map = build_attendance_map(events, enrollment_start, today=today)
        recorded = build_attendance_map(events, today=today)
        return self.summarise(attendance_map, enrollment_start, today=today, recorded=recorded)

    def summarise(
        self,
        attendance_map: AttendanceMap,
        enrollment_start: DateLike = None,
        *,
        today: DateLike = None,
        recorded: Optional[AttendanceMap] = None,
    ) -> AttendanceSummary:
        """Summarise an already built map.

        ``recorded`` holds only the explicitly recorded days; it feeds the
        last check-in, the recent records (limited to the lookback window) and
        whether today has been checked in yet. When omitted, the full map is used.
        """
        today = resolve_today(today)
        explicit = recorded
        recorded = attendance_map if recorded is None else recorded
        recorded_keys = sorted(k for k in recorded if k in attendance_map and k <= today.isoformat())

        window_start = (today - timedelta(days=max(self._lookback_days - 1, 0))).isoformat()
        recent = [
            self._to_row(k, recorded[k]) for k in reversed(recorded_keys) if k >= window_start
        ][: self._recent_limit]

        return AttendanceSummary(
            current_streak=get_current_streak(attendance_map, enrollment_start, today=today, recorded=explicit),
            max_streak=get_max_streak(attendance_map, enrollment_start, today=today),
            window=get_attendance_stats(attendance_map, enrollment_start, self._lookback_days, today=today),
            totals=get_attendance_totals(attendance_map, enrollment_start, today=today),
            last_check_in=recorded_keys[-1] if recorded_keys else None,
            recent_records=recent,
        )

    def build_calendar(
        self,
        attendance_map: AttendanceMap,
        *,
        today: DateLike = None,
    ) -> list[CalendarMonth]:
        return build_activity_calendar(attendance_map, today=today, months=self._calendar_months)

    def _to_row(self, key: str, entry) -> dict:
        status = normalise_status(event_field(entry, "status"))
        return {
            "date": key,
            "status": status.value if status is not None else None,
            "notes": event_field(entry, "notes"),
        }
