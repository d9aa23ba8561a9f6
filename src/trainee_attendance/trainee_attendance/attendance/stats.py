from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Any, Optional, Tuple

from ..common.datetime_utils import iter_days, resolve_today, to_date
from ..core.constants import DEFAULT_LOOKBACK_DAYS
from ..core.enums import AttendanceStatus
from .builder import event_field
from .model import AttendanceMap, AttendanceStats, AttendanceTotals, DateLike, DateRange, StatusCounts
from .status import normalise_status


def _lookup(attendance_map: Optional[AttendanceMap], day: date) -> Tuple[bool, Optional[AttendanceStatus]]:
    """Return (has_entry, normalised status) for a day."""
    if not attendance_map:
        return False, None
    entry = attendance_map.get(day.isoformat())
    if entry is None:
        return False, None
    return True, normalise_status(event_field(entry, "status"))


def _status_or_absent(attendance_map: Optional[AttendanceMap], day: date) -> AttendanceStatus:
    _, status = _lookup(attendance_map, day)
    return status or AttendanceStatus.ABSENT


def _earliest_key(attendance_map: Optional[AttendanceMap]) -> Optional[date]:
    days = [d for d in (to_date(k) for k in (attendance_map or {})) if d]
    return min(days) if days else None


def resolve_start(attendance_map: Optional[AttendanceMap], enrollment_start: DateLike) -> Optional[date]:
    """Enrollment start if valid, otherwise the earliest recorded day."""
    return to_date(enrollment_start) or _earliest_key(attendance_map)


def _counts(tally: Counter) -> StatusCounts:
    return StatusCounts(
        present=tally[AttendanceStatus.PRESENT],
        late=tally[AttendanceStatus.LATE],
        absent=tally[AttendanceStatus.ABSENT],
    )


def _percent(count: int, total: int) -> int:
    # Half-up rounding of count / total * 100, in integers.
    return (count * 200 + total) // (2 * total)


def _window_size(lookback_days: Any) -> int:
    if lookback_days is None:
        return DEFAULT_LOOKBACK_DAYS
    if isinstance(lookback_days, bool) or not isinstance(lookback_days, int):
        return 0
    return max(lookback_days, 0)


def get_attendance_stats(
    attendance_map: Optional[AttendanceMap],
    enrollment_start: DateLike = None,
    lookback_days: Optional[int] = DEFAULT_LOOKBACK_DAYS,
    *,
    today: DateLike = None,
) -> AttendanceStats:
    """Counts and percentages over the last ``lookback_days`` days.

    The walk goes backward from today and never crosses ``enrollment_start``.
    With an enrollment start, days without an entry count as absent. Without
    one, absence cannot be asserted, so undocumented days are left out of the
    denominator. Entries with an unrecognised status always count as absent.
    """
    end = resolve_today(today)
    boundary = to_date(enrollment_start)
    floor = boundary or _earliest_key(attendance_map)

    window = _window_size(lookback_days)
    if floor is not None:
        window = min(window, max((end - floor).days + 1, 0))
    else:
        window = 0

    tally: Counter = Counter()
    oldest_key = None
    for offset in range(window):
        day = end - timedelta(days=offset)
        has_entry, status = _lookup(attendance_map, day)
        if not has_entry and boundary is None:
            continue
        tally[status or AttendanceStatus.ABSENT] += 1
        oldest_key = day.isoformat()

    counts = _counts(tally)
    total = counts.total
    if not total:
        return AttendanceStats(counts=StatusCounts(), percentages=StatusCounts(), total_days=0, range=None)

    percentages = StatusCounts(
        present=_percent(counts.present, total),
        late=_percent(counts.late, total),
        absent=_percent(counts.absent, total),
    )
    return AttendanceStats(
        counts=counts,
        percentages=percentages,
        total_days=total,
        range=DateRange(start=oldest_key, end=end.isoformat()),
    )


def get_attendance_totals(
    attendance_map: Optional[AttendanceMap],
    enrollment_start: DateLike = None,
    *,
    today: DateLike = None,
) -> AttendanceTotals:
    """Per-status totals from the resolved start day through today.

    Missing days count as absent. ``range`` is None only when neither an
    enrollment start nor any recorded day is available.
    """
    start = resolve_start(attendance_map, enrollment_start)
    if start is None:
        return AttendanceTotals(counts=StatusCounts(), total_days=0, range=None)

    end = resolve_today(today)
    tally = Counter(_status_or_absent(attendance_map, day) for day in iter_days(start, end))
    counts = _counts(tally)
    return AttendanceTotals(
        counts=counts,
        total_days=counts.total,
        range=DateRange(start=start.isoformat(), end=end.isoformat()),
    )


def get_max_streak(
    attendance_map: Optional[AttendanceMap],
    enrollment_start: DateLike = None,
    *,
    today: DateLike = None,
) -> int:
    """Longest run of consecutive present days. Late and absent both break it."""
    start = resolve_start(attendance_map, enrollment_start)
    if start is None:
        return 0

    best = current = 0
    for day in iter_days(start, resolve_today(today)):
        if _status_or_absent(attendance_map, day) is AttendanceStatus.PRESENT:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def get_current_streak(
    attendance_map: Optional[AttendanceMap],
    enrollment_start: DateLike = None,
    *,
    today: DateLike = None,
    recorded: Optional[AttendanceMap] = None,
) -> int:
    """Consecutive present days ending at the latest settled day.

    Today counts once it is present. Until then the walk starts from yesterday,
    so a streak is not reset by a day that has not been checked in yet. When
    ``recorded`` (the explicitly recorded days) is given, a non-present event
    recorded for today does end the streak.
    """
    start = resolve_start(attendance_map, enrollment_start)
    if start is None:
        return 0

    end = resolve_today(today)
    if _status_or_absent(attendance_map, end) is not AttendanceStatus.PRESENT:
        if recorded is not None and end.isoformat() in recorded:
            return 0
        end -= timedelta(days=1)

    streak = 0
    for offset in range(max((end - start).days + 1, 0)):
        if _status_or_absent(attendance_map, end - timedelta(days=offset)) is not AttendanceStatus.PRESENT:
            break
        streak += 1
    return streak
