from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Optional

from ..common.datetime_utils import date_key, iter_days, resolve_today, to_date
from ..core.enums import AttendanceStatus
from .model import AttendanceMap, DateLike, DayEntry
from .status import normalise_status

logger = logging.getLogger(__name__)


def event_field(event: Any, name: str) -> Any:
    """Read a field from a mapping-style or attribute-style record."""
    if isinstance(event, Mapping):
        return event.get(name)
    return getattr(event, name, None)


def iter_events(events: Any) -> Iterable:
    if events is None or isinstance(events, (str, bytes, Mapping)):
        return ()
    if not isinstance(events, Iterable):
        return ()
    return events


def build_attendance_map(
    events: Optional[Iterable[Any]],
    enrollment_start: DateLike = None,
    *,
    today: DateLike = None,
) -> AttendanceMap:
    """Build the dense day-by-day attendance map.

    Recorded events are keyed by their UTC day (last write wins for duplicate
    days). When ``enrollment_start`` resolves to a day, every day from it
    through ``today`` without a recorded event is filled in as absent. Without
    an enrollment start only recorded days are present. Events dated after
    ``today``, or before the enrollment start, are left out.

    The returned mapping is read-only and ordered by date key.
    """
    start = to_date(enrollment_start)
    end = resolve_today(today)
    first_key = start.isoformat() if start else None
    last_key = end.isoformat()

    entries: dict[str, DayEntry] = {}
    for event in iter_events(events):
        key = date_key(event_field(event, "date"))
        if key is None:
            logger.debug("Skipping attendance event without a valid date: %r", event)
            continue
        if key > last_key or (first_key and key < first_key):
            logger.debug("Skipping attendance event outside %s..%s: %r", first_key, last_key, event)
            continue
        entries[key] = DayEntry(
            status=normalise_status(event_field(event, "status")),
            notes=event_field(event, "notes"),
        )

    if start:
        for day in iter_days(start, end):
            entries.setdefault(day.isoformat(), DayEntry(status=AttendanceStatus.ABSENT))

    return MappingProxyType(dict(sorted(entries.items())))
