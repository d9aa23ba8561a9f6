from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterator, Optional

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_FRACTION = re.compile(r"(:\d\d)\.(\d+)")


def today_utc() -> date:
    """Current UTC calendar day.

    Note: Wrapped so callers read the clock once and pass ``today`` down.
    """
    return datetime.now(timezone.utc).date()


def _from_epoch_millis(value: float) -> Optional[datetime]:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        return _EPOCH + timedelta(milliseconds=value)
    except (OverflowError, ValueError):
        return None


def _from_iso_string(value: str) -> Optional[datetime]:
    text = value.strip()
    if not text:
        return None
    if text[-1] in "zZ":
        text = text[:-1] + "+00:00"
    # fromisoformat only takes 3 or 6 fraction digits before Python 3.11
    text = _FRACTION.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def to_date(value: Any) -> Optional[date]:
    """Resolve a date-like value to its UTC calendar day.

    Accepts ISO strings, ``date``/``datetime`` objects and epoch timestamps in
    milliseconds. Naive datetimes are taken as UTC. Returns None for anything
    missing or unparseable.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, (int, float)):
        parsed = _from_epoch_millis(value)
    elif isinstance(value, str):
        parsed = _from_iso_string(value)
    else:
        return None

    if parsed is None:
        return None
    return to_date(parsed)


def date_key(value: Any) -> Optional[str]:
    """Canonical ``YYYY-MM-DD`` key of the UTC day, or None."""
    day = to_date(value)
    return day.isoformat() if day else None


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def resolve_today(value: Any = None) -> date:
    """Injected "today" as a UTC day, falling back to the real clock."""
    return to_date(value) or today_utc()
