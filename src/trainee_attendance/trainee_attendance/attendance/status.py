from __future__ import annotations

from typing import Any, Optional

from ..core.enums import AttendanceStatus

_BY_VALUE = {status.value: status for status in AttendanceStatus}


def normalise_status(value: Any) -> Optional[AttendanceStatus]:
    """Map a raw status to a known AttendanceStatus.

    Casing is ignored. Unknown vocabulary (e.g. "excused") and empty values
    return None rather than being coerced to a misleading status.
    """
    if isinstance(value, AttendanceStatus):
        return value
    if not value:
        return None
    return _BY_VALUE.get(str(value).lower())
