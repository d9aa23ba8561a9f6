from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Normalised attendance status for a single calendar day."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
