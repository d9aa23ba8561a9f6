from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.service import AttendanceSummaryService
from .common.validators import require_non_negative_int, require_positive_int
from .core.constants import DEFAULT_CALENDAR_MONTHS, DEFAULT_LOOKBACK_DAYS, DEFAULT_RECENT_RECORDS_LIMIT


@dataclass(frozen=True)
class Container:
    lookback_days: int
    recent_limit: int
    calendar_months: int

    summary_service: AttendanceSummaryService


def build_container(*, settings: Any) -> Container:
    lookback_days = require_positive_int(
        getattr(settings, "LOOKBACK_DAYS", DEFAULT_LOOKBACK_DAYS), "LOOKBACK_DAYS"
    )
    recent_limit = require_non_negative_int(
        getattr(settings, "RECENT_RECORDS_LIMIT", DEFAULT_RECENT_RECORDS_LIMIT), "RECENT_RECORDS_LIMIT"
    )
    calendar_months = require_positive_int(
        getattr(settings, "CALENDAR_MONTHS", DEFAULT_CALENDAR_MONTHS), "CALENDAR_MONTHS"
    )

    summary_service = AttendanceSummaryService(
        lookback_days=lookback_days,
        recent_limit=recent_limit,
        calendar_months=calendar_months,
    )

    return Container(
        lookback_days=lookback_days,
        recent_limit=recent_limit,
        calendar_months=calendar_months,
        summary_service=summary_service,
    )
