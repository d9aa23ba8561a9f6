from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_positive_int(value: Any, field_name: str) -> int:
    number = require_non_negative_int(value, field_name)
    if number == 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return number
