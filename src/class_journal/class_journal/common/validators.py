from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str, *, max_length: Optional[int] = None) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Missing required field: {field_name}")
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return value


def require_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; "true" is not a course number.
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"Missing required field: {field_name}")
    # int() would truncate 2.5 to 2 and address a different record.
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be an integer") from None


def require_positive_int(value: Any, field_name: str) -> int:
    number = require_int(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number
