from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required.")
    return value.strip()


def optional_positive_int(value: Any, field_name: str, *, maximum: Optional[int] = None) -> Optional[int]:
    """Parse an optional positive integer.

    Missing, empty and zero values mean "not given". Numeric strings are
    accepted the way HTML form inputs send them.
    """
    if value is None or value == "" or value is False:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer.")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field_name} must be a positive integer.")
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip(), 10)
        except ValueError:
            raise ValidationError(f"{field_name} must be a positive integer.") from None
    if not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a positive integer.")
    if value == 0:
        return None
    if value < 0:
        raise ValidationError(f"{field_name} must be a positive integer.")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{field_name} must not exceed {maximum}.")
    return value
