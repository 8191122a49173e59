from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_suffix(value: str, field_name: str, suffix: str) -> str:
    if not value.lower().endswith(suffix):
        raise ValidationError(f"{field_name} must end with {suffix!r}")
    return value


def require_file_name(value: str, field_name: str, suffix: str) -> str:
    """A bare file name (no directory part) ending with `suffix`."""
    value = require_non_empty(value, field_name)
    if "/" in value or "\\" in value:
        raise ValidationError(f"{field_name} must be a file name without directories")
    return require_suffix(value, field_name, suffix)


def require_positive_number(value, field_name: str) -> float:
    number = require_number(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def require_number(value, field_name: str) -> float:
    # bool is an int subclass, but `true` is never a valid amount of hours
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number")
    return float(value)
