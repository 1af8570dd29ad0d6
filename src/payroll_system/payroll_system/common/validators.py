from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.constants import MAX_DAILY_HOURS
from ..core.exceptions import ValidationError
from .money import to_decimal

_TRUTHY = {"true", "t", "yes", "y", "1"}
_FALSY = {"false", "f", "no", "n", "0"}


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_amount(value: Any, field_name: str, *, allow_zero: bool = False) -> Decimal:
    try:
        amount = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite() or amount < 0 or (amount == 0 and not allow_zero):
        raise ValidationError(f"{field_name} must be {'>= 0' if allow_zero else '> 0'}")
    return amount


def require_int(value: Any, field_name: str, *, min_value: int | None = None, max_value: int | None = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if min_value is not None and number < min_value:
        raise ValidationError(f"{field_name} must be >= {min_value}")
    if max_value is not None and number > max_value:
        raise ValidationError(f"{field_name} must be <= {max_value}")
    return number


def require_hours(value: Any) -> int:
    return require_int(value, "Hours worked", min_value=0, max_value=MAX_DAILY_HOURS)


def require_period(month: Any, year: Any) -> tuple[int, int]:
    return (
        require_int(month, "Month", min_value=1, max_value=12),
        require_int(year, "Year", min_value=1),
    )


def parse_bool(value: Any) -> bool:
    """Accept the usual yes/no spellings; anything else is rejected."""
    if isinstance(value, bool):
        return value
    v = str(value or "").strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise ValidationError(f"Invalid boolean value {value!r}")
