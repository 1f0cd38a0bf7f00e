from __future__ import annotations

import math

from ..core.constants import MAX_PERCENTAGE
from ..core.enums import DeductionType
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_amount(value, field_name: str) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(amount) or amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return amount


def require_deduction_amount(value, deduction_type: DeductionType) -> float:
    amount = require_amount(value, "Amount")
    if deduction_type == DeductionType.PERCENTAGE and amount > MAX_PERCENTAGE:
        raise ValidationError(f"Percentage cannot exceed {MAX_PERCENTAGE}%")
    return amount


def require_int(value, field_name: str, *, minimum: int | None = None) -> int:
    """Accept ints and integral strings/floats; booleans and fractions are rejected."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum}")
    return number


def require_int_between(value, field_name: str, low: int, high: int) -> int:
    number = require_int(value, field_name)
    if number < low or number > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return number
