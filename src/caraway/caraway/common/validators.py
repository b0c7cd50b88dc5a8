from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_positive_id(value: int, field_name: str) -> int:
    if value is None or int(value) <= 0:
        raise ValidationError(f"{field_name} is not valid")
    return int(value)


def parse_id(value: Any, field_name: str) -> int:
    """Integer id from a JSON value: a real int (not bool) or a string of digits."""
    if isinstance(value, int) and not isinstance(value, bool):
        return require_positive_id(value, field_name)
    if isinstance(value, str) and value.strip().isdigit():
        return require_positive_id(int(value.strip()), field_name)
    raise ValidationError(f"{field_name} must be an integer")


def require_positive_amount(value: float, field_name: str) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(amount):
        raise ValidationError(f"{field_name} must be a finite number")
    if amount <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return amount
