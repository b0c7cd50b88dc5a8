from __future__ import annotations

from ..core.constants import HOURS_GOAL_BY_CHILDREN
from ..core.exceptions import ValidationError


def hours_goal_for(children: int) -> float:
    """Weekly hours a family is expected to facilitate."""
    if children < 0:
        raise ValidationError("Number of children cannot be negative")
    return HOURS_GOAL_BY_CHILDREN[min(children, len(HOURS_GOAL_BY_CHILDREN) - 1)]
