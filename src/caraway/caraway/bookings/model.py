from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..hours.model import BookingInterval


@dataclass(frozen=True)
class Booking:
    """A family member's booking of one time block."""

    booking_id: int
    block_id: int
    family_id: int
    user_id: int
    block_start: datetime
    block_end: datetime
    room_id: Optional[int] = None
    modifier: float = 1.0

    def to_interval(self) -> BookingInterval:
        return BookingInterval(
            owner_id=self.user_id,
            start=self.block_start,
            end=self.block_end,
            modifier=self.modifier,
        )
