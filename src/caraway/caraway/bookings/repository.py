from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Booking


class BookingRepository(Protocol):
    def get_family_bookings(self, *, family_id: int, start: datetime, end: datetime) -> Sequence[Booking]:
        """Bookings whose block lies fully inside ``[start, end]``, oldest first.

        An empty sequence means no rows; any other failure is raised.
        """

        raise NotImplementedError
