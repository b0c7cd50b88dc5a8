from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Donation


class DonationRepository(Protocol):
    def list_for_family(self, *, family_id: int, start: datetime, end: datetime) -> Sequence[Donation]:
        """Donations sent or received by the family, ``date_sent`` within the range (inclusive).

        The bounds may be given in either order.
        """

        raise NotImplementedError

    def create(self, *, donor_id: int, donee_id: int, amount: float) -> Donation:
        raise NotImplementedError
