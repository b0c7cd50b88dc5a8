from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Donation:
    """Hours given by one family to another."""

    donation_id: int
    donor_id: int
    donee_id: int
    amount: float
    date_sent: datetime

    def to_dict(self) -> dict:
        return {
            "donationID": self.donation_id,
            "donorID": self.donor_id,
            "doneeID": self.donee_id,
            "amount": self.amount,
            "dateSent": self.date_sent.isoformat() if self.date_sent else None,
        }
