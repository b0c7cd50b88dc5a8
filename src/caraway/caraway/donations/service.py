from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from ..common.validators import require_positive_amount, require_positive_id
from ..core.exceptions import NotFoundError, ValidationError
from ..families.repository import FamilyRepository
from ..hours.aggregator import truncate_hours
from .model import Donation
from .repository import DonationRepository


class DonationService:
    def __init__(self, donations: DonationRepository, families: FamilyRepository):
        self._donations = donations
        self._families = families

    def give(self, *, donor_id: int, donee_id: int, amount: float) -> Donation:
        donor_id = require_positive_id(donor_id, "Donor family")
        donee_id = require_positive_id(donee_id, "Receiving family")
        amount = require_positive_amount(amount, "Amount")
        if donor_id == donee_id:
            raise ValidationError("A family cannot donate hours to itself")

        for family_id in (donor_id, donee_id):
            if not self._families.get_with_parents(family_id):
                raise NotFoundError(f"Family {family_id} does not exist")

        return self._donations.create(donor_id=donor_id, donee_id=donee_id, amount=amount)

    def net_for_family(self, *, family_id: int, start: datetime, end: datetime) -> float:
        """Hours received minus hours given in the range."""

        net = Decimal(0)
        for d in self._donations.list_for_family(family_id=family_id, start=start, end=end):
            amount = Decimal(str(d.amount))
            if d.donee_id == family_id:
                net += amount
            if d.donor_id == family_id:
                net -= amount
        return truncate_hours(net)
