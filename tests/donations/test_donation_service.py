from __future__ import annotations

from datetime import datetime

import pytest

from src.caraway.caraway.core.exceptions import NotFoundError, ValidationError
from src.caraway.caraway.donations.model import Donation
from src.caraway.caraway.donations.service import DonationService
from src.caraway.caraway.families.model import Family


class FakeFamilies:
    def __init__(self, *ids: int):
        self._ids = set(ids)

    def get_with_parents(self, family_id: int):
        if family_id not in self._ids:
            return None
        return Family(family_id=family_id, family_name=f"F{family_id}", children=1)


class FakeDonationsRepo:
    def __init__(self, donations=None):
        self._donations = list(donations or [])
        self.created = []

    def list_for_family(self, *, family_id, start, end):
        return [d for d in self._donations if family_id in (d.donor_id, d.donee_id)]

    def create(self, *, donor_id, donee_id, amount):
        d = Donation(
            donation_id=len(self.created) + 1,
            donor_id=donor_id,
            donee_id=donee_id,
            amount=amount,
            date_sent=datetime(2025, 1, 15, 9, 0),
        )
        self.created.append(d)
        return d


def test_give_creates_donation():
    repo = FakeDonationsRepo()
    svc = DonationService(repo, FakeFamilies(1, 2))

    d = svc.give(donor_id=1, donee_id=2, amount="1.5")

    assert d.amount == 1.5
    assert repo.created == [d]


@pytest.mark.parametrize("amount", [0, -2, "abc", None, "nan", "inf", float("inf"), float("-inf")])
def test_give_rejects_non_positive_amount(amount):
    svc = DonationService(FakeDonationsRepo(), FakeFamilies(1, 2))

    with pytest.raises(ValidationError):
        svc.give(donor_id=1, donee_id=2, amount=amount)


def test_give_rejects_self_donation():
    svc = DonationService(FakeDonationsRepo(), FakeFamilies(1))

    with pytest.raises(ValidationError):
        svc.give(donor_id=1, donee_id=1, amount=2)


def test_give_to_unknown_family_raises_not_found():
    repo = FakeDonationsRepo()
    svc = DonationService(repo, FakeFamilies(1))

    with pytest.raises(NotFoundError):
        svc.give(donor_id=1, donee_id=5, amount=2)
    assert repo.created == []


def test_net_for_family_received_minus_given():
    when = datetime(2025, 1, 14)
    repo = FakeDonationsRepo(
        [
            Donation(1, donor_id=2, donee_id=1, amount=2.0, date_sent=when),
            Donation(2, donor_id=3, donee_id=1, amount=0.1, date_sent=when),
            Donation(3, donor_id=1, donee_id=2, amount=0.3, date_sent=when),
        ]
    )
    svc = DonationService(repo, FakeFamilies(1, 2, 3))

    assert svc.net_for_family(family_id=1, start=when, end=when) == 1.8
    assert svc.net_for_family(family_id=2, start=when, end=when) == -1.7
