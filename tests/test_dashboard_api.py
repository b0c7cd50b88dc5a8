from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest
from flask import Flask

from src.caraway.caraway.core.exceptions import NotFoundError, ValidationError
from src.caraway.caraway.dashboard.controller import register as register_dashboard
from src.caraway.caraway.donations.controller import register as register_donations
from src.caraway.caraway.donations.model import Donation
from src.caraway.caraway.hours.model import FamilyData


class StubFamilyDataService:
    def __init__(self, error: Exception | None = None):
        self._error = error
        self.calls = []

    def build_for_family(self, family_id, *, today):
        self.calls.append((family_id, today))
        if self._error:
            raise self._error
        return FamilyData(family_id=family_id, hours_goal=5.0, hours_booked=3.0, hours_done=1.5)


class StubDonationService:
    def __init__(self, error: Exception | None = None):
        self._error = error
        self.calls = []

    def give(self, *, donor_id, donee_id, amount):
        self.calls.append((donor_id, donee_id, amount))
        if self._error:
            raise self._error
        return Donation(
            donation_id=9,
            donor_id=donor_id,
            donee_id=donee_id,
            amount=float(amount),
            date_sent=datetime(2025, 1, 15, 9, 0),
        )


def _client(family_data_service=None, donation_service=None):
    app = Flask(__name__)
    container = SimpleNamespace(
        family_data_service=family_data_service or StubFamilyDataService(),
        donation_service=donation_service or StubDonationService(),
    )
    register_dashboard(app, container)
    register_donations(app, container)
    return app.test_client()


def test_dashboard_returns_family_data():
    service = StubFamilyDataService()
    resp = _client(service).get("/api/v1/families/3/dashboard?today=2025-01-15")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["hoursBooked"] == 3.0
    assert body["hoursDone"] == 1.5
    assert service.calls == [(3, datetime(2025, 1, 15))]


def test_dashboard_rejects_bad_date():
    resp = _client().get("/api/v1/families/3/dashboard?today=15-01-2025")

    assert resp.status_code == 400


@pytest.mark.parametrize(
    "error, status",
    [(NotFoundError("missing"), 404), (ValidationError("bad"), 400), (ConnectionError("db down"), 503)],
)
def test_dashboard_maps_errors(error, status):
    resp = _client(StubFamilyDataService(error=error)).get("/api/v1/families/3/dashboard")

    assert resp.status_code == status
    assert "error" in resp.get_json()


def test_donation_created():
    resp = _client().post("/api/v1/families/1/donations", json={"doneeId": 2, "amount": 1.5})

    assert resp.status_code == 201
    assert resp.get_json()["doneeID"] == 2


def test_donation_validation_error():
    resp = _client(donation_service=StubDonationService(error=ValidationError("nope"))).post(
        "/api/v1/families/1/donations", json={"doneeId": 2, "amount": -1}
    )

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "nope"}


@pytest.mark.parametrize("donee_id", ["two", 2.9, True, None, -3, "2.5"])
def test_donation_rejects_non_integer_donee_id(donee_id):
    service = StubDonationService()
    resp = _client(donation_service=service).post(
        "/api/v1/families/1/donations", json={"doneeId": donee_id, "amount": 1}
    )

    assert resp.status_code == 400
    assert service.calls == []


def test_donation_accepts_digit_string_donee_id():
    resp = _client().post("/api/v1/families/1/donations", json={"doneeId": "2", "amount": 1})

    assert resp.status_code == 201
    assert resp.get_json()["doneeID"] == 2


def test_donation_value_error_from_service_is_not_an_id_error():
    resp = _client(donation_service=StubDonationService(error=ValueError("boom"))).post(
        "/api/v1/families/1/donations", json={"doneeId": 2, "amount": 1}
    )

    assert resp.status_code == 500


def test_create_app_registers_routes(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_INIT_DB", "0")
    from src.caraway.caraway.main import create_app

    app = create_app()
    rules = {r.rule for r in app.url_map.iter_rules()}

    assert "/api/v1/families/<int:family_id>/dashboard" in rules
    assert "/api/v1/families/<int:donor_id>/donations" in rules
