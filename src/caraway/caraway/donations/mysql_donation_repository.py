from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Donation
from .repository import DonationRepository


class MySQLDonationRepository(DonationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_family(self, *, family_id: int, start: datetime, end: datetime) -> Sequence[Donation]:
        lo, hi = (start, end) if start <= end else (end, start)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT donation_id, donor_id, donee_id, amount, date_sent
                FROM donation
                WHERE (donor_id=%s OR donee_id=%s)
                  AND date_sent BETWEEN %s AND %s
                ORDER BY date_sent ASC
                """,
                (int(family_id), int(family_id), lo, hi),
            )
            return [
                Donation(
                    donation_id=int(r["donation_id"]),
                    donor_id=int(r["donor_id"]),
                    donee_id=int(r["donee_id"]),
                    amount=float(r["amount"]),
                    date_sent=r["date_sent"],
                )
                for r in fetchall(cur)
            ]

    def create(self, *, donor_id: int, donee_id: int, amount: float) -> Donation:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO donation(donor_id, donee_id, amount) VALUES(%s,%s,%s)",
                (int(donor_id), int(donee_id), amount),
            )
            donation_id = int(cur.lastrowid)
            cur.execute("SELECT date_sent FROM donation WHERE donation_id=%s", (donation_id,))
            r = fetchone(cur)
            return Donation(
                donation_id=donation_id,
                donor_id=int(donor_id),
                donee_id=int(donee_id),
                amount=float(amount),
                date_sent=r["date_sent"] if r else None,
            )
