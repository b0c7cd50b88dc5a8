from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Sequence

from ..common.datetime_utils import truncate_to_minute
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Booking
from .repository import BookingRepository

logger = logging.getLogger(__name__)


def _to_booking(r: Dict[str, Any]) -> Booking:
    return Booking(
        booking_id=int(r["booking_id"]),
        block_id=int(r["block_id"]),
        family_id=int(r["family_id"]),
        user_id=int(r["user_id"]),
        block_start=truncate_to_minute(r["block_start"]),
        block_end=truncate_to_minute(r["block_end"]),
        room_id=int(r["room_id"]) if r.get("room_id") is not None else None,
        modifier=float(r["modifier"]) if r.get("modifier") is not None else 1.0,
    )


class MySQLBookingRepository(BookingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_family_bookings(self, *, family_id: int, start: datetime, end: datetime) -> Sequence[Booking]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT b.booking_id, b.block_id, b.family_id, b.user_id,
                       tb.block_start, tb.block_end, tb.room_id, b.modifier
                FROM booking b
                JOIN time_block tb ON tb.block_id = b.block_id
                WHERE b.family_id=%s
                  AND tb.block_start >= %s AND tb.block_start < %s
                  AND tb.block_end > %s AND tb.block_end <= %s
                ORDER BY tb.block_start ASC
                """,
                (int(family_id), start, end, start, end),
            )
            rows = fetchall(cur)
        logger.debug("Selected %d blocks for family %s between %s and %s", len(rows), family_id, start, end)
        return [_to_booking(r) for r in rows]
