from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Family, Parent
from .repository import FamilyRepository


class MySQLFamilyRepository(FamilyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_with_parents(self, family_id: int) -> Optional[Family]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT family_id, family_name, children FROM family WHERE family_id=%s",
                (int(family_id),),
            )
            r = fetchone(cur)
            if not r:
                return None

            cur.execute(
                """
                SELECT user_id, username, first_name, last_name, family_id
                FROM users
                WHERE family_id=%s
                ORDER BY user_id ASC
                """,
                (int(family_id),),
            )
            parents = tuple(
                Parent(
                    user_id=int(p["user_id"]),
                    username=p["username"],
                    first_name=p.get("first_name") or "",
                    last_name=p.get("last_name") or "",
                    family_id=int(p["family_id"]),
                )
                for p in fetchall(cur)
            )
            return Family(
                family_id=int(r["family_id"]),
                family_name=r["family_name"],
                children=int(r["children"] or 0),
                parents=parents,
            )

