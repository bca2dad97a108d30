from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import RosterEntry
from .repository import RosterRepository


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_for_date(self, roster_date: date, entries: Sequence[RosterEntry]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM roster WHERE roster_date=%s", (roster_date,))
            if entries:
                cur.executemany(
                    "INSERT INTO roster(roster_date, name, email) VALUES(%s,%s,%s)",
                    [(roster_date, e.name, e.email) for e in entries],
                )
            return len(entries)

    def find_by_date(self, roster_date: date) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT roster_date, name, email
                FROM roster
                WHERE roster_date=%s
                ORDER BY roster_id ASC
                """,
                (roster_date,),
            )
            rows = fetchall(cur)
            return [
                RosterEntry(
                    roster_date=normalize_mysql_date(r["roster_date"]),
                    name=r.get("name") or "",
                    email=r.get("email") or "",
                )
                for r in rows
            ]
