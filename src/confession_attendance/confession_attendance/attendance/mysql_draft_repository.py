from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .mysql_attendance_repository import INSERT_COLUMNS, record_from_row, record_params
from .repository import DraftRepository


class MySQLDraftRepository(DraftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_for_date(self, attendance_date: date, records: Sequence[AttendanceRecord]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_draft WHERE attendance_date=%s", (attendance_date,))
            if records:
                cur.executemany(
                    f"INSERT INTO attendance_draft({INSERT_COLUMNS}) VALUES(%s,%s,%s,%s,%s,%s)",
                    [record_params(r) for r in records],
                )
            return len(records)

    def find_by_date(self, attendance_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT draft_id, {INSERT_COLUMNS}
                FROM attendance_draft
                WHERE attendance_date=%s
                ORDER BY draft_id ASC
                """,
                (attendance_date,),
            )
            return [record_from_row(r, id_column="draft_id") for r in fetchall(cur)]

    def delete_for_date(self, attendance_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_draft WHERE attendance_date=%s", (attendance_date,))
            return int(cur.rowcount or 0)
