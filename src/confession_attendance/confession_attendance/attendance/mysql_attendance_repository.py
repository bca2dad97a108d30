from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import AttendanceRecord
from .repository import AttendanceRepository

INSERT_COLUMNS = "attendance_date, name, email, baptismal_name, status, recorded_at"


def record_params(rec: AttendanceRecord) -> tuple:
    return (
        rec.attendance_date,
        rec.name,
        rec.email,
        rec.baptismal_name,
        rec.status,
        rec.recorded_at.replace(tzinfo=None),
    )


def record_from_row(r: Dict[str, Any], *, id_column: str) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r[id_column]),
        attendance_date=normalize_mysql_date(r["attendance_date"]),
        name=r.get("name") or "",
        email=r.get("email") or "",
        baptismal_name=r.get("baptismal_name") or "",
        status=r.get("status") or "",
        recorded_at=r["recorded_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append_all(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                f"INSERT INTO attendance({INSERT_COLUMNS}) VALUES(%s,%s,%s,%s,%s,%s)",
                [record_params(r) for r in records],
            )
            return len(records)

    def iter_newest_first(self) -> Iterable[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, {INSERT_COLUMNS}
                FROM attendance
                ORDER BY attendance_id DESC
                """
            )
            return [record_from_row(r, id_column="attendance_id") for r in fetchall(cur)]
