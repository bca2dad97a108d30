from __future__ import annotations

from datetime import date
from typing import Iterable, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Append-only store of final submissions."""

    def append_all(self, records: Sequence[AttendanceRecord]) -> int:
        raise NotImplementedError

    def iter_newest_first(self) -> Iterable[AttendanceRecord]:
        """All rows in reverse insertion order."""

        raise NotImplementedError


class DraftRepository(Protocol):
    def replace_for_date(self, attendance_date: date, records: Sequence[AttendanceRecord]) -> int:
        """Atomically replace every draft row of attendance_date.

        Returns rows written.
        """

        raise NotImplementedError

    def find_by_date(self, attendance_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_for_date(self, attendance_date: date) -> int:
        """Returns rows removed."""

        raise NotImplementedError
