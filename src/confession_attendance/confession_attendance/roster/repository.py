from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import RosterEntry


class RosterRepository(Protocol):
    def replace_for_date(self, roster_date: date, entries: Sequence[RosterEntry]) -> int:
        """Atomically replace every roster row of roster_date.

        Rows of other dates are left untouched. Returns rows written.
        """

        raise NotImplementedError

    def find_by_date(self, roster_date: date) -> Sequence[RosterEntry]:
        """Rows of roster_date in stored (sorted) order."""

        raise NotImplementedError
