from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_date, parse_iso_date
from ..roster.identity import Identity, build_name_lookup, resolve_history_identity
from ..roster.model import Person
from ..roster.service import RosterService
from ..settings.service import SettingsService
from .model import AttendanceRecord, HistoryEntry, RosterWithHistory
from .repository import AttendanceRepository


def reconcile_history(
    people: Sequence[Person],
    records_newest_first: Iterable[AttendanceRecord],
    *,
    depth: int,
) -> dict[str, list[HistoryEntry]]:
    """Up to `depth` most recent entries per roster person, newest first.

    Recency is the order of the input rows, which callers supply in reverse
    insertion order.
    """
    name_to_email = build_name_lookup(people)
    by_key: dict[str, list[HistoryEntry]] = {}

    for rec in records_newest_first:
        identity = resolve_history_identity(name=rec.name, email=rec.email, name_to_email=name_to_email)
        if identity is None:
            continue
        entries = by_key.setdefault(identity.key, [])
        if len(entries) < depth:
            entries.append(HistoryEntry(date=format_date(rec.attendance_date), status=rec.status, name=rec.name))

    out: dict[str, list[HistoryEntry]] = {}
    for p in people:
        identity = Identity.of(name=p.name, email=p.email)
        if identity is not None:
            out[identity.key] = list(by_key.get(identity.key, []))
    return out


class HistoryService:
    def __init__(self, roster: RosterService, attendance: AttendanceRepository, settings: SettingsService):
        self._roster = roster
        self._attendance = attendance
        self._settings = settings

    def get_roster_and_history(self, date_str: Optional[str] = None, *, today: Optional[date] = None) -> RosterWithHistory:
        # The roster is never read without a fresh calendar sync.
        built = self._roster.build_roster(date_str, today=today)
        target = parse_iso_date(built.date)
        depth = self._settings.load().history_depth

        people = self._roster.people_for(target)
        history = reconcile_history(people, self._attendance.iter_newest_first(), depth=depth)

        return RosterWithHistory(date=built.date, people=people, history=history, history_depth=depth)
