from __future__ import annotations

import logging
import re
import unicodedata
from datetime import date
from typing import Iterable, Optional, Sequence

from ..calendar.model import CalendarEvent, Guest
from ..calendar.source import CalendarSourceFactory
from ..common.datetime_utils import day_window, format_date, resolve_target_date
from ..common.locks import DateLocks
from ..settings.model import AppSettings
from ..settings.service import SettingsService
from .identity import Identity, normalize
from .model import Person, RosterBuildResult, RosterEntry
from .repository import RosterRepository

logger = logging.getLogger(__name__)

_TITLE_NAME = re.compile(r"\(([^)]+)\)")


def extract_name_from_title(title: Optional[str]) -> Optional[str]:
    """Name inside the first parentheses, e.g. "Confession (Jane Doe)"."""
    match = _TITLE_NAME.search(str(title or "").strip())
    if not match:
        return None
    return match.group(1).strip() or None


def select_confessors(guests: Sequence[Guest], priest_email: str) -> Sequence[Guest]:
    """Drop the officiant; keep everyone if that would leave nobody."""
    priest = normalize(priest_email)
    if not priest:
        return guests

    confessors = [g for g in guests if normalize(g.email) and normalize(g.email) != priest]
    if not confessors and guests:
        return guests
    return confessors


def name_sort_key(name: str) -> tuple[str, str]:
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


def collect_people(events: Iterable[CalendarEvent], settings: AppSettings) -> list[Person]:
    """Deduplicated confessors of all events, sorted by name.

    The first occurrence of an identity wins.
    """
    title_filter = settings.event_filter.strip().lower()
    seen: dict[Identity, Person] = {}

    for ev in events:
        if title_filter and title_filter not in ev.title.lower():
            continue

        title_name = extract_name_from_title(ev.title)
        for g in select_confessors(ev.guests, settings.priest_email):
            email = g.email.strip()
            name = (title_name or g.name or email or "").strip()
            identity = Identity.of(name=name, email=email)
            if identity is None or identity in seen:
                continue
            seen[identity] = Person(name=name, email=email)

    return sorted(seen.values(), key=lambda p: name_sort_key(p.name))


class RosterService:
    def __init__(
        self,
        roster: RosterRepository,
        settings: SettingsService,
        calendars: CalendarSourceFactory,
        *,
        locks: Optional[DateLocks] = None,
    ):
        self._roster = roster
        self._settings = settings
        self._calendars = calendars
        self._locks = locks or DateLocks()

    def build_roster(self, date_str: Optional[str] = None, *, today: Optional[date] = None) -> RosterBuildResult:
        settings = self._settings.load()
        target = resolve_target_date(date_str, today=today)
        start, end = day_window(target, settings.timezone)

        events = self._calendars.for_calendar(settings.calendar_id).get_events(start, end)
        people = collect_people(events, settings)
        entries = [RosterEntry(roster_date=target, name=p.name, email=p.email) for p in people]

        with self._locks.for_date(target):
            self._roster.replace_for_date(target, entries)

        logger.info("Roster for %s rebuilt from %d events: %d people", target, len(events), len(entries))
        return RosterBuildResult(date=format_date(target), count=len(entries))

    def people_for(self, target: date) -> list[Person]:
        return [e.person for e in self._roster.find_by_date(target)]
