from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import CalendarEvent


class CalendarSource(Protocol):
    def get_events(self, start: datetime, end: datetime) -> Sequence[CalendarEvent]:
        """Events of the configured calendar between start and end.

        Raises CalendarNotFoundError when the calendar cannot be resolved.
        """

        raise NotImplementedError


class CalendarSourceFactory(Protocol):
    def for_calendar(self, calendar_id: str) -> CalendarSource:
        raise NotImplementedError
