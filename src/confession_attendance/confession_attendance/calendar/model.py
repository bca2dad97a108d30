from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Guest:
    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class CalendarEvent:
    """A calendar event with its full (expanded) guest list."""

    title: str
    guests: tuple[Guest, ...] = field(default_factory=tuple)
    event_id: Optional[str] = None
