from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Person:
    name: str
    email: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "email": self.email}


@dataclass(frozen=True)
class RosterEntry:
    """One expected confessor for one event date."""

    roster_date: date
    name: str
    email: str = ""

    @property
    def person(self) -> Person:
        return Person(name=self.name, email=self.email)


@dataclass(frozen=True)
class RosterBuildResult:
    date: str
    count: int

    def to_dict(self) -> dict:
        return {"date": self.date, "count": self.count}
