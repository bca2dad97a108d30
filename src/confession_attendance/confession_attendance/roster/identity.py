"""Identity keys used to unify a person across roster, history and drafts.

A person is identified by their lowercased email, or by their lowercased name
when no email is known. Attendance rows without an email are matched to the
roster through a name -> email lookup built from the roster itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from .model import Person


def normalize(value: Optional[str]) -> str:
    return str(value or "").strip().lower()


@dataclass(frozen=True)
class Identity:
    key: str

    @classmethod
    def of(cls, *, name: Optional[str], email: Optional[str]) -> Optional["Identity"]:
        key = normalize(email) or normalize(name)
        return cls(key) if key else None

    def __str__(self) -> str:
        return self.key


def build_name_lookup(people: Iterable[Person]) -> dict[str, str]:
    """Lowercased name -> lowercased email, for people that have both."""
    lookup: dict[str, str] = {}
    for p in people:
        name_key = normalize(p.name)
        email_key = normalize(p.email)
        if name_key and email_key:
            lookup[name_key] = email_key
    return lookup


def resolve_history_identity(
    *,
    name: Optional[str],
    email: Optional[str],
    name_to_email: Mapping[str, str],
) -> Optional[Identity]:
    """Own email, then the roster email for the same name, then the name."""
    name_key = normalize(name)
    key = normalize(email) or name_to_email.get(name_key, "") or name_key
    return Identity(key) if key else None
