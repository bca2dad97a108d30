from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import as_raw_text, as_text, require_list, require_non_empty
from ..core.exceptions import ValidationError
from ..roster.identity import Identity
from ..roster.model import Person


@dataclass(frozen=True)
class AttendanceRecord:
    """One stored attendance row.

    Used for both the append-only attendance table and the draft table,
    which share the same columns.
    """

    attendance_date: date
    name: str
    email: str
    baptismal_name: str
    status: str
    recorded_at: datetime
    attendance_id: Optional[int] = None


@dataclass(frozen=True)
class MarkedPerson:
    """A roster person as marked on the form."""

    name: str
    email: str = ""
    baptismal_name: str = ""
    status: str = ""

    @classmethod
    def from_payload(cls, item: Any) -> "MarkedPerson":
        if not isinstance(item, Mapping):
            raise ValidationError("Each marked entry must be an object")
        return cls(
            name=as_text(item.get("name")),
            email=as_text(item.get("email")),
            baptismal_name=as_text(item.get("baptismalName")),
            status=as_raw_text(item.get("status")),
        )

    @property
    def identity(self) -> Optional[Identity]:
        return Identity.of(name=self.name, email=self.email)

    def to_record(self, attendance_date: date, recorded_at: datetime) -> AttendanceRecord:
        return AttendanceRecord(
            attendance_date=attendance_date,
            name=self.name,
            email=self.email,
            baptismal_name=self.baptismal_name,
            status=self.status,
            recorded_at=recorded_at,
        )


@dataclass(frozen=True)
class AttendanceSubmission:
    attendance_date: date
    marked: tuple[MarkedPerson, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: Any) -> "AttendanceSubmission":
        if not isinstance(payload, Mapping):
            raise ValidationError("Payload must be an object with date and marked")
        attendance_date = parse_iso_date(require_non_empty(payload.get("date"), "date"))
        marked = require_list(payload.get("marked"), "marked")
        return cls(attendance_date=attendance_date, marked=tuple(MarkedPerson.from_payload(m) for m in marked))


@dataclass(frozen=True)
class HistoryEntry:
    date: str
    status: str
    name: str

    def to_dict(self) -> dict:
        return {"date": self.date, "status": self.status, "name": self.name}


@dataclass(frozen=True)
class RosterWithHistory:
    date: str
    people: list[Person]
    history: dict[str, list[HistoryEntry]]
    history_depth: int

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "people": [p.to_dict() for p in self.people],
            "history": {k: [h.to_dict() for h in v] for k, v in self.history.items()},
            "historyDepth": self.history_depth,
        }


@dataclass(frozen=True)
class DraftSelection:
    status: str
    baptismal_name: str = ""

    def to_dict(self) -> dict:
        return {"status": self.status, "baptismalName": self.baptismal_name}


@dataclass(frozen=True)
class NotificationFailure:
    step: str
    recipient: str
    error: str

    def to_dict(self) -> dict:
        return {"step": self.step, "recipient": self.recipient, "error": self.error}


@dataclass(frozen=True)
class FinalizeResult:
    saved: int
    present_count: int
    absent_count: int
    notification_errors: tuple[NotificationFailure, ...] = ()
    ok: bool = True

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "saved": self.saved,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "notificationErrors": [f.to_dict() for f in self.notification_errors],
        }


@dataclass(frozen=True)
class DraftSaveResult:
    saved: int
    ok: bool = True

    def to_dict(self) -> dict:
        return {"ok": self.ok, "saved": self.saved}


@dataclass(frozen=True)
class DraftClearResult:
    removed: int
    ok: bool = True

    def to_dict(self) -> dict:
        return {"ok": self.ok, "removed": self.removed}
