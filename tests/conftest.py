from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

import pytest

from src.confession_attendance.confession_attendance.attendance.model import AttendanceRecord
from src.confession_attendance.confession_attendance.calendar.model import CalendarEvent, Guest
from src.confession_attendance.confession_attendance.container import wire_services
from src.confession_attendance.confession_attendance.core.exceptions import NotificationError
from src.confession_attendance.confession_attendance.roster.model import RosterEntry


class InMemorySettings:
    def __init__(self, values: Optional[dict[str, str]] = None):
        self.values = dict(values or {})

    def read_all(self):
        return dict(self.values)


class InMemoryRoster:
    def __init__(self):
        self.by_date: dict[date, list[RosterEntry]] = {}

    def replace_for_date(self, roster_date: date, entries: Sequence[RosterEntry]) -> int:
        self.by_date[roster_date] = list(entries)
        return len(entries)

    def find_by_date(self, roster_date: date):
        return list(self.by_date.get(roster_date, []))


class InMemoryAttendance:
    def __init__(self):
        self.rows: list[AttendanceRecord] = []

    def append_all(self, records: Sequence[AttendanceRecord]) -> int:
        self.rows.extend(records)
        return len(records)

    def iter_newest_first(self):
        return list(reversed(self.rows))


class InMemoryDrafts:
    def __init__(self):
        self.rows: list[AttendanceRecord] = []

    def replace_for_date(self, attendance_date: date, records: Sequence[AttendanceRecord]) -> int:
        self.rows = [r for r in self.rows if r.attendance_date != attendance_date] + list(records)
        return len(records)

    def find_by_date(self, attendance_date: date):
        return [r for r in self.rows if r.attendance_date == attendance_date]

    def delete_for_date(self, attendance_date: date) -> int:
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.attendance_date != attendance_date]
        return before - len(self.rows)


class FakeCalendars:
    """Acts as both the source factory and the source."""

    def __init__(self, events: Optional[list[CalendarEvent]] = None, error: Optional[Exception] = None):
        self.events = list(events or [])
        self.error = error
        self.calendar_ids: list[str] = []
        self.windows: list[tuple[datetime, datetime]] = []

    def for_calendar(self, calendar_id: str):
        self.calendar_ids.append(calendar_id)
        return self

    def get_events(self, start: datetime, end: datetime):
        self.windows.append((start, end))
        if self.error:
            raise self.error
        return list(self.events)


class RecordingMailer:
    def __init__(self, failing: Sequence[str] = ()):
        self.sent: list[dict] = []
        self.failing = set(failing)

    def send(self, *, to: str, subject: str, body: str) -> None:
        if to in self.failing:
            raise NotificationError(f"SMTP refused {to}")
        self.sent.append({"to": to, "subject": subject, "body": body})


def event(title: str, *guests: tuple[str, str]) -> CalendarEvent:
    return CalendarEvent(title=title, guests=tuple(Guest(name=n, email=e) for n, e in guests))


def record(day: str, name: str, email: str, status: str, baptismal_name: str = "") -> AttendanceRecord:
    return AttendanceRecord(
        attendance_date=date.fromisoformat(day),
        name=name,
        email=email,
        baptismal_name=baptismal_name,
        status=status,
        recorded_at=datetime(2024, 1, 1, 12, 0, 0),
    )


DEFAULT_SETTINGS = {
    "TIMEZONE": "America/New_York",
    "HISTORY_DEPTH": "3",
    "PRIEST_EMAIL": "father@parish.org",
    "PRESENT_REPORT_EMAIL": "present@parish.org",
    "ABSENT_REPORT_EMAIL": "absent@parish.org",
}


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 15, 10, 30, 0, tzinfo=ZoneInfo("America/New_York"))


@pytest.fixture
def settings_repo():
    return InMemorySettings(DEFAULT_SETTINGS)


@pytest.fixture
def calendars():
    return FakeCalendars()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def container(settings_repo, calendars, mailer):
    return wire_services(
        settings_repo=settings_repo,
        roster_repo=InMemoryRoster(),
        attendance_repo=InMemoryAttendance(),
        draft_repo=InMemoryDrafts(),
        calendars=calendars,
        mailer=mailer,
    )


@pytest.fixture
def make_event():
    return event


@pytest.fixture
def make_record():
    return record
