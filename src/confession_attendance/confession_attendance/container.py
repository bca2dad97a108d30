from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.draft_service import DraftService
from .attendance.history_service import HistoryService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.mysql_draft_repository import MySQLDraftRepository
from .attendance.repository import AttendanceRepository, DraftRepository
from .attendance.service import AttendanceService
from .calendar.google_calendar import GoogleCalendarSourceFactory
from .calendar.source import CalendarSourceFactory
from .common.locks import DateLocks
from .core.constants import DEFAULT_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .notifications.mailer import Mailer, build_mailer
from .roster.mysql_roster_repository import MySQLRosterRepository
from .roster.repository import RosterRepository
from .roster.service import RosterService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    settings_repo: SettingsRepository
    roster_repo: RosterRepository
    attendance_repo: AttendanceRepository
    draft_repo: DraftRepository

    settings_service: SettingsService
    roster_service: RosterService
    history_service: HistoryService
    draft_service: DraftService
    attendance_service: AttendanceService

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    settings_repo: SettingsRepository,
    roster_repo: RosterRepository,
    attendance_repo: AttendanceRepository,
    draft_repo: DraftRepository,
    calendars: CalendarSourceFactory,
    mailer: Mailer,
    default_timezone: str = DEFAULT_TIMEZONE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    # One lock registry so every writer of a date shares the same lock.
    locks = DateLocks()

    settings_service = SettingsService(settings_repo, default_timezone=default_timezone)
    roster_service = RosterService(roster_repo, settings_service, calendars, locks=locks)
    history_service = HistoryService(roster_service, attendance_repo, settings_service)
    draft_service = DraftService(draft_repo, settings_service, locks=locks)
    attendance_service = AttendanceService(attendance_repo, draft_service, settings_service, mailer, locks=locks)

    return Container(
        settings_repo=settings_repo,
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        draft_repo=draft_repo,
        settings_service=settings_service,
        roster_service=roster_service,
        history_service=history_service,
        draft_service=draft_service,
        attendance_service=attendance_service,
        conn=conn,
    )


def build_container(*, settings) -> Container:
    """Production wiring from a config module (see config/)."""
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))

    return wire_services(
        settings_repo=MySQLSettingsRepository(conn),
        roster_repo=MySQLRosterRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        draft_repo=MySQLDraftRepository(conn),
        calendars=GoogleCalendarSourceFactory(str(getattr(settings, "GOOGLE_SERVICE_ACCOUNT_FILE", ""))),
        mailer=build_mailer(settings),
        default_timezone=str(getattr(settings, "DEFAULT_TIMEZONE", DEFAULT_TIMEZONE)),
        conn=conn,
    )
