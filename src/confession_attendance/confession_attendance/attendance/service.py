from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import format_date, now_in
from ..common.locks import DateLocks
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotificationError
from ..notifications.formatter import absent_report, present_report
from ..notifications.mailer import Mailer
from ..settings.service import SettingsService
from .draft_service import DraftService
from .model import AttendanceSubmission, FinalizeResult, NotificationFailure
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Final submission: store, drop the draft for that date, then notify."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        drafts: DraftService,
        settings: SettingsService,
        mailer: Mailer,
        *,
        locks: Optional[DateLocks] = None,
    ):
        self._attendance = attendance
        self._drafts = drafts
        self._settings = settings
        self._mailer = mailer
        self._locks = locks or DateLocks()

    def finalize(self, payload: Any, *, now: Optional[datetime] = None) -> FinalizeResult:
        submission = AttendanceSubmission.from_payload(payload)
        settings = self._settings.load()
        recorded_at = now or now_in(settings.timezone)
        date_str = format_date(submission.attendance_date)

        records = [m.to_record(submission.attendance_date, recorded_at) for m in submission.marked]
        presents = [m for m in submission.marked if m.status == AttendanceStatus.PRESENT.value]
        absents = [m for m in submission.marked if m.status == AttendanceStatus.ABSENT.value]

        with self._locks.for_date(submission.attendance_date):
            saved = self._attendance.append_all(records)
            logger.info("Attendance for %s saved: %d rows (%d present, %d absent)", date_str, saved, len(presents), len(absents))
            self._drafts.clear_draft_for_date(submission.attendance_date)

        # Sent after the date lock is released.
        failures: list[NotificationFailure] = []
        if settings.present_report_email and presents:
            subject, body = present_report(date_str, presents)
            self._notify("present_report", settings.present_report_email, subject, body, failures)

        # Absent-only submissions do not send the combined list.
        if settings.absent_report_email and absents and presents:
            subject, body = absent_report(date_str, absents, presents)
            self._notify("absent_report", settings.absent_report_email, subject, body, failures)

        return FinalizeResult(
            saved=saved,
            present_count=len(presents),
            absent_count=len(absents),
            notification_errors=tuple(failures),
        )

    def _notify(self, step: str, to: str, subject: str, body: str, failures: list[NotificationFailure]) -> None:
        try:
            self._mailer.send(to=to, subject=subject, body=body)
        except NotificationError as e:
            logger.error("Attendance saved but %s email to %s failed: %s", step, to, e)
            failures.append(NotificationFailure(step=step, recipient=to, error=str(e)))
        except Exception as e:
            logger.exception("Attendance saved but %s email to %s failed", step, to)
            failures.append(NotificationFailure(step=step, recipient=to, error=str(e) or type(e).__name__))
