from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence, Union

from ..common.datetime_utils import now_in, parse_iso_date
from ..common.locks import DateLocks
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..roster.identity import Identity, normalize
from ..settings.service import SettingsService
from .model import AttendanceSubmission, DraftClearResult, DraftSaveResult, DraftSelection, MarkedPerson
from .repository import DraftRepository

logger = logging.getLogger(__name__)


def latest_per_person(marked: Sequence[MarkedPerson]) -> list[MarkedPerson]:
    """One entry per (name, email) pair; a later entry replaces an earlier one."""
    latest: dict[tuple[str, str], MarkedPerson] = {}
    for m in marked:
        pair = (normalize(m.name), normalize(m.email))
        latest.pop(pair, None)
        latest[pair] = m
    return list(latest.values())


def _as_date(value: Union[str, date]) -> date:
    if isinstance(value, date):
        return value
    return parse_iso_date(require_non_empty(value, "date"))


class DraftService:
    def __init__(self, drafts: DraftRepository, settings: SettingsService, *, locks: Optional[DateLocks] = None):
        self._drafts = drafts
        self._settings = settings
        self._locks = locks or DateLocks()

    def save_draft(self, payload: Any, *, now: Optional[datetime] = None) -> DraftSaveResult:
        submission = AttendanceSubmission.from_payload(payload)
        recorded_at = now or now_in(self._settings.load().timezone)

        records = [m.to_record(submission.attendance_date, recorded_at) for m in latest_per_person(submission.marked)]
        with self._locks.for_date(submission.attendance_date):
            saved = self._drafts.replace_for_date(submission.attendance_date, records)

        logger.info("Draft for %s saved with %d rows", submission.attendance_date, saved)
        return DraftSaveResult(saved=saved)

    def get_draft(self, date_str: Union[str, date]) -> dict[str, DraftSelection]:
        out: dict[str, DraftSelection] = {}
        for rec in self._drafts.find_by_date(_as_date(date_str)):
            identity = Identity.of(name=rec.name, email=rec.email)
            if identity is None:
                continue
            # Blank status means "not selected"; never preselect it.
            status = rec.status.strip()
            if not status:
                continue
            out[identity.key] = DraftSelection(
                status=AttendanceStatus.normalize(status),
                baptismal_name=rec.baptismal_name.strip(),
            )
        return out

    def clear_draft_for_date(self, date_str: Union[str, date]) -> DraftClearResult:
        target = _as_date(date_str)
        with self._locks.for_date(target):
            removed = self._drafts.delete_for_date(target)
        if removed:
            logger.info("Draft for %s cleared (%d rows)", target, removed)
        return DraftClearResult(removed=removed)
