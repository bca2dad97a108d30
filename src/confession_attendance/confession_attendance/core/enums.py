from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Canonical statuses; stored rows may also carry free text."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def normalize(cls, raw: str) -> str:
        """Map any casing of present/absent onto the canonical value."""
        value = (raw or "").strip()
        for member in cls:
            if value.lower() == member.value.lower():
                return member.value
        return value


class SettingKey(str, Enum):
    """Keys understood in the settings table."""

    TIMEZONE = "TIMEZONE"
    HISTORY_DEPTH = "HISTORY_DEPTH"
    CALENDAR_ID = "CALENDAR_ID"
    EVENT_FILTER = "EVENT_FILTER"
    PRIEST_EMAIL = "PRIEST_EMAIL"
    PRESENT_REPORT_EMAIL = "PRESENT_REPORT_EMAIL"
    ABSENT_REPORT_EMAIL = "ABSENT_REPORT_EMAIL"
