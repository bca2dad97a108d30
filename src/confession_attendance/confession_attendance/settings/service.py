from __future__ import annotations

import logging

from ..common.datetime_utils import get_zone
from ..core.constants import DEFAULT_HISTORY_DEPTH, DEFAULT_TIMEZONE, MIN_HISTORY_DEPTH
from ..core.enums import SettingKey
from .model import AppSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Resolves the settings table into AppSettings, applying defaults.

    Settings are re-read on every call so edits to the table take effect on
    the next request.
    """

    def __init__(self, settings: SettingsRepository, *, default_timezone: str = DEFAULT_TIMEZONE):
        self._settings = settings
        self._default_timezone = default_timezone or DEFAULT_TIMEZONE

    def load(self) -> AppSettings:
        raw = {}
        for key, value in self._settings.read_all().items():
            key = str(key or "").strip()
            if key:
                raw[key] = str(value or "").strip()

        timezone = raw.get(SettingKey.TIMEZONE.value) or self._default_timezone
        get_zone(timezone)

        return AppSettings(
            timezone=timezone,
            history_depth=self._history_depth(raw.get(SettingKey.HISTORY_DEPTH.value, "")),
            calendar_id=raw.get(SettingKey.CALENDAR_ID.value, ""),
            event_filter=raw.get(SettingKey.EVENT_FILTER.value, ""),
            priest_email=raw.get(SettingKey.PRIEST_EMAIL.value, ""),
            present_report_email=raw.get(SettingKey.PRESENT_REPORT_EMAIL.value, ""),
            absent_report_email=raw.get(SettingKey.ABSENT_REPORT_EMAIL.value, ""),
        )

    @staticmethod
    def _history_depth(value: str) -> int:
        if not value:
            return DEFAULT_HISTORY_DEPTH
        try:
            depth = int(float(value))
        except (ValueError, OverflowError):
            logger.warning("HISTORY_DEPTH=%r is not a number, using %d", value, DEFAULT_HISTORY_DEPTH)
            return DEFAULT_HISTORY_DEPTH
        return max(MIN_HISTORY_DEPTH, depth)
