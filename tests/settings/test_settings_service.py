import pytest

from src.confession_attendance.confession_attendance.core.exceptions import ConfigurationError
from src.confession_attendance.confession_attendance.settings.service import SettingsService


class DictSettings:
    def __init__(self, values):
        self._values = values

    def read_all(self):
        return self._values


def test_defaults_when_table_is_empty():
    s = SettingsService(DictSettings({}), default_timezone="America/Chicago").load()

    assert s.timezone == "America/Chicago"
    assert s.history_depth == 3
    assert s.calendar_id == ""
    assert s.priest_email == ""


def test_keys_and_values_are_trimmed():
    s = SettingsService(
        DictSettings({" PRIEST_EMAIL ": " Father@Parish.org ", "": "ignored", "CALENDAR_ID": " cal@group "})
    ).load()

    assert s.priest_email == "Father@Parish.org"
    assert s.calendar_id == "cal@group"


@pytest.mark.parametrize("raw, expected", [("5", 5), ("0", 1), ("-2", 1), ("2.0", 2), ("abc", 3), ("", 3)])
def test_history_depth(raw, expected):
    s = SettingsService(DictSettings({"HISTORY_DEPTH": raw})).load()
    assert s.history_depth == expected


def test_unknown_timezone_fails_loudly():
    with pytest.raises(ConfigurationError):
        SettingsService(DictSettings({"TIMEZONE": "Nowhere/Special"})).load()
