from datetime import date, datetime, time

import pytest

from src.confession_attendance.confession_attendance.common.datetime_utils import (
    day_window,
    format_timestamp,
    parse_iso_date,
    resolve_target_date,
)
from src.confession_attendance.confession_attendance.core.exceptions import ConfigurationError, DateParseError


def test_explicit_date_is_taken_literally():
    assert resolve_target_date("2024-06-15") == date(2024, 6, 15)
    assert parse_iso_date(" 2024-6-5 ") == date(2024, 6, 5)


@pytest.mark.parametrize("value", ["2024-06-xx", "2024/06/15", "15-06", "2024-13-01", "2024-02-30"])
def test_malformed_date_raises(value):
    with pytest.raises(DateParseError):
        resolve_target_date(value)


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2024, 6, 12), date(2024, 6, 15)),  # Wednesday
        (date(2024, 6, 15), date(2024, 6, 15)),  # Saturday itself
        (date(2024, 6, 16), date(2024, 6, 22)),  # Sunday
        (date(2024, 6, 14), date(2024, 6, 15)),  # Friday
    ],
)
def test_default_is_this_or_next_saturday(today, expected):
    assert resolve_target_date(None, today=today) == expected
    assert resolve_target_date("  ", today=today) == expected


def test_day_window_covers_the_whole_day():
    start, end = day_window(date(2024, 6, 15), "America/Chicago")

    assert start.date() == end.date() == date(2024, 6, 15)
    assert start.timetz().replace(tzinfo=None) == time(0, 0)
    assert (end.hour, end.minute, end.second, end.microsecond) == (23, 59, 59, 999000)
    assert str(start.tzinfo) == "America/Chicago"


def test_unknown_timezone_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        day_window(date(2024, 6, 15), "Mars/Olympus_Mons")


def test_timestamp_format():
    assert format_timestamp(datetime(2024, 6, 15, 9, 5, 7)) == "2024-06-15 09:05:07"
