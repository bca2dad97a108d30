from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DATE_FORMAT, EVENT_WEEKDAY, TIMESTAMP_FORMAT
from ..core.exceptions import ConfigurationError, DateParseError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD into a literal calendar date.

    Each component is read as an integer, so "2024-6-5" is accepted too.
    """
    parts = (value or "").strip().split("-")
    if len(parts) != 3:
        raise DateParseError(f"Invalid date {value!r}, expected YYYY-MM-DD")
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        raise DateParseError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def next_or_this_saturday(today: date) -> date:
    return today + timedelta(days=(EVENT_WEEKDAY - today.weekday()) % 7)


def resolve_target_date(explicit: Optional[str], *, today: Optional[date] = None) -> date:
    """Explicit YYYY-MM-DD wins; otherwise the upcoming Saturday (today if Saturday)."""
    if explicit and explicit.strip():
        return parse_iso_date(explicit)
    return next_or_this_saturday(today or now_local().date())


def get_zone(tz_name: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ConfigurationError(f"Unknown timezone {tz_name!r}. Check TIMEZONE in settings.")


def day_window(day: date, tz_name: str) -> tuple[datetime, datetime]:
    """First and last millisecond of the calendar day in the given zone."""
    zone = get_zone(tz_name)
    start = datetime.combine(day, time.min, tzinfo=zone)
    end = datetime.combine(day, time(23, 59, 59, 999000), tzinfo=zone)
    return start, end


def format_date(day: date) -> str:
    return day.strftime(DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_in(tz_name: str) -> datetime:
    return datetime.now(get_zone(tz_name))


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)
