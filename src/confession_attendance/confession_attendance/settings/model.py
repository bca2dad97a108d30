from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppSettings:
    """Resolved business settings for one request."""

    timezone: str
    history_depth: int
    calendar_id: str = ""
    event_filter: str = ""
    priest_email: str = ""
    present_report_email: str = ""
    absent_report_email: str = ""
