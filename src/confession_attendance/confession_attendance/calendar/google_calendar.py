from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..core.constants import DEFAULT_CALENDAR_ID
from ..core.exceptions import CalendarNotFoundError, ConfigurationError
from .model import CalendarEvent, Guest
from .source import CalendarSource, CalendarSourceFactory

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/calendar.readonly"]


def get_service(service_account_file: str, scopes: list[str] = SCOPES):
    try:
        creds = Credentials.from_service_account_file(service_account_file, scopes=scopes)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Google service account file unusable: {service_account_file} ({e})")
    return build("calendar", "v3", credentials=creds, cache_discovery=False)


def _guests_from_attendees(attendees: Optional[list[dict[str, Any]]]) -> tuple[Guest, ...]:
    guests: list[Guest] = []
    for a in attendees or []:
        # Meeting rooms and other resources are not people
        if a.get("resource"):
            continue
        guests.append(Guest(name=str(a.get("displayName") or "").strip(), email=str(a.get("email") or "").strip()))
    return tuple(guests)


def _is_missing_calendar(error: HttpError) -> bool:
    """404, or a 403 whose reason is `forbidden` (calendar not shared with us).

    Other 403s are rate limit or quota errors and are re-raised as is.
    """
    status = getattr(error.resp, "status", None)
    if status == 404:
        return True
    if status != 403:
        return False
    details = getattr(error, "error_details", None)
    if isinstance(details, list):
        reasons = {d.get("reason") for d in details if isinstance(d, dict)}
        return "forbidden" in reasons
    return str(getattr(error, "reason", "") or "").strip().lower() == "forbidden"


class GoogleCalendarSource(CalendarSource):
    def __init__(self, service, calendar_id: str = DEFAULT_CALENDAR_ID):
        self._service = service
        self._calendar_id = calendar_id or DEFAULT_CALENDAR_ID

    def get_events(self, start: datetime, end: datetime) -> Sequence[CalendarEvent]:
        events: list[CalendarEvent] = []
        page_token = None
        while True:
            try:
                resp = (
                    self._service.events()
                    .list(
                        calendarId=self._calendar_id,
                        timeMin=start.isoformat(),
                        timeMax=end.isoformat(),
                        singleEvents=True,
                        orderBy="startTime",
                        pageToken=page_token,
                    )
                    .execute()
                )
            except HttpError as e:
                if _is_missing_calendar(e):
                    raise CalendarNotFoundError(
                        f"Calendar not found: {self._calendar_id!r}. Check CALENDAR_ID in settings."
                    )
                raise

            for item in resp.get("items", []):
                if item.get("status") == "cancelled":
                    continue
                events.append(
                    CalendarEvent(
                        title=str(item.get("summary") or ""),
                        guests=_guests_from_attendees(item.get("attendees")),
                        event_id=item.get("id"),
                    )
                )

            page_token = resp.get("nextPageToken")
            if not page_token:
                break

        logger.debug("Fetched %d events from %s between %s and %s", len(events), self._calendar_id, start, end)
        return events


class GoogleCalendarSourceFactory(CalendarSourceFactory):
    """Builds one GoogleCalendarSource per calendar id.

    The API client is created on first use so the app can start without
    credentials (e.g. for draft-only work).
    """

    def __init__(self, service_account_file: str):
        self._service_account_file = service_account_file
        self._service = None

    def for_calendar(self, calendar_id: str) -> CalendarSource:
        if self._service is None:
            self._service = get_service(self._service_account_file)
        return GoogleCalendarSource(self._service, calendar_id or DEFAULT_CALENDAR_ID)
