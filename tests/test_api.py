import pytest

from src.confession_attendance.confession_attendance.core.exceptions import CalendarNotFoundError
from src.confession_attendance.confession_attendance.main import create_app


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def test_healthcheck_and_form(client):
    assert client.get("/healthz").get_json() == {"ok": True}
    page = client.get("/?date=2024-06-15")
    assert page.status_code == 200
    assert b"Confession Attendance" in page.data


def test_roster_endpoints(client, calendars, make_event):
    calendars.events = [make_event("Confession (Jane Doe)", ("", "jane@x.com"))]

    built = client.post("/api/roster/build", json={"date": "2024-06-15"})
    assert built.get_json() == {"date": "2024-06-15", "count": 1}

    data = client.get("/api/roster?date=2024-06-15").get_json()
    assert data == {
        "date": "2024-06-15",
        "people": [{"name": "Jane Doe", "email": "jane@x.com"}],
        "history": {"jane@x.com": []},
        "historyDepth": 3,
    }


def test_draft_round_trip_and_final_submit(client, mailer):
    marked = [
        {"name": "A", "email": "a@x.com", "status": "Present"},
        {"name": "B", "email": "b@x.com", "status": "Absent", "baptismalName": "Basil"},
    ]

    assert client.get("/api/draft?date=2024-06-15").get_json() == {}
    assert client.post("/api/draft", json={"date": "2024-06-15", "marked": marked}).get_json() == {"ok": True, "saved": 2}
    assert client.get("/api/draft?date=2024-06-15").get_json() == {
        "a@x.com": {"status": "Present", "baptismalName": ""},
        "b@x.com": {"status": "Absent", "baptismalName": "Basil"},
    }

    res = client.post("/api/attendance", json={"date": "2024-06-15", "marked": marked})
    assert res.get_json() == {"ok": True, "saved": 2, "presentCount": 1, "absentCount": 1, "notificationErrors": []}
    assert len(mailer.sent) == 2
    assert client.get("/api/draft?date=2024-06-15").get_json() == {}


def test_errors_are_reported_as_is(client, calendars):
    bad = client.post("/api/draft", json={"date": "June 15", "marked": []})
    assert bad.status_code == 400
    assert bad.get_json()["ok"] is False
    assert "June 15" in bad.get_json()["error"]

    calendars.error = CalendarNotFoundError("Calendar not found: 'x'. Check CALENDAR_ID in settings.")
    missing = client.get("/api/roster?date=2024-06-15")
    assert missing.status_code == 500
    assert missing.get_json() == {"ok": False, "error": "Calendar not found: 'x'. Check CALENDAR_ID in settings."}


def test_unexpected_errors_are_hidden(client, calendars):
    calendars.error = RuntimeError("socket exploded")

    res = client.post("/api/roster/build", json={})
    assert res.status_code == 500
    assert res.get_json() == {"ok": False, "error": "Unexpected server error"}
