from datetime import date

import pytest

from src.confession_attendance.confession_attendance.core.exceptions import DateParseError, ValidationError


def payload(day, *marked):
    return {"date": day, "marked": [dict(zip(("name", "email", "status", "baptismalName"), m)) for m in marked]}


def test_no_draft_is_empty(container):
    assert container.draft_service.get_draft("2024-06-15") == {}


def test_second_save_replaces_first(container, fixed_now):
    drafts = container.draft_service
    drafts.save_draft(payload("2024-06-15", ("Ann", "ann@x.com", "Present", ""), ("Bo", "bo@x.com", "Absent", "")), now=fixed_now)
    result = drafts.save_draft(payload("2024-06-15", ("Cy", "cy@x.com", "present", "Paul")), now=fixed_now)

    assert result.to_dict() == {"ok": True, "saved": 1}
    assert {k: v.to_dict() for k, v in drafts.get_draft("2024-06-15").items()} == {
        "cy@x.com": {"status": "Present", "baptismalName": "Paul"}
    }


def test_other_dates_are_untouched(container, fixed_now):
    drafts = container.draft_service
    drafts.save_draft(payload("2024-06-08", ("Ann", "ann@x.com", "Absent", "")), now=fixed_now)
    drafts.save_draft(payload("2024-06-15", ("Bo", "bo@x.com", "Present", "")), now=fixed_now)
    drafts.save_draft(payload("2024-06-15"), now=fixed_now)

    assert list(drafts.get_draft("2024-06-08")) == ["ann@x.com"]
    assert drafts.get_draft("2024-06-15") == {}


def test_duplicate_entries_collapse_to_the_last_one(container, fixed_now):
    container.draft_service.save_draft(
        payload("2024-06-15", ("Ann", "ann@x.com", "Present", ""), ("ann", "ANN@x.com", "Absent", "")),
        now=fixed_now,
    )

    rows = container.draft_repo.find_by_date(date(2024, 6, 15))
    assert [(r.name, r.status) for r in rows] == [("ann", "Absent")]
    assert rows[0].recorded_at == fixed_now


def test_blank_status_is_not_preselected_and_free_text_passes(container, fixed_now):
    container.draft_service.save_draft(
        payload(
            "2024-06-15",
            ("Ann", "ann@x.com", "   ", ""),
            ("Bo", "", "ABSENT", ""),
            ("Cy", "cy@x.com", "Came late", ""),
        ),
        now=fixed_now,
    )

    draft = container.draft_service.get_draft("2024-06-15")

    assert {k: v.status for k, v in draft.items()} == {"bo": "Absent", "cy@x.com": "Came late"}


def test_clear_counts_and_is_idempotent(container, fixed_now):
    drafts = container.draft_service
    drafts.save_draft(payload("2024-06-15", ("Ann", "ann@x.com", "Present", ""), ("Bo", "bo@x.com", "", "")), now=fixed_now)

    assert drafts.clear_draft_for_date("2024-06-15").to_dict() == {"ok": True, "removed": 2}
    assert drafts.clear_draft_for_date("2024-06-15").to_dict() == {"ok": True, "removed": 0}


def test_bad_payloads(container):
    with pytest.raises(DateParseError):
        container.draft_service.save_draft({"date": "15/06/2024", "marked": []})
    with pytest.raises(ValidationError):
        container.draft_service.save_draft({"marked": []})
    with pytest.raises(ValidationError):
        container.draft_service.save_draft({"date": "2024-06-15", "marked": "Ann"})
    with pytest.raises(ValidationError):
        container.draft_service.get_draft("")
