from __future__ import annotations

from typing import Sequence

from ..attendance.model import MarkedPerson

SUBJECT_PREFIX = "Confession Attendance"


def person_line(p: MarkedPerson) -> str:
    baptismal = f" (Baptismal: {p.baptismal_name})" if p.baptismal_name else ""
    email = f" <{p.email}>" if p.email else ""
    return f"• {p.name}{baptismal}{email}"


def _section(title: str, people: Sequence[MarkedPerson]) -> list[str]:
    return [f"{title} ({len(people)}):", *(person_line(p) for p in people)]


def present_report(date_str: str, presents: Sequence[MarkedPerson]) -> tuple[str, str]:
    """Subject and body of the present-list email."""
    lines = [f"Confession attendance for {date_str}", "", *_section("Present", presents)]
    return f"{SUBJECT_PREFIX} – Present – {date_str}", "\n".join(lines)


def absent_report(
    date_str: str,
    absents: Sequence[MarkedPerson],
    presents: Sequence[MarkedPerson],
) -> tuple[str, str]:
    """Subject and body of the absent-list email (present list appended)."""
    lines = [
        f"Confession attendance for {date_str}",
        "",
        *_section("Absent", absents),
        "",
        *_section("Present", presents),
    ]
    return f"{SUBJECT_PREFIX} – Absent – {date_str}", "\n".join(lines)
