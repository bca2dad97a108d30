from src.confession_attendance.confession_attendance.attendance.model import MarkedPerson
from src.confession_attendance.confession_attendance.notifications.formatter import absent_report, person_line


def test_person_line_variants():
    assert person_line(MarkedPerson(name="Ann")) == "• Ann"
    assert person_line(MarkedPerson(name="Ann", email="ann@x.com", baptismal_name="Anna")) == "• Ann (Baptismal: Anna) <ann@x.com>"


def test_absent_report_lists_absent_then_present():
    subject, body = absent_report(
        "2024-06-15",
        [MarkedPerson(name="Bo", email="bo@x.com")],
        [MarkedPerson(name="Ann"), MarkedPerson(name="Cy")],
    )

    assert subject == "Confession Attendance – Absent – 2024-06-15"
    assert body == "\n".join(
        [
            "Confession attendance for 2024-06-15",
            "",
            "Absent (1):",
            "• Bo <bo@x.com>",
            "",
            "Present (2):",
            "• Ann",
            "• Cy",
        ]
    )
