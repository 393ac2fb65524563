import re
from urllib.parse import parse_qs, urlsplit

import pytest

from src.attendance_tracker.attendance_tracker.core.enums import ValidationErrorKind
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.links.builder import CapabilityLinkBuilder
from src.attendance_tracker.attendance_tracker.notifications.composer import MessageComposer
from src.attendance_tracker.attendance_tracker.signing.service import SignatureService
from src.attendance_tracker.attendance_tracker.students.model import StudentRecord, WeekRecord


def make_composer():
    links = CapabilityLinkBuilder(
        SignatureService("STD_"),
        default_origin="https://school.example",
        origin_resolver=lambda: None,
    )
    return MessageComposer(links, channel_base="https://wa.me/", signature_line="– Mrs. Sara Atef")


def student_with(week: WeekRecord, name: str = "Maria Gomez") -> StudentRecord:
    return StudentRecord(id="42", name=name, guardian_phone="01012345678", weeks=(week,))


def test_full_attended_week():
    week = WeekRecord(attended=True, last_attendance="2024-01-10", homework_status=True, quiz_score="8/10", comment="Great job")
    msg = make_composer().compose(student_with(week), 1, "201012345678")

    assert "Dear, Maria's Parent" in msg.body
    assert "  • Week: 1" in msg.body
    assert "  • Attendance Info: 2024-01-10" in msg.body
    assert "  • Homework: Done" in msg.body
    assert "  • Quiz Degree: 8/10" in msg.body
    assert "  • Comment: Great job" in msg.body
    assert "  • Maria's ID: 42" in msg.body
    assert msg.body.endswith("– Mrs. Sara Atef")
    assert re.search(r"https://school\.example/student-info\?id=42&sig=[0-9a-f]{64}$", msg.link_url)
    assert f"🖇️ {msg.link_url}" in msg.body


def test_absent_week_has_no_homework_or_quiz_lines():
    week = WeekRecord(attended=False, last_attendance="2024-01-10", homework_status=True, quiz_score="9", comment="Sick")
    body = make_composer().compose(student_with(week), 1, "201012345678").body

    assert "Attendance Info: Absent" in body
    assert "Homework" not in body
    assert "Quiz Degree" not in body
    assert "  • Comment: Sick" in body


@pytest.mark.parametrize("quiz", ["", "   ", None])
def test_blank_quiz_is_omitted(quiz):
    week = WeekRecord(attended=True, last_attendance="x", quiz_score=quiz)
    assert "Quiz Degree" not in make_composer().compose(student_with(week), 1, "201012345678").body


def test_zero_quiz_score_is_shown():
    week = WeekRecord(attended=True, last_attendance="x", quiz_score=0)
    assert "  • Quiz Degree: 0" in make_composer().compose(student_with(week), 1, "201012345678").body


@pytest.mark.parametrize("comment", ["undefined", "", "  ", None])
def test_placeholder_comments_are_omitted(comment):
    week = WeekRecord(attended=True, last_attendance="x", comment=comment)
    assert "Comment" not in make_composer().compose(student_with(week), 1, "201012345678").body


@pytest.mark.parametrize(
    "stored, label",
    [(True, "Done"), (False, "Not Done"), ("No Homework", "No Homework"), ("Not Completed", "Not Completed"),
     ("weird", "Not Done"), (None, "Not Done")],
)
def test_homework_labels(stored, label):
    week = WeekRecord(attended=True, last_attendance="x", homework_status=stored)
    assert f"  • Homework: {label}" in make_composer().compose(student_with(week), 1, "201012345678").body


def test_attended_without_timestamp_shows_na():
    week = WeekRecord(attended=True)
    assert "Attendance Info: N/A" in make_composer().compose(student_with(week), 1, "201012345678").body


def test_week_beyond_recorded_weeks_is_absent():
    week = WeekRecord(attended=True, last_attendance="x")
    body = make_composer().compose(student_with(week), 3, "201012345678").body
    assert "  • Week: 3" in body
    assert "Attendance Info: Absent" in body


def test_target_url_encodes_body_for_phone():
    week = WeekRecord(attended=True, last_attendance="2024-01-10")
    msg = make_composer().compose(student_with(week), 1, "201012345678")

    parts = urlsplit(msg.target_url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://wa.me/201012345678"
    assert parse_qs(parts.query)["text"] == [msg.body]
    assert " " not in msg.target_url and "\n" not in msg.target_url


def test_missing_name_is_rejected():
    with pytest.raises(ValidationError) as exc:
        make_composer().compose(student_with(WeekRecord(), name="  "), 1, "201012345678")
    assert exc.value.kind == ValidationErrorKind.MISSING_NAME
