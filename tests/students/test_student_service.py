from __future__ import annotations

from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import AuthenticationError, StudentNotFoundError
from src.attendance_tracker.attendance_tracker.links.builder import CapabilityLinkBuilder, parse_capability_link
from src.attendance_tracker.attendance_tracker.signing.service import SignatureService
from src.attendance_tracker.attendance_tracker.students.model import StudentRecord
from src.attendance_tracker.attendance_tracker.students.service import StudentService


class InMemoryStudents:
    def __init__(self, *students: StudentRecord):
        self._students = {s.id: s for s in students}

    def get_by_id(self, student_id: str) -> Optional[StudentRecord]:
        return self._students.get(student_id)


def make_service(*students: StudentRecord) -> tuple[StudentService, SignatureService]:
    signer = SignatureService("STD_")
    links = CapabilityLinkBuilder(signer, default_origin="https://school.example", origin_resolver=lambda: None)
    return StudentService(InMemoryStudents(*students), signer, links), signer


def test_share_link_round_trips_into_public_view():
    student = StudentRecord(id="42", name="Maria Gomez", guardian_phone=None)
    service, _ = make_service(student)

    student_id, sig = parse_capability_link(service.share_link("42"))

    assert service.get_public_view(student_id, sig) == student


def test_public_view_rejects_bad_signature():
    service, signer = make_service(StudentRecord(id="42", name="Maria", guardian_phone=None))
    with pytest.raises(AuthenticationError):
        service.get_public_view("42", signer.sign("43"))
    with pytest.raises(AuthenticationError):
        service.get_public_view("42", None)


def test_public_view_for_removed_student():
    service, signer = make_service()
    with pytest.raises(StudentNotFoundError):
        service.get_public_view("42", signer.sign("42"))


def test_share_link_requires_existing_student():
    service, _ = make_service()
    with pytest.raises(StudentNotFoundError):
        service.share_link("42")
