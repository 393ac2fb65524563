from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import as_clean_text
from ..core.exceptions import AuthenticationError, StudentNotFoundError
from ..links.builder import CapabilityLinkBuilder
from ..signing.service import SignatureService
from .model import StudentRecord
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, students: StudentRepository, signer: SignatureService, links: CapabilityLinkBuilder):
        self._students = students
        self._signer = signer
        self._links = links

    def get_student(self, student_id: str) -> StudentRecord:
        student = self._students.get_by_id(as_clean_text(student_id))
        if not student:
            raise StudentNotFoundError("Student not found")
        return student

    def share_link(self, student_id: str, *, base_origin: Optional[str] = None) -> str:
        student = self.get_student(student_id)
        return self._links.build_url(student.id, base_origin)

    def get_public_view(self, student_id: Optional[str], signature: Optional[str]) -> StudentRecord:
        """Resolve a capability link to its student; any mismatch is an AuthenticationError."""
        if not self._signer.verify(student_id, signature):
            raise AuthenticationError("Invalid or expired link")
        student = self._students.get_by_id(as_clean_text(student_id))
        if not student:
            # Valid signature for a record that has since been removed.
            logger.warning("Verified link for missing student %s", student_id)
            raise StudentNotFoundError("Student not found")
        return student
