from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from ..core.constants import DEFAULT_CHANNEL_BASE, DEFAULT_MESSAGE_SIGNATURE
from ..core.enums import ValidationErrorKind
from ..core.exceptions import ValidationError
from ..links.builder import CapabilityLinkBuilder
from ..students.model import StudentRecord


@dataclass(frozen=True)
class ComposedMessage:
    body: str
    target_url: str
    link_url: str
    phone: str


class MessageComposer:
    """Build the weekly follow-up message sent to a student's guardian."""

    def __init__(
        self,
        links: CapabilityLinkBuilder,
        *,
        channel_base: str = DEFAULT_CHANNEL_BASE,
        signature_line: str = DEFAULT_MESSAGE_SIGNATURE,
    ):
        self._links = links
        self._channel_base = channel_base.rstrip("/")
        self._signature_line = signature_line

    def compose(
        self,
        student: StudentRecord,
        week_number: int,
        phone: str,
        *,
        base_origin: Optional[str] = None,
    ) -> ComposedMessage:
        first_name = student.first_name
        if not first_name:
            raise ValidationError("Student data incomplete - missing name", ValidationErrorKind.MISSING_NAME)

        week = student.week(week_number)
        link_url = self._links.build_url(student.id, base_origin)

        lines = [
            "Follow up Message:",
            "",
            f"Dear, {first_name}'s Parent",
            "We want to inform you that we are in:",
            "",
            f"  • Week: {week_number}",
            f"  • Attendance Info: {(week.last_attendance or 'N/A') if week.attended else 'Absent'}",
        ]
        # Homework and quiz are meaningless for an absence.
        if week.attended:
            lines.append(f"  • Homework: {week.homework_status.value}")
            if week.quiz_score:
                lines.append(f"  • Quiz Degree: {week.quiz_score}")
        if week.comment:
            lines.append(f"  • Comment: {week.comment}")

        lines += [
            "",
            f"Please visit the following link to check {first_name}'s grades and progress: ⬇️",
            "",
            f"🖇️ {link_url}",
            "",
            "Note :-",
            f"  • {first_name}'s ID: {student.id}",
            "",
            "We are always happy to stay in touch 😊❤",
            "",
            self._signature_line,
        ]
        body = "\n".join(lines)

        return ComposedMessage(
            body=body,
            target_url=f"{self._channel_base}/{phone}?text={quote(body, safe='')}",
            link_url=link_url,
            phone=phone,
        )
