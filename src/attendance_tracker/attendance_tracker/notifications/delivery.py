from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.validators import parse_week_number
from ..core.constants import DEFAULT_WEEK_NUMBER
from ..core.enums import ValidationErrorKind
from ..core.exceptions import PersistenceError, ValidationError
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryRecord:
    """What happened when a week's ``message_state`` was written."""

    student_id: str
    week_number: Optional[int]
    message_state: bool
    persisted: bool
    reason: Optional[str] = None


class DeliveryStateUpdater:
    """Record whether the latest notification for a week went out.

    One upsert per call, last write wins, no retries. Never raises: a failed
    write comes back as ``persisted=False`` so callers can keep UI state in
    line with what is actually stored.
    """

    def __init__(self, students: StudentRepository):
        self._students = students

    def record(self, student_id: str, week_number: int, succeeded: bool) -> DeliveryRecord:
        student_id = str(student_id)
        succeeded = bool(succeeded)
        try:
            if week_number is None or week_number == "":
                raise ValidationError("Week number is required", ValidationErrorKind.INVALID_WEEK)
            week = parse_week_number(week_number, DEFAULT_WEEK_NUMBER)
        except ValidationError as exc:
            logger.error("Refusing to store message state for student %s week %r: %s", student_id, week_number, exc)
            return DeliveryRecord(student_id, None, succeeded, persisted=False, reason=str(exc))

        try:
            self._students.set_message_state(
                student_id=student_id,
                week_number=week,
                message_state=succeeded,
            )
        except PersistenceError as exc:
            logger.error(
                "Failed to store message state=%s for student %s week %s: %s",
                succeeded, student_id, week, exc,
            )
            return DeliveryRecord(student_id, week, succeeded, persisted=False, reason=str(exc))
        except Exception as exc:
            logger.exception("Unexpected error storing message state for student %s week %s", student_id, week)
            return DeliveryRecord(student_id, week, succeeded, persisted=False, reason=str(exc))

        logger.info("Message state for student %s week %s set to %s", student_id, week, succeeded)
        return DeliveryRecord(student_id, week, succeeded, persisted=True)
