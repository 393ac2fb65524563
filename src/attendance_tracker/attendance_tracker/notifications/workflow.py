from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.validators import parse_week_number
from ..core.constants import DEFAULT_WEEK_NUMBER
from ..core.enums import NotificationStatus, ValidationErrorKind
from ..core.exceptions import ChannelUnavailableError, LinkGenerationError, ValidationError
from ..students.repository import StudentRepository
from .channel import MessageChannel
from .composer import ComposedMessage, MessageComposer
from .delivery import DeliveryRecord, DeliveryStateUpdater
from .phone import normalize_guardian_phone

logger = logging.getLogger(__name__)

MSG_OPENED = "WhatsApp opened successfully!"
MSG_READY = "Message ready"
MSG_NOT_FOUND = "Student not found"
MSG_LINK_FAILED = "Could not generate the student link"
MSG_CHANNEL_FAILED = "Popup blocked - please allow popups and try again"
MSG_PERSIST_FAILED = "WhatsApp sent but failed to update status"
MSG_UNEXPECTED = "Error occurred while opening WhatsApp"


@dataclass(frozen=True)
class NotificationOutcome:
    status: NotificationStatus
    message: str
    student_id: str
    week_number: Optional[int]
    composed: Optional[ComposedMessage] = None
    delivery: Optional[DeliveryRecord] = None
    error_kind: Optional[ValidationErrorKind] = None

    @property
    def sent(self) -> bool:
        return self.status == NotificationStatus.SENT

    @property
    def persisted(self) -> bool:
        return self.delivery is not None and self.delivery.persisted

    @property
    def confirmed(self) -> bool:
        """True only when the send went out and the flag is durably stored.

        UI state should be updated optimistically only in this case.
        """
        return self.sent and self.persisted

    def to_dict(self) -> dict:
        return {
            "success": self.status in (NotificationStatus.READY, NotificationStatus.SENT),
            "status": self.status.value,
            "message": self.message,
            "student_id": self.student_id,
            "week": self.week_number,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "target_url": self.composed.target_url if self.composed else None,
            "message_state": self.delivery.message_state if self.delivery else None,
            "persisted": self.persisted,
        }


class NotificationWorkflow:
    """Validate, compose, hand off and record one guardian notification.

    ``send`` runs the whole attempt against a server-side channel. Web
    clients open the deep link themselves, so they call ``prepare`` and then
    report what happened through ``complete``. Every failure edge records
    ``message_state=False`` exactly once; nothing is retried.
    """

    def __init__(
        self,
        students: StudentRepository,
        composer: MessageComposer,
        delivery: DeliveryStateUpdater,
        *,
        default_week: int = DEFAULT_WEEK_NUMBER,
    ):
        self._students = students
        self._composer = composer
        self._delivery = delivery
        self._default_week = int(default_week)

    def _week(self, week_number: Optional[int]) -> int:
        return parse_week_number(week_number, self._default_week)

    @staticmethod
    def _invalid_week(student_id: str, exc: ValidationError) -> NotificationOutcome:
        # No valid (student, week) key exists, so nothing is recorded.
        logger.info("Notification for student %s rejected: %s", student_id, exc)
        return NotificationOutcome(NotificationStatus.REJECTED, str(exc), student_id, None, error_kind=exc.kind)

    def _fail(
        self,
        status: NotificationStatus,
        message: str,
        student_id: str,
        week: int,
        *,
        error_kind: Optional[ValidationErrorKind] = None,
        composed: Optional[ComposedMessage] = None,
    ) -> NotificationOutcome:
        delivery = self._delivery.record(student_id, week, False)
        return NotificationOutcome(
            status=status,
            message=message,
            student_id=student_id,
            week_number=week,
            composed=composed,
            delivery=delivery,
            error_kind=error_kind,
        )

    def prepare(
        self,
        student_id: str,
        week_number: Optional[int] = None,
        *,
        base_origin: Optional[str] = None,
    ) -> NotificationOutcome:
        student_id = str(student_id).strip()
        try:
            week = self._week(week_number)
        except ValidationError as exc:
            return self._invalid_week(student_id, exc)

        try:
            student = self._students.get_by_id(student_id)
            if student is None:
                logger.warning("Notification requested for unknown student %s", student_id)
                return NotificationOutcome(NotificationStatus.NOT_FOUND, MSG_NOT_FOUND, student_id, week)

            phone = normalize_guardian_phone(student.guardian_phone)
            composed = self._composer.compose(student, week, phone, base_origin=base_origin)
        except ValidationError as exc:
            logger.info("Notification for student %s rejected (%s): %s", student_id, exc.kind, exc)
            return self._fail(NotificationStatus.REJECTED, str(exc), student_id, week, error_kind=exc.kind)
        except LinkGenerationError as exc:
            logger.error("Capability link failed for student %s: %s", student_id, exc)
            return self._fail(NotificationStatus.LINK_FAILED, MSG_LINK_FAILED, student_id, week)
        except Exception:
            logger.exception("Unexpected error preparing notification for student %s", student_id)
            return self._fail(NotificationStatus.ERROR, MSG_UNEXPECTED, student_id, week)

        logger.info(
            "Prepared WhatsApp message to %s (original: %s) for student %s week %s",
            phone, student.guardian_phone, student_id, week,
        )
        return NotificationOutcome(NotificationStatus.READY, MSG_READY, student_id, week, composed=composed)

    def complete(
        self,
        student_id: str,
        week_number: Optional[int],
        opened: bool,
        *,
        composed: Optional[ComposedMessage] = None,
        reason: Optional[str] = None,
    ) -> NotificationOutcome:
        student_id = str(student_id).strip()
        try:
            week = self._week(week_number)
        except ValidationError as exc:
            return self._invalid_week(student_id, exc)

        if not opened:
            logger.warning("Message channel unavailable for student %s: %s", student_id, reason or "not opened")
            return self._fail(
                NotificationStatus.CHANNEL_FAILED, reason or MSG_CHANNEL_FAILED, student_id, week, composed=composed
            )

        delivery = self._delivery.record(student_id, week, True)
        return NotificationOutcome(
            status=NotificationStatus.SENT,
            message=MSG_OPENED if delivery.persisted else MSG_PERSIST_FAILED,
            student_id=student_id,
            week_number=week,
            composed=composed,
            delivery=delivery,
        )

    def send(
        self,
        student_id: str,
        week_number: Optional[int],
        channel: MessageChannel,
        *,
        base_origin: Optional[str] = None,
    ) -> NotificationOutcome:
        prepared = self.prepare(student_id, week_number, base_origin=base_origin)
        if prepared.status != NotificationStatus.READY:
            return prepared

        composed = prepared.composed
        try:
            channel.open(composed.target_url)
        except ChannelUnavailableError as exc:
            return self.complete(prepared.student_id, prepared.week_number, False, composed=composed, reason=str(exc))
        except Exception:
            logger.exception("Unexpected error opening message channel for student %s", prepared.student_id)
            return self._fail(NotificationStatus.ERROR, MSG_UNEXPECTED, prepared.student_id, prepared.week_number)

        return self.complete(prepared.student_id, prepared.week_number, True, composed=composed)
