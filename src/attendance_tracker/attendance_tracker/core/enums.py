from __future__ import annotations

from enum import Enum
from typing import Any


class HomeworkStatus(str, Enum):
    """Homework outcome for one attended week."""

    DONE = "Done"
    NOT_DONE = "Not Done"
    NO_HOMEWORK = "No Homework"
    NOT_COMPLETED = "Not Completed"

    @classmethod
    def coerce(cls, value: Any) -> "HomeworkStatus":
        """Map a stored value onto the enum; unknown values become NOT_DONE.

        Stored documents use ``True``/``False`` for done/not done and the
        display strings for the other two states.
        """
        if value is True:
            return cls.DONE
        if value is False or value is None:
            return cls.NOT_DONE
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        return cls.NOT_DONE


class ValidationErrorKind(str, Enum):
    """Reasons a notification attempt is rejected before anything is sent."""

    MISSING_PHONE = "MissingPhone"
    INVALID_LENGTH = "InvalidLength"
    INVALID_PREFIX = "InvalidPrefix"
    SUSPICIOUS_PATTERN = "SuspiciousPattern"
    MISSING_NAME = "MissingName"
    INVALID_WEEK = "InvalidWeek"


class SignatureScheme(str, Enum):
    SHA256_PREFIX = "sha256-prefix"
    HMAC_SHA256 = "hmac-sha256"


class NotificationStatus(str, Enum):
    """Terminal (or hand-off) state of one notification attempt."""

    READY = "READY"
    SENT = "SENT"
    REJECTED = "REJECTED"
    LINK_FAILED = "LINK_FAILED"
    CHANNEL_FAILED = "CHANNEL_FAILED"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"
