from __future__ import annotations

import re
from typing import Any

from ..core.constants import PHONE_COUNTRY_CODE, PHONE_DIGITS, PHONE_PREFIX
from ..core.enums import ValidationErrorKind
from ..core.exceptions import ValidationError

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_guardian_phone(raw: Any) -> str:
    """Validate an Egyptian mobile number and return its international form.

    ``"0100 111 2222"`` becomes ``"201001112222"``. Raises ``ValidationError``
    whose ``kind`` tells the caller which rule failed.
    """
    digits = _NON_DIGITS.sub("", str(raw)) if raw is not None else ""

    if not digits:
        raise ValidationError("Missing parent phone number", ValidationErrorKind.MISSING_PHONE)
    if len(digits) != PHONE_DIGITS:
        raise ValidationError(
            f"Invalid phone number: must be exactly {PHONE_DIGITS} digits, got {len(digits)}",
            ValidationErrorKind.INVALID_LENGTH,
        )
    if not digits.startswith(PHONE_PREFIX):
        raise ValidationError(
            f"Invalid phone number: must start with {PHONE_PREFIX}",
            ValidationErrorKind.INVALID_PREFIX,
        )
    # All digits identical, or an all-identical subscriber number after the prefix
    if len(set(digits)) == 1 or len(set(digits[len(PHONE_PREFIX):])) == 1:
        raise ValidationError("Invalid phone number format", ValidationErrorKind.SUSPICIOUS_PATTERN)

    return PHONE_COUNTRY_CODE + digits[1:]
