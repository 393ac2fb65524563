from __future__ import annotations

from typing import Any

from ..core.enums import ValidationErrorKind
from ..core.exceptions import ValidationError


def as_clean_text(value: Any) -> str:
    """Coerce an identifier-like value to trimmed text ('' for None)."""
    if value is None:
        return ""
    return str(value).strip()


def parse_week_number(value: Any, default: int) -> int:
    """Week numbers are integers from 1; ``None`` or ``""`` means ``default``."""
    if value is None or value == "":
        return default
    # bool is an int subclass and int() truncates floats; neither is a week.
    if isinstance(value, (bool, float)):
        raise ValidationError("Week number must be an integer", ValidationErrorKind.INVALID_WEEK)
    try:
        week = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Week number must be an integer", ValidationErrorKind.INVALID_WEEK)
    if week < 1:
        raise ValidationError("Week number must be 1 or greater", ValidationErrorKind.INVALID_WEEK)
    return week
