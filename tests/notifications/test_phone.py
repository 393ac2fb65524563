import pytest

from src.attendance_tracker.attendance_tracker.core.enums import ValidationErrorKind
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.notifications.phone import normalize_guardian_phone


@pytest.mark.parametrize(
    "raw, kind",
    [
        (None, ValidationErrorKind.MISSING_PHONE),
        ("", ValidationErrorKind.MISSING_PHONE),
        ("n/a", ValidationErrorKind.MISSING_PHONE),
        ("0123456789", ValidationErrorKind.INVALID_LENGTH),
        ("010123456789", ValidationErrorKind.INVALID_LENGTH),
        ("0223456789x1", ValidationErrorKind.INVALID_PREFIX),
        ("11012345678", ValidationErrorKind.INVALID_PREFIX),
        ("01111111111", ValidationErrorKind.SUSPICIOUS_PATTERN),
        ("01000000000", ValidationErrorKind.SUSPICIOUS_PATTERN),
        ("00000000000", ValidationErrorKind.INVALID_PREFIX),
    ],
)
def test_rejections(raw, kind):
    with pytest.raises(ValidationError) as exc:
        normalize_guardian_phone(raw)
    assert exc.value.kind == kind


def test_length_message_reports_digit_count():
    with pytest.raises(ValidationError) as exc:
        normalize_guardian_phone("0123456789")
    assert str(exc.value) == "Invalid phone number: must be exactly 11 digits, got 10"


def test_valid_number_is_converted_to_international_form():
    assert normalize_guardian_phone("01012345678") == "201012345678"


def test_formatting_characters_are_ignored():
    assert normalize_guardian_phone("0100 111 2222") == "201001112222"
    assert normalize_guardian_phone("(010)-1234-5678") == "201012345678"
