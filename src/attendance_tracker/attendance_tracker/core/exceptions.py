from __future__ import annotations

from typing import Optional

from .enums import ValidationErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, kind: Optional[ValidationErrorKind] = None):
        super().__init__(message)
        self.kind = kind


class AuthenticationError(DomainError):
    """Raised when a capability link does not verify."""


class StudentNotFoundError(DomainError):
    """Raised when no student record exists for an identifier."""


class LinkGenerationError(DomainError):
    """Raised when a student identifier cannot be turned into a capability link."""


class SignatureError(DomainError):
    """Raised when the hashing primitive is unavailable."""


class ChannelUnavailableError(DomainError):
    """Raised when the outbound message channel could not be opened."""


class PersistenceError(DomainError):
    """Raised when the storage layer fails to write."""
