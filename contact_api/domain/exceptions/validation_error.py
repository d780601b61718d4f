"""
ContactValidationError - Raised when a submission payload breaks an input rule.
Maps to: HTTP 400 Bad Request (message is safe to show the client)
"""

from enum import Enum

from contact_api.domain.exceptions.base import ContactError


class ValidationFailure(str, Enum):
    MISSING_FIELD = "missing_field"
    INVALID_EMAIL = "invalid_email"


_MESSAGES = {
    ValidationFailure.MISSING_FIELD: "Fill all required fields",
    ValidationFailure.INVALID_EMAIL: "Invalid email",
}


class ContactValidationError(ContactError):
    """Exception raised for client-caused submission errors."""

    def __init__(self, kind: ValidationFailure):
        super().__init__(_MESSAGES[kind])
        self.kind = kind

    @classmethod
    def missing_field(cls) -> "ContactValidationError":
        return cls(ValidationFailure.MISSING_FIELD)

    @classmethod
    def invalid_email(cls) -> "ContactValidationError":
        return cls(ValidationFailure.INVALID_EMAIL)
