"""
Submission Validator - Presence and shape checks on a raw contact payload.

Rules, applied in order:
1. name, email and message must all be non-empty  -> MISSING_FIELD
2. email must look like local@domain.tld           -> INVALID_EMAIL

Values are stored exactly as received; nothing is trimmed or rewritten.
"""

from datetime import datetime
from typing import Callable, Optional

from contact_api.domain.entities.contact_submission import ContactSubmission
from contact_api.domain.exceptions import ContactValidationError
from contact_api.domain.result import Result
from contact_api.domain.value_objects.contact_email import ContactEmail


def _is_missing(value: Optional[str]) -> bool:
    return value is None or value == ""


def validate_submission(
    name: Optional[str],
    email: Optional[str],
    message: Optional[str],
    clock: Optional[Callable[[], datetime]] = None,
) -> Result[ContactSubmission, ContactValidationError]:
    if _is_missing(name) or _is_missing(email) or _is_missing(message):
        return Result.failure(ContactValidationError.missing_field())

    if not ContactEmail.is_valid(email):
        return Result.failure(ContactValidationError.invalid_email())

    return Result.success(
        ContactSubmission.create(name=name, email=email, message=message, clock=clock)
    )
