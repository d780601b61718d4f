"""
DOMAIN EXCEPTIONS - Failures of the contact submission pipeline

Validation, store and mail failures travel as values inside Result objects.
The presentation layer maps them to HTTP status codes in one place.
StartupError is the only one raised, to abort the application lifespan.
"""

from contact_api.domain.exceptions.base import ContactError
from contact_api.domain.exceptions.validation_error import (
    ContactValidationError,
    ValidationFailure,
)
from contact_api.domain.exceptions.store_error import StoreError
from contact_api.domain.exceptions.mail_error import MailError
from contact_api.domain.exceptions.startup_error import StartupError

__all__ = [
    "ContactError",
    "ContactValidationError",
    "ValidationFailure",
    "StoreError",
    "MailError",
    "StartupError",
]
