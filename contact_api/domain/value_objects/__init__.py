"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Is compared by value
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from contact_api.domain.value_objects.contact_email import ContactEmail
from contact_api.domain.value_objects.submission_id import SubmissionId

__all__ = [
    "ContactEmail",
    "SubmissionId",
]
