"""
ContactSubmission Entity - One contact-form entry.

Immutable: once persisted there is no update or delete path.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional
from contact_api.domain.value_objects.contact_email import ContactEmail


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: ContactEmail
    message: str
    created_at: datetime

    def __post_init__(self):
        if not self.name or not self.message:
            raise ValueError("Contact submission requires a name and a message")

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        message: str,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> ContactSubmission:
        """Factory method to create a new submission with a server-assigned timestamp."""
        now = clock() if clock else datetime.now(timezone.utc)
        return cls(
            name=name,
            email=ContactEmail(email),
            message=message,
            created_at=now,
        )
