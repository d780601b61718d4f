"""
ENTITIES - Contact submission and the notification derived from it

Pure Python dataclasses (no ODM, no Pydantic).
"""

from contact_api.domain.entities.contact_submission import ContactSubmission
from contact_api.domain.entities.notification_email import NotificationEmail

__all__ = [
    "ContactSubmission",
    "NotificationEmail",
]
