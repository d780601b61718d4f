"""
MailError - The mail relay rejected the notification or was unreachable.
Maps to: HTTP 500 Internal Server Error (the submission is already stored)
"""

from contact_api.domain.exceptions.base import ContactError


class MailError(ContactError):
    """Exception raised when a notification email could not be sent."""

    def __init__(self, message: str = "Failed to send notification email"):
        super().__init__(message)
