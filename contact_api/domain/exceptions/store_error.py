"""
StoreError - The document store rejected or could not take a write.
Maps to: HTTP 500 Internal Server Error
"""

from contact_api.domain.exceptions.base import ContactError


class StoreError(ContactError):
    """Exception raised when a submission could not be persisted."""

    def __init__(self, message: str = "Failed to persist contact submission"):
        super().__init__(message)
