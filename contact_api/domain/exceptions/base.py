"""
ContactError - Base class for every failure raised or returned by the service.
"""


class ContactError(Exception):
    """Base exception carrying a human readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
