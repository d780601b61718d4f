"""
StartupError - A collaborator required to serve traffic is unavailable at boot.
"""

from contact_api.domain.exceptions.base import ContactError


class StartupError(ContactError):
    """Exception raised during application startup."""
