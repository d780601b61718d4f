"""Pure domain services."""

from contact_api.domain.services.submission_validator import validate_submission

__all__ = ["validate_submission"]
