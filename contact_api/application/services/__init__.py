"""Application services."""

from contact_api.application.services.notification_composer import (
    compose_notification,
)

__all__ = ["compose_notification"]
