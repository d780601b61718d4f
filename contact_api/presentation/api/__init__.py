"""
API Routers - FastAPI endpoint definitions.
"""

from contact_api.presentation.api.health import router as health_router
from contact_api.presentation.api.contact import router as contact_router
from contact_api.presentation.api.metrics import router as metrics_router

__all__ = [
    "health_router",
    "contact_router",
    "metrics_router",
]
