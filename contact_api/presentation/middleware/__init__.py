"""HTTP middleware for the FastAPI app."""

from contact_api.presentation.middleware.correlation_id import CorrelationIdMiddleware
from contact_api.presentation.middleware.metrics_middleware import MetricsMiddleware
from contact_api.presentation.middleware.security_headers import (
    SecurityHeadersMiddleware,
)

__all__ = [
    "CorrelationIdMiddleware",
    "MetricsMiddleware",
    "SecurityHeadersMiddleware",
]
