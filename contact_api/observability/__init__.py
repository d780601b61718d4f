"""Observability package for the Contact API."""

from contact_api.observability.metrics import (
    observe_request_latency,
    increment_contact_submission,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
)

__all__ = [
    "observe_request_latency",
    "increment_contact_submission",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
]
