"""
Prometheus Metrics for the Contact API.

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus

METRIC TYPES:
    - Counter: Value only goes up (submissions by outcome, errors by type)
    - Histogram: Distribution (request latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10],
)

CONTACT_SUBMISSIONS_TOTAL = Counter(
    "contact_submissions_total",
    "Total number of contact submissions by pipeline outcome",
    ["outcome"],
)

ERRORS_TOTAL = Counter(
    "contact_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MetricsErrorType:
    """Error type labels for contact_errors_total metric."""

    STORE_FAILED = "store_failed"
    MAIL_FAILED = "mail_failed"
    UNHANDLED = "unhandled"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: presentation/middleware/metrics_middleware.py"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_contact_submission(outcome: str):
    """Call once per submission with its terminal pipeline state. Integration point: presentation/api/contact.py"""
    CONTACT_SUBMISSIONS_TOTAL.labels(outcome=outcome).inc()


def increment_error(error_type: str):
    """Call to record an error occurrence (store_failed, mail_failed, unhandled)."""
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
