"""Records request latency for every HTTP request."""

import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from contact_api.observability.metrics import observe_request_latency


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        # Route template, not the raw path, to keep label cardinality bounded
        route = request.scope.get("route")
        route_path = getattr(route, "path", "unmatched")
        observe_request_latency(
            request.method, route_path, response.status_code, duration
        )
        return response
