"""FastAPI middleware."""

import time

from fastapi import Request, Response
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total count of HTTP requests",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics."""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Collect Prometheus metrics."""
        method = request.method
        path = request.url.path

        start_time = time.time()
        response = await call_next(request)

        REQUEST_COUNT.labels(
            method=method, endpoint=path, status=response.status_code
        ).inc()
        REQUEST_LATENCY.labels(method=method, endpoint=path).observe(
            time.time() - start_time
        )

        return response
