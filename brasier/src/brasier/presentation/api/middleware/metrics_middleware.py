"""
Prometheus metrics middleware for FastAPI.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from brasier.infrastructure.monitoring import metrics


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Middleware to collect HTTP metrics.

    Records request count by method/endpoint/status and request duration.
    Endpoints are labelled by route template, so per-signature paths do
    not create new series.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        method = request.method
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            self._record(request, method, 500, start_time)
            raise

        self._record(request, method, response.status_code, start_time)
        return response

    @staticmethod
    def _record(request: Request, method: str, status_code: int, start_time: float):
        route = request.scope.get("route")
        endpoint = getattr(route, "path", None) or "unmatched"

        metrics.http_request_duration_seconds.labels(
            method=method,
            endpoint=endpoint,
        ).observe(time.perf_counter() - start_time)
        metrics.http_requests_total.labels(
            method=method,
            endpoint=endpoint,
            status=status_code,
        ).inc()
