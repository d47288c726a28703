"""HTTP request logging middleware.

- Log *metadata only*: route template, method, status and duration. Bodies, query
  strings and headers are never logged (owner names and phone numbers travel there).
- Generate or propagate X-Request-ID for correlation.
- Structured logging using the standard library logger `extra` fields.
"""

from __future__ import annotations

import logging
import re
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from petclinic.core.metrics import route_template

logger = logging.getLogger("petclinic.http")

REQUEST_ID_HEADER = "X-Request-ID"
_SAFE_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,127}$")


def _get_or_create_request_id(*, request: Request) -> str:
    """Return the caller's request id when it is well-formed, else a fresh UUID4 hex."""

    candidate = request.headers.get(REQUEST_ID_HEADER)
    if candidate and _SAFE_REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 2)


class HttpLoggingMiddleware(BaseHTTPMiddleware):
    """Log one record per request and stamp the response with a correlation id."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _get_or_create_request_id(request=request)
        started = time.perf_counter()
        # Exception handlers read this to correlate their own log lines.
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:  # noqa: BLE001 - unexpected exceptions must be logged with a trace
            logger.exception(
                "Unhandled exception while processing request",
                extra={
                    "request_id": request_id,
                    "http_method": request.method,
                    "request_path": route_template(request),
                    "status_code": 500,
                    "duration_ms": _elapsed_ms(started),
                },
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "http_method": request.method,
                "request_path": route_template(request),
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return response
