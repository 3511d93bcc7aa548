"""
Correlation IDs for tracing one request through the logs.

An incoming X-Correlation-ID (or X-Request-ID) is reused when it looks like
an identifier; otherwise a short id is minted. The id lives on
``request.state``, in a context variable read by the logging filter, and is
returned in the X-Correlation-ID response header.
"""

import contextvars
import re
import uuid
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

_current_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "scrolls_correlation_id", default=None
)

CORRELATION_HEADERS = ("X-Correlation-ID", "X-Request-ID")
RESPONSE_HEADER = "X-Correlation-ID"

# Client-supplied ids end up verbatim in log lines
_VALID_ID = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")


def get_correlation_id() -> Optional[str]:
    """Correlation ID of the request being handled, if any."""
    return _current_id.get()


def generate_correlation_id() -> str:
    return uuid.uuid4().hex[:12]


def _incoming_id(request: Request) -> Optional[str]:
    for header in CORRELATION_HEADERS:
        value = request.headers.get(header, "").strip()
        if value and _VALID_ID.match(value):
            return value
    return None


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Tag every request and response with a correlation ID."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = _incoming_id(request) or generate_correlation_id()
        request.state.correlation_id = correlation_id

        reset_token = _current_id.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            _current_id.reset(reset_token)

        response.headers[RESPONSE_HEADER] = correlation_id
        return response
