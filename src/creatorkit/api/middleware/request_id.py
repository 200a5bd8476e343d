"""Request ID middleware for correlating log lines with responses.

The middleware takes ``X-Request-ID`` from the incoming request, or
generates a UUID v4 when the header is missing or unusable, and:

1. Sets it in a context variable so loggers anywhere in the call stack see it
2. Stores it in ``request.state.request_id``
3. Echoes it in the response headers
"""

from __future__ import annotations

import contextvars
import logging
import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint

logger = logging.getLogger(__name__)

MAX_REQUEST_ID_LENGTH = 128

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "request_id", default=""
)


def get_request_id() -> str:
    """Get the current request ID, or an empty string outside a request.

    Examples
    --------
    >>> from creatorkit.api.middleware.request_id import get_request_id
    >>> logger.info("Fetching page for request %s", get_request_id())
    """
    return request_id_var.get()


def _sanitize_request_id(header_value: str | None) -> str:
    """Return a usable request ID for a raw header value.

    - Missing or empty: new UUID v4
    - Characters outside ASCII 33-126: new UUID v4, logged at WARNING
    - Longer than 128 characters: truncated, prefix kept
    """
    if not header_value:
        return str(uuid.uuid4())

    if not all(33 <= ord(c) <= 126 for c in header_value):
        logger.warning(
            "X-Request-ID contains non-ASCII-printable characters, generating new ID"
        )
        return str(uuid.uuid4())

    if len(header_value) > MAX_REQUEST_ID_LENGTH:
        logger.debug(
            "X-Request-ID truncated from %d to %d characters",
            len(header_value),
            MAX_REQUEST_ID_LENGTH,
        )
        return header_value[:MAX_REQUEST_ID_LENGTH]

    return header_value


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Propagate a request ID through context, request state and response.

    Examples
    --------
    >>> from fastapi import FastAPI
    >>> from creatorkit.api.middleware import RequestIdMiddleware
    >>> app = FastAPI()
    >>> app.add_middleware(RequestIdMiddleware)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = _sanitize_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(request_id)

        try:
            request.state.request_id = request_id
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            # Reset so the ID never leaks into another request's context
            request_id_var.reset(token)


class RequestIdFilter(logging.Filter):
    """Logging filter that adds ``request_id`` to every record.

    Records emitted outside a request get ``"-"``, so format strings can
    always use ``%(request_id)s``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True
