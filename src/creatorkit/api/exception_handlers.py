"""Centralized exception handlers for the creatorkit API.

Every failure reaches the caller as the same small JSON body the tool pages
display verbatim::

    {"error": "Failed to check monetization", "details": "..."}

Quota exhaustion adds ``"remainingQuota": 0``. Stack traces are logged,
never returned.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from creatorkit.api.middleware.request_id import REQUEST_ID_HEADER, get_request_id
from creatorkit.api.schemas.responses import ErrorCode, ErrorResponse
from creatorkit.exceptions import APIError, RepositoryError

logger = logging.getLogger(__name__)

MAX_DETAIL_LENGTH = 1024
"""Maximum length of the ``details`` string before truncation."""

TRUNCATION_SUFFIX = "... (truncated)"


def _truncate_detail(detail: str | None) -> str | None:
    """Truncate a details string that exceeds MAX_DETAIL_LENGTH."""
    if detail is None or len(detail) <= MAX_DETAIL_LENGTH:
        return detail
    return detail[: MAX_DETAIL_LENGTH - len(TRUNCATION_SUFFIX)] + TRUNCATION_SUFFIX


def _error_response(body: ErrorResponse, status_code: int) -> JSONResponse:
    """Build the JSON response, echoing the request id when one is set."""
    body.details = _truncate_detail(body.details)
    headers: dict[str, str] | None = None
    request_id = get_request_id()
    if request_id:
        headers = {REQUEST_ID_HEADER: request_id}
    return JSONResponse(
        content=body.to_content(), status_code=status_code, headers=headers
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError subclasses using their own status and message.

    Parameters
    ----------
    request : Request
        The incoming FastAPI request.
    exc : APIError
        The APIError exception that was raised.

    Returns
    -------
    JSONResponse
        ``{"error", "details"?}`` with the exception's status code.
    """
    log_level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(
        log_level,
        "%s %s failed with %s: %s (details=%s)",
        request.method,
        request.url.path,
        exc.error_code.value,
        exc.message,
        exc.details,
    )
    return _error_response(exc.to_error_response(), exc.status_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies as 400 Bad Request.

    The first validation problem is reported in ``details`` as
    ``"<field>: <message>"``.
    """
    errors = exc.errors()
    details: str | None = None
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part != "body"
        )
        message = str(first.get("msg", "Invalid value"))
        details = f"{location}: {message}" if location else message

    logger.info(
        "%s %s rejected: %s", request.method, request.url.path, details
    )
    return _error_response(
        ErrorResponse(error="Invalid request body", details=details), 400
    )


async def repository_error_handler(
    request: Request, exc: RepositoryError
) -> JSONResponse:
    """Handle quota-store failures without exposing database details."""
    logger.error(
        "Repository error: %s (operation=%s, code=%s)",
        exc.message,
        exc.operation,
        ErrorCode.DATABASE_ERROR.value,
        exc_info=exc.original_error,
    )
    return _error_response(
        ErrorResponse(
            error="Internal server error",
            details="The usage store is temporarily unavailable",
        ),
        500,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected exceptions.

    The exception text goes in ``details``; the traceback only in the log.
    """
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return _error_response(
        ErrorResponse(
            error="Internal server error",
            details=str(exc) or type(exc).__name__,
        ),
        500,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Parameters
    ----------
    app : FastAPI
        The FastAPI application instance.

    Examples
    --------
    >>> from fastapi import FastAPI
    >>> from creatorkit.api.exception_handlers import register_exception_handlers
    >>> app = FastAPI()
    >>> register_exception_handlers(app)
    """
    app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RepositoryError, repository_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
