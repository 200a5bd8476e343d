"""
Custom exceptions for the creatorkit application.

This module defines domain-specific exceptions for the request pipeline:
input validation, upstream page fetching, page extraction, quota gating
and quota-store failures. Every ``APIError`` subclass knows the HTTP
status it maps to; the API exception handlers turn them into the
``{"error", "details"}`` body the calling page displays.
"""

from __future__ import annotations

from creatorkit.api.schemas.responses import ErrorCode, ErrorResponse


class CreatorKitError(Exception):
    """Base exception for all creatorkit errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize CreatorKitError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class RepositoryError(CreatorKitError):
    """
    Exception raised for quota-store operation failures.

    Attributes
    ----------
    message : str
        Human-readable error message.
    operation : str | None
        The database operation that failed (e.g., "consume", "get").
    original_error : Exception | None
        The original database exception that caused this error.

    Examples
    --------
    >>> try:
    ...     await usage_repository.consume(session, day, ceiling=10000)
    ... except RepositoryError as e:
    ...     print(f"Failed to {e.operation}: {e.message}")
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize RepositoryError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Repository operation failed").
        operation : str | None, optional
            The database operation that failed (default: None).
        original_error : Exception | None, optional
            The original database exception (default: None).
        """
        self.operation: str | None = operation
        self.original_error: Exception | None = original_error
        super().__init__(message)


# =============================================================================
# API Layer Exceptions
# =============================================================================


class APIError(CreatorKitError):
    """Base exception for errors that surface to the caller.

    Attributes
    ----------
    status_code : int
        HTTP status code for the error response (default: 500).
    error_code : ErrorCode
        Machine-readable error code, used in logs.
    message : str
        Human-readable error message, sent as ``error``.
    details : str | None
        Optional human-readable cause, sent as ``details``.

    Examples
    --------
    >>> raise APIError(message="Something went wrong", details="timeout")
    """

    status_code: int = 500
    _error_code_value: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: str | None = None) -> None:
        """
        Initialize APIError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        details : str | None, optional
            Additional human-readable context (default: None).
        """
        self.message = message
        self.details = details
        super().__init__(message)

    @property
    def error_code(self) -> ErrorCode:
        """Get the error code as an ErrorCode enum."""
        return ErrorCode(self._error_code_value)

    def to_error_response(self) -> ErrorResponse:
        """Convert to the caller-facing error body.

        Returns
        -------
        ErrorResponse
            Pydantic model suitable for JSON serialization.
        """
        return ErrorResponse(error=self.message, details=self.details)


class BadRequestError(APIError):
    """Missing or unrecognised input (400).

    Raised at the boundary before any upstream fetch or quota spend.

    Examples
    --------
    >>> raise BadRequestError("Invalid YouTube URL")
    """

    status_code: int = 400
    _error_code_value: str = "BAD_REQUEST"


class NotFoundError(APIError):
    """Upstream page does not exist (404).

    Attributes
    ----------
    url : str | None
        The upstream URL that returned 404.
    """

    status_code: int = 404
    _error_code_value: str = "NOT_FOUND"

    def __init__(
        self,
        message: str = "Channel or video not found",
        details: str | None = (
            "The provided YouTube URL does not exist or is not accessible. "
            "Please check the URL and try again."
        ),
        url: str | None = None,
    ) -> None:
        """
        Initialize NotFoundError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message.
        details : str | None, optional
            Hint for the user.
        url : str | None, optional
            The upstream URL that returned 404 (default: None).
        """
        self.url = url
        super().__init__(message=message, details=details)


class QuotaExceededError(APIError):
    """Daily upstream call ceiling reached (429).

    Attributes
    ----------
    daily_limit : int
        The ceiling that was reached.
    remaining_quota : int
        Always 0.

    Examples
    --------
    >>> raise QuotaExceededError(daily_limit=10000)
    """

    status_code: int = 429
    _error_code_value: str = "QUOTA_EXCEEDED"

    def __init__(self, daily_limit: int, message: str | None = None) -> None:
        """
        Initialize QuotaExceededError.

        Parameters
        ----------
        daily_limit : int
            The configured daily ceiling.
        message : str | None, optional
            Override for the default message.
        """
        self.daily_limit = daily_limit
        self.remaining_quota = 0
        super().__init__(
            message=message
            or (
                f"Daily API limit reached ({daily_limit:,} requests). "
                "Please try again tomorrow."
            )
        )

    def to_error_response(self) -> ErrorResponse:
        """Error body including ``remainingQuota: 0``."""
        return ErrorResponse(
            error=self.message,
            details=self.details,
            remaining_quota=self.remaining_quota,
        )


class UpstreamFetchError(APIError):
    """Upstream page could not be fetched (500).

    Covers non-2xx/non-404 responses and transport failures.

    Attributes
    ----------
    url : str | None
        The upstream URL.
    upstream_status : int | None
        HTTP status returned by the upstream, None for transport errors.
    """

    status_code: int = 500
    _error_code_value: str = "UPSTREAM_ERROR"

    def __init__(
        self,
        message: str = "Failed to fetch YouTube page",
        details: str | None = None,
        url: str | None = None,
        upstream_status: int | None = None,
    ) -> None:
        """
        Initialize UpstreamFetchError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message.
        details : str | None, optional
            Human-readable cause.
        url : str | None, optional
            The upstream URL (default: None).
        upstream_status : int | None, optional
            Upstream HTTP status (default: None).
        """
        self.url = url
        self.upstream_status = upstream_status
        super().__init__(message=message, details=details)


class UpstreamTimeoutError(UpstreamFetchError):
    """Upstream fetch exceeded the configured timeout (500)."""

    def __init__(
        self,
        timeout: float,
        url: str | None = None,
    ) -> None:
        """
        Initialize UpstreamTimeoutError.

        Parameters
        ----------
        timeout : float
            The timeout in seconds that was exceeded.
        url : str | None, optional
            The upstream URL (default: None).
        """
        self.timeout = timeout
        super().__init__(
            message="YouTube did not respond in time",
            details=f"No response after {timeout:g} seconds",
            url=url,
        )


class ExtractionError(APIError):
    """A field the endpoint cannot do without was not found in the page (500).

    Examples
    --------
    >>> raise ExtractionError("Channel ID not found in page")
    """

    status_code: int = 500
    _error_code_value: str = "EXTRACTION_ERROR"
