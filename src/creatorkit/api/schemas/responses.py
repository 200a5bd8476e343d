"""API error envelope schemas."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorCode(str, Enum):
    """Machine-readable error codes, logged alongside each error response.

    4xx Client Errors:
        BAD_REQUEST: Missing or unrecognised URL / identifier (400)
        NOT_FOUND: Upstream page does not exist (404)
        QUOTA_EXCEEDED: Daily upstream call ceiling reached (429)

    5xx Server Errors:
        UPSTREAM_ERROR: Upstream fetch failed or timed out (500)
        EXTRACTION_ERROR: A required field was not found in the page (500)
        DATABASE_ERROR: Quota store failure (500)
        INTERNAL_ERROR: Unexpected server error (500)
    """

    # 4xx Client Errors
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"

    # 5xx Server Errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    EXTRACTION_ERROR = "EXTRACTION_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """Error body returned to the calling page.

    The page shows ``error`` and ``details`` verbatim, so both are short
    human-readable strings. ``remaining_quota`` is only present on quota
    exhaustion.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    error: str
    details: str | None = None
    remaining_quota: int | None = Field(default=None, ge=0)

    def to_content(self) -> dict[str, object]:
        """Serialize with camelCase keys, dropping absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
