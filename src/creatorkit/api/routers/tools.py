"""Scraping tool endpoints.

This module exposes the endpoints that read a public YouTube page:
- POST /find-channel-id - Resolve a channel URL to its UC channel id
- POST /check-monetization - Look for advertising markers on a page
- POST /extract-tags - Read a video's keyword tags
- POST /fetch-channel-stats - Read view totals and channel age
- POST /fetch-channel-data - Full channel profile, quota limited

Every endpoint issues at most one upstream request. Unrecognised input is
rejected with 400 before anything is fetched.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from creatorkit.api.deps import get_db, get_tools_service
from creatorkit.api.schemas.responses import ErrorResponse
from creatorkit.api.schemas.tools import ChannelDataRequest, UrlRequest
from creatorkit.models.channel import (
    ChannelIdResult,
    ChannelMetadata,
    ChannelStats,
    MonetizationResult,
    TagExtraction,
)
from creatorkit.services.tools import ToolsService

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Missing or unrecognised input"},
    404: {"model": ErrorResponse, "description": "YouTube page not found"},
    500: {"model": ErrorResponse, "description": "Upstream or internal failure"},
}

QUOTA_RESPONSES: dict[int | str, dict[str, object]] = {
    **ERROR_RESPONSES,
    429: {"model": ErrorResponse, "description": "Daily quota exhausted"},
}

router = APIRouter()


@router.post(
    "/find-channel-id",
    response_model=ChannelIdResult,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def find_channel_id(
    body: UrlRequest,
    service: ToolsService = Depends(get_tools_service),
) -> ChannelIdResult:
    """
    Find the permanent channel id behind any channel URL form.

    Accepts ``/channel/UC…``, ``/@handle``, ``/c/name`` and ``/user/name``
    URLs as well as a bare ``UC`` id.
    """
    return await service.find_channel_id(body.url)


@router.post(
    "/check-monetization",
    response_model=MonetizationResult,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def check_monetization(
    body: UrlRequest,
    service: ToolsService = Depends(get_tools_service),
) -> MonetizationResult:
    """Estimate whether a video or channel page carries ads."""
    return await service.check_monetization(body.url)


@router.post("/extract-tags", response_model=TagExtraction, responses=ERROR_RESPONSES)
async def extract_tags(
    body: UrlRequest,
    service: ToolsService = Depends(get_tools_service),
) -> TagExtraction:
    """List the keyword tags a video was published with."""
    return await service.extract_tags(body.url)


@router.post(
    "/fetch-channel-stats", response_model=ChannelStats, responses=ERROR_RESPONSES
)
async def fetch_channel_stats(
    body: UrlRequest,
    service: ToolsService = Depends(get_tools_service),
) -> ChannelStats:
    """Read a channel's totals for the revenue calculator's channel mode."""
    return await service.fetch_channel_stats(body.url)


@router.post(
    "/fetch-channel-data",
    response_model=ChannelMetadata,
    response_model_exclude_none=True,
    responses=QUOTA_RESPONSES,
)
async def fetch_channel_data(
    body: ChannelDataRequest,
    db: AsyncSession = Depends(get_db),
    service: ToolsService = Depends(get_tools_service),
) -> ChannelMetadata:
    """
    Build a full channel profile.

    Every call with a valid identifier spends one unit of the shared daily
    quota, even if the fetch then fails. The response reports what is
    left in ``remainingQuota``; once the quota is used up the response is
    429 with ``remainingQuota: 0``.
    """
    return await service.fetch_channel_data(db, body.identifier)
