"""Calculator endpoints.

Offline tools that work only from the request body and static tables:
- POST /revenue-estimate - Project ad and sponsorship revenue
- POST /revenue-estimate/channel - Project revenue for an existing channel
- POST /thumbnails - Thumbnail links for a video
- POST /generate-tags - Tag suggestions
- POST /generate-titles - Scored title suggestions
- POST /compare-channels - Score two channels side by side

None of these fetch anything or spend quota.
"""

from __future__ import annotations

from fastapi import APIRouter

from creatorkit.api.schemas.responses import ErrorResponse
from creatorkit.api.schemas.tools import (
    ChannelRevenueRequest,
    CompareChannelsRequest,
    GeneratedTagsResponse,
    GeneratedTitlesResponse,
    GenerateTagsRequest,
    GenerateTitlesRequest,
    RevenueRequest,
    ThumbnailsResponse,
    UrlRequest,
)
from creatorkit.config.settings import settings
from creatorkit.exceptions import BadRequestError
from creatorkit.models.creator import ChannelComparison
from creatorkit.models.identifiers import extract_video_id
from creatorkit.models.revenue import RevenueEstimate
from creatorkit.services import creator_tools, revenue

BAD_REQUEST_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
}

router = APIRouter()


@router.post(
    "/revenue-estimate",
    response_model=RevenueEstimate,
    responses=BAD_REQUEST_RESPONSES,
)
async def revenue_estimate(body: RevenueRequest) -> RevenueEstimate:
    """Project daily, weekly, monthly and yearly revenue from daily views."""
    return revenue.project_revenue(
        views=body.views,
        cpm=body.cpm,
        niche=body.niche,
        shorts=body.is_shorts,
        include_sponsorship=body.include_sponsorship,
        sponsorship_min=body.sponsorship_min,
        sponsorship_max=body.sponsorship_max,
        revenue_share=settings.revenue_share,
    )


@router.post(
    "/revenue-estimate/channel",
    response_model=RevenueEstimate,
    responses=BAD_REQUEST_RESPONSES,
)
async def channel_revenue_estimate(body: ChannelRevenueRequest) -> RevenueEstimate:
    """Project revenue for a channel, discounting views by retention and engagement."""
    return revenue.estimate_for_channel(
        channel_views=body.channel_views,
        avg_view_percentage=body.avg_view_percentage,
        avg_engagement_rate=body.avg_engagement_rate,
        cpm=body.cpm,
        niche=body.niche,
        include_sponsorship=body.include_sponsorship,
        revenue_share=settings.revenue_share,
    )


@router.post(
    "/thumbnails",
    response_model=ThumbnailsResponse,
    responses=BAD_REQUEST_RESPONSES,
)
async def thumbnails(body: UrlRequest) -> ThumbnailsResponse:
    """List downloadable thumbnail sizes for a video URL or id."""
    if body.url is None or not body.url.strip():
        raise BadRequestError("URL is required")

    video_id = extract_video_id(body.url)
    if video_id is None:
        raise BadRequestError(
            "Invalid YouTube URL", details="Enter a YouTube video URL or video ID"
        )

    return ThumbnailsResponse(
        video_id=video_id, thumbnails=creator_tools.thumbnail_urls(video_id)
    )


@router.post("/generate-tags", response_model=GeneratedTagsResponse)
async def generate_tags(body: GenerateTagsRequest) -> GeneratedTagsResponse:
    """Suggest tags for a niche, enriched with words from the description."""
    return GeneratedTagsResponse(
        tags=creator_tools.generate_tags(body.description, body.niche),
        trending_tags=list(creator_tools.TRENDING_TAGS),
    )


@router.post(
    "/generate-titles",
    response_model=GeneratedTitlesResponse,
    responses=BAD_REQUEST_RESPONSES,
)
async def generate_titles(body: GenerateTitlesRequest) -> GeneratedTitlesResponse:
    """Suggest up to 15 scored titles for a keyword."""
    return GeneratedTitlesResponse(
        titles=creator_tools.generate_titles(
            keyword=body.keyword, secondary=body.secondary, tone=body.tone
        )
    )


@router.post("/compare-channels", response_model=ChannelComparison)
async def compare_channels(body: CompareChannelsRequest) -> ChannelComparison:
    """Score two channels and name the stronger one."""
    return creator_tools.compare_channels(body.channel_a, body.channel_b)
