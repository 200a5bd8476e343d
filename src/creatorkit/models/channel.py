"""
Pydantic models for metadata extracted from YouTube pages.

These are the result shapes of the page-scraping endpoints. Field names
are snake_case in Python and camelCase on the wire, handled via Pydantic's
alias_generator.

Counts that YouTube renders for humans ("1.2M subscribers") are kept as
``DisplayCount`` strings; only the stats endpoint carries genuine integers,
parsed from separate numeric text.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from creatorkit.models.enums import Confidence
from creatorkit.models.youtube_types import ChannelId, DisplayCount

NO_INDICATORS_MESSAGE = "No monetization indicators found"


class BaseToolModel(BaseModel):
    """
    Base model for all tool results.

    Configures:
    - populate_by_name: Allow both camelCase (API) and snake_case (Python)
    - alias_generator: Auto-convert snake_case fields to camelCase for API
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
    )


class ChannelIdResult(BaseToolModel):
    """Result of the channel-id lookup."""

    channel_id: ChannelId
    channel_name: str
    channel_handle: str | None = None
    channel_url: str


class ChannelInfo(BaseToolModel):
    """Context shown next to a monetization verdict."""

    title: str | None = None
    subscriber_count: DisplayCount | None = None


class MonetizationResult(BaseToolModel):
    """
    Outcome of the monetization heuristics.

    Attributes
    ----------
    is_monetized : bool
        True if at least one indicator fired.
    confidence : Confidence
        Strongest confidence any fired indicator granted.
    indicators : list[str]
        Human-readable descriptions of fired indicators in rule order, or
        the single "no indicators" sentinel.
    channel_info : ChannelInfo | None
        Title and subscriber count, when present on the page.
    """

    is_monetized: bool = False
    confidence: Confidence = Confidence.LOW
    indicators: list[str] = Field(default_factory=lambda: [NO_INDICATORS_MESSAGE])
    channel_info: ChannelInfo | None = None


class TagExtraction(BaseToolModel):
    """Tags read from a video page's keywords meta tag."""

    success: bool = True
    tags: list[str] = Field(default_factory=list)
    title: str = ""
    total_tags: int = 0


class ChannelStats(BaseToolModel):
    """Channel statistics used by the revenue calculator's channel mode."""

    success: bool = True
    channel_name: str = ""
    subscriber_count: DisplayCount = "0"
    total_views: int = 0
    video_count: int = 0
    joined_date: str = ""
    days_since_joined: int = 365
    daily_views: int = 0


class ChannelMetadata(BaseToolModel):
    """
    Full channel profile assembled from a channel or video page.

    Every field except ``channel_id`` is best effort: absent page data
    leaves the field empty rather than failing the request.
    """

    channel_id: ChannelId | None = None
    channel_name: str | None = None
    channel_handle: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    banner_url: str | None = None
    subscriber_count: DisplayCount | None = None
    video_count: DisplayCount | None = None
    view_count: DisplayCount | None = None
    country: str | None = None
    published_at: str | None = None
    tags: list[str] = Field(default_factory=list)
    monetization_indicators: list[str] = Field(
        default_factory=lambda: [NO_INDICATORS_MESSAGE]
    )
    is_monetized: bool = False
    confidence: Confidence = Confidence.LOW
    remaining_quota: int | None = Field(default=None, ge=0)
