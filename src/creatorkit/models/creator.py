"""
Pydantic models for the offline creator helpers.

Thumbnail links, title suggestions and channel comparison results. None
of these require a network call.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from creatorkit.models.channel import BaseToolModel


class ThumbnailLink(BaseToolModel):
    """One downloadable thumbnail size."""

    url: str
    resolution: str
    width: int
    height: int


class GeneratedTitle(BaseToolModel):
    """A suggested title and its 1-5 quality score."""

    text: str
    score: int = Field(ge=1, le=5)


class ChannelProfile(BaseToolModel):
    """Channel figures entered by the user for comparison."""

    name: str = ""
    subscribers: int = Field(default=0, ge=0)
    total_views: int = Field(default=0, ge=0)
    video_count: int = Field(default=0, ge=0)
    created_date: date | None = None
    category: str = ""


class ChannelMetrics(BaseToolModel):
    """Derived comparison metrics for one channel."""

    avg_views_per_video: float
    engagement_rate: float
    uploads_per_month: float
    score: int = Field(ge=0, le=100)


class ChannelComparison(BaseToolModel):
    """Side-by-side metrics and the higher-scoring channel."""

    channel_a: ChannelMetrics
    channel_b: ChannelMetrics
    winner: str | None = None
