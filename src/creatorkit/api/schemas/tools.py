"""Request bodies and response wrappers for the tool endpoints.

Result models shared with the service layer live in ``creatorkit.models``;
this module only adds what is specific to the HTTP surface. All bodies
accept camelCase keys (as sent by the browser) or snake_case.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from creatorkit.models.channel import BaseToolModel
from creatorkit.models.creator import ChannelProfile, GeneratedTitle, ThumbnailLink
from creatorkit.models.enums import Niche, TitleTone
from creatorkit.models.youtube_types import VideoId


# =============================================================================
# Requests
# =============================================================================


class UrlRequest(BaseToolModel):
    """Body carrying a user-supplied YouTube URL.

    A missing or blank URL is reported by the service as "URL is required"
    rather than as a schema error, matching what the tool pages expect.
    """

    url: str | None = None


class ChannelDataRequest(BaseToolModel):
    """Body for the quota-limited channel profile lookup."""

    identifier: str | None = None


class RevenueRequest(BaseToolModel):
    """Inputs of the revenue calculator.

    Either ``cpm`` or ``niche`` must be given. An explicit CPM takes
    precedence over the niche average; explicit sponsorship rates take
    precedence over the niche's typical range.
    """

    views: int = Field(ge=0, description="Daily views")
    cpm: float | None = Field(default=None, ge=0)
    niche: Niche | None = None
    is_shorts: bool = False
    include_sponsorship: bool = False
    sponsorship_min: float | None = Field(default=None, ge=0)
    sponsorship_max: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_rate_source(self) -> RevenueRequest:
        """Require a CPM source and an ordered sponsorship range."""
        if self.cpm is None and self.niche is None:
            raise ValueError("Either cpm or niche is required")
        if (
            self.sponsorship_min is not None
            and self.sponsorship_max is not None
            and self.sponsorship_min > self.sponsorship_max
        ):
            raise ValueError("sponsorshipMin must not exceed sponsorshipMax")
        return self


class ChannelRevenueRequest(BaseToolModel):
    """Inputs of the calculator's channel mode."""

    channel_views: int = Field(ge=0, description="Daily channel views")
    avg_view_percentage: float = Field(default=68.0, ge=0, le=100)
    avg_engagement_rate: float = Field(default=45.0, ge=0, le=100)
    cpm: float = Field(default=3.4, ge=0)
    niche: Niche = Niche.SCIENCE_TECH
    include_sponsorship: bool = False


class GenerateTagsRequest(BaseToolModel):
    """Inputs of the tag suggester."""

    description: str = ""
    niche: Niche = Niche.SCIENCE_TECH


class GenerateTitlesRequest(BaseToolModel):
    """Inputs of the title suggester."""

    keyword: str = ""
    secondary: str | None = None
    tone: TitleTone = TitleTone.TUTORIAL


class CompareChannelsRequest(BaseToolModel):
    """Two channels' headline figures."""

    channel_a: ChannelProfile
    channel_b: ChannelProfile


# =============================================================================
# Responses
# =============================================================================


class ThumbnailsResponse(BaseToolModel):
    """Thumbnail links for one video, largest first."""

    video_id: VideoId
    thumbnails: list[ThumbnailLink]


class GeneratedTagsResponse(BaseToolModel):
    """Suggested tags plus the evergreen trending tags."""

    tags: list[str]
    trending_tags: list[str]


class GeneratedTitlesResponse(BaseToolModel):
    """Suggested titles with their scores."""

    titles: list[GeneratedTitle]
