"""
Tools service: the request pipeline behind the scraping endpoints.

Each operation follows the same path: parse the user's input, spend quota
where the endpoint is gated, fetch one YouTube page and run the matching
extractor. Input errors are raised before any network or quota work.

Failures the caller can act on (bad input, missing page, exhausted quota)
pass through unchanged. Anything else is reported as the endpoint's own
generic error with the underlying cause in ``details``.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from creatorkit.config.settings import settings
from creatorkit.exceptions import (
    APIError,
    BadRequestError,
    CreatorKitError,
    NotFoundError,
    QuotaExceededError,
)
from creatorkit.models.channel import (
    ChannelIdResult,
    ChannelMetadata,
    ChannelStats,
    MonetizationResult,
    TagExtraction,
)
from creatorkit.models.identifiers import YouTubeIdentifier, parse_identifier
from creatorkit.services.extraction import (
    analyze_monetization,
    extract_channel_id_result,
    extract_channel_metadata,
    extract_channel_stats,
    extract_tags,
)
from creatorkit.services.page_fetcher import PageFetcher
from creatorkit.services.quota import QuotaGate

logger = logging.getLogger(__name__)

_PASS_THROUGH = (BadRequestError, NotFoundError, QuotaExceededError)


def _describe(error: Exception) -> str:
    """Human-readable cause for the ``details`` field."""
    if isinstance(error, APIError) and error.details:
        return f"{error.message}: {error.details}"
    if isinstance(error, CreatorKitError):
        return error.message
    return str(error) or type(error).__name__


@contextmanager
def endpoint_errors(message: str) -> Iterator[None]:
    """
    Report unexpected failures as ``message`` with the cause as details.

    Parameters
    ----------
    message : str
        The endpoint's generic error, e.g. "Failed to extract tags".

    Raises
    ------
    APIError
        Wrapping any exception other than the pass-through types.
    """
    try:
        yield
    except _PASS_THROUGH:
        raise
    except APIError as e:
        logger.warning("%s: %s", message, _describe(e))
        raise APIError(message, details=_describe(e)) from e
    except Exception as e:
        logger.exception("%s", message)
        raise APIError(message, details=_describe(e)) from e


def _require(raw: str | None, missing: str) -> str:
    if raw is None or not raw.strip():
        raise BadRequestError(missing)
    return raw


class ToolsService:
    """
    Orchestrates parse, quota, fetch and extract for each scraping tool.

    Parameters
    ----------
    fetcher : PageFetcher
        Client used for the single upstream fetch per request.
    quota_gate : QuotaGate | None
        Gate for the quota-limited endpoint (default: built from settings).
    base_url : str | None
        YouTube site root for constructed page URLs (default: settings).
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        quota_gate: QuotaGate | None = None,
        base_url: str | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.quota_gate = quota_gate or QuotaGate(ceiling=settings.daily_quota_limit)
        self.base_url = base_url or settings.youtube_base_url

    def _parse(self, raw: str, invalid: str) -> YouTubeIdentifier:
        identifier = parse_identifier(raw)
        if identifier is None:
            logger.info("Rejected unrecognised input %r", raw)
            raise BadRequestError(invalid)
        return identifier

    async def _fetch(self, identifier: YouTubeIdentifier, suffix: str = "") -> str:
        return await self.fetcher.fetch(identifier.page_url(self.base_url) + suffix)

    async def find_channel_id(self, url: str | None) -> ChannelIdResult:
        """
        Resolve any channel URL form to its ``UC`` channel id.

        Raises
        ------
        BadRequestError
            If the input is blank or not a channel URL.
        APIError
            "Unable to find channel ID" for fetch or extraction failures.
        """
        raw = _require(url, "URL is required")
        identifier = self._parse(raw, "Invalid YouTube URL")
        if not identifier.is_channel:
            raise BadRequestError(
                "Invalid YouTube URL",
                details="Enter a channel URL or channel ID",
            )

        with endpoint_errors("Unable to find channel ID"):
            html = await self._fetch(identifier)
            return extract_channel_id_result(html, self.base_url)

    async def check_monetization(self, url: str | None) -> MonetizationResult:
        """
        Look for advertising markers on a video or channel page.

        Raises
        ------
        BadRequestError
            If the input is blank or not a YouTube URL.
        NotFoundError
            If YouTube reports the page does not exist.
        APIError
            "Failed to check monetization" for any other failure.
        """
        raw = _require(url, "URL is required")
        identifier = self._parse(
            raw, "Invalid YouTube URL. Please provide a valid video or channel URL."
        )

        with endpoint_errors("Failed to check monetization"):
            html = await self._fetch(identifier)
            return analyze_monetization(html)

    async def extract_tags(self, url: str | None) -> TagExtraction:
        """Read the keyword tags of a video."""
        raw = _require(url, "URL is required")
        identifier = self._parse(raw, "Invalid YouTube URL")
        if not identifier.is_video:
            raise BadRequestError(
                "Invalid YouTube URL", details="Enter a YouTube video URL"
            )

        with endpoint_errors("Failed to extract tags"):
            html = await self._fetch(identifier)
            return extract_tags(html)

    async def fetch_channel_stats(
        self, url: str | None, today: datetime.date | None = None
    ) -> ChannelStats:
        """Read a channel's view totals and age from its About page."""
        raw = _require(url, "URL is required")
        identifier = self._parse(raw, "Invalid YouTube URL")
        if not identifier.is_channel:
            raise BadRequestError(
                "Invalid YouTube URL", details="Enter a YouTube channel URL"
            )

        with endpoint_errors("Failed to fetch channel statistics"):
            html = await self._fetch(identifier, "/about")
            return extract_channel_stats(html, today)

    async def fetch_channel_data(
        self,
        session: AsyncSession,
        identifier: str | None,
        day: datetime.date | None = None,
    ) -> ChannelMetadata:
        """
        Build a full channel profile, spending one unit of daily quota.

        The identifier is validated before any quota is spent. The quota
        unit is committed as soon as it is granted, so a later upstream
        failure still counts against the day.

        Parameters
        ----------
        session : AsyncSession
            Session for the quota store.
        identifier : str | None
            Channel page URL or bare ``UC`` channel id.
        day : datetime.date | None
            Quota day (default: today, UTC).

        Raises
        ------
        BadRequestError
            If the identifier is blank or not a channel.
        QuotaExceededError
            If the daily ceiling has been reached.
        APIError
            "Failed to fetch channel data" for any other failure.
        """
        raw = _require(identifier, "Channel identifier is required")
        parsed = parse_identifier(raw)
        if parsed is None or not parsed.is_channel:
            raise BadRequestError(
                "Could not extract channel ID from the provided identifier"
            )

        with endpoint_errors("Failed to fetch channel data"):
            decision = await self.quota_gate.check(session, day)
            await session.commit()
            if not decision.allowed:
                raise QuotaExceededError(daily_limit=self.quota_gate.ceiling)

            html = await self._fetch(parsed)
            metadata = extract_channel_metadata(html)

        logger.info(
            "Fetched channel data for %s (%d quota left)",
            metadata.channel_id or parsed.value,
            decision.remaining,
        )
        return metadata.model_copy(update={"remaining_quota": decision.remaining})
