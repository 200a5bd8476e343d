"""
HTTP client for public YouTube pages.

Fetches a single page with browser-like headers and one uniform timeout.
There is deliberately no retry or caching layer: each request issues at
most one upstream GET and surfaces its failure immediately.

Classes
-------
PageFetcher
    Async client returning the raw page HTML or raising a typed error.
"""

from __future__ import annotations

import logging

import httpx

from creatorkit.config.settings import settings
from creatorkit.exceptions import (
    NotFoundError,
    UpstreamFetchError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

BROWSER_HEADERS: dict[str, str] = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "DNT": "1",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class PageFetcher:
    """
    Async fetcher for YouTube page HTML.

    Parameters
    ----------
    timeout : float | None
        Seconds before the request is aborted (default: settings value).
    user_agent : str | None
        User-Agent header value (default: settings value).

    Examples
    --------
    >>> fetcher = PageFetcher(timeout=10.0)
    >>> html = await fetcher.fetch("https://www.youtube.com/@somehandle")
    """

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else settings.fetch_timeout_seconds
        self.user_agent = user_agent or settings.user_agent

    @property
    def headers(self) -> dict[str, str]:
        """Request headers sent with every fetch."""
        return {"User-Agent": self.user_agent, **BROWSER_HEADERS}

    async def fetch(self, url: str) -> str:
        """
        Fetch a page and return its body text.

        Parameters
        ----------
        url : str
            Fully qualified page URL.

        Returns
        -------
        str
            Raw response body.

        Raises
        ------
        NotFoundError
            If the upstream responds 404.
        UpstreamTimeoutError
            If no response arrives within the timeout.
        UpstreamFetchError
            For any other non-2xx status or transport failure.
        """
        logger.info("Fetching %s", url)

        async with httpx.AsyncClient(follow_redirects=True) as client:
            try:
                response = await client.get(
                    url,
                    headers=self.headers,
                    timeout=self.timeout,
                )
            except httpx.TimeoutException as e:
                logger.warning(
                    "Fetch of %s timed out after %.1fs (%s)",
                    url,
                    self.timeout,
                    type(e).__name__,
                )
                raise UpstreamTimeoutError(timeout=self.timeout, url=url) from e
            except httpx.HTTPError as e:
                logger.warning(
                    "Fetch of %s failed: %s: %s", url, type(e).__name__, e
                )
                raise UpstreamFetchError(
                    details=f"Could not reach YouTube ({type(e).__name__})",
                    url=url,
                ) from e

        if response.status_code == 404:
            logger.info("Upstream returned 404 for %s", url)
            raise NotFoundError(url=url)

        if not 200 <= response.status_code < 300:
            logger.error(
                "YouTube responded with status %d for %s",
                response.status_code,
                url,
            )
            raise UpstreamFetchError(
                details=f"YouTube returned status {response.status_code}",
                url=url,
                upstream_status=response.status_code,
            )

        html = response.text
        logger.debug("Received %d characters from %s", len(html), url)
        return html
