"""
Tests for the scraping tool endpoints.

The page fetcher, quota gate and database session are replaced through
``app.dependency_overrides``; no request leaves the process.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from creatorkit.api.deps import get_db, get_page_fetcher, get_quota_gate
from creatorkit.api.main import app
from creatorkit.exceptions import NotFoundError, UpstreamFetchError, UpstreamTimeoutError
from creatorkit.services.page_fetcher import PageFetcher
from creatorkit.services.quota import QuotaDecision, QuotaGate

pytestmark = pytest.mark.asyncio

CHANNEL_ID = "UCabcdefghijklmnopqrstuv"
VIDEO_ID = "dQw4w9WgXcQ"
HANDLE_URL = "https://www.youtube.com/@testchannel"


@pytest.fixture
def fetcher() -> MagicMock:
    mock = MagicMock(spec=PageFetcher)
    mock.fetch = AsyncMock(return_value="<html></html>")
    return mock


@pytest.fixture
def quota_gate() -> MagicMock:
    gate = MagicMock(spec=QuotaGate)
    gate.ceiling = 10000
    gate.check = AsyncMock(return_value=QuotaDecision(allowed=True, remaining=9999))
    return gate


@pytest.fixture
async def async_client(
    fetcher: MagicMock, quota_gate: MagicMock
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with mocked dependencies."""

    async def mock_get_db() -> AsyncGenerator[AsyncMock, None]:
        yield AsyncMock(spec=AsyncSession)

    app.dependency_overrides[get_db] = mock_get_db
    app.dependency_overrides[get_page_fetcher] = lambda: fetcher
    app.dependency_overrides[get_quota_gate] = lambda: quota_gate

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestFindChannelIdEndpoint:
    """Tests for POST /api/v1/find-channel-id."""

    async def test_returns_channel_id(
        self, async_client: AsyncClient, fetcher: MagicMock, channel_page_html: str
    ) -> None:
        fetcher.fetch.return_value = channel_page_html

        response = await async_client.post(
            "/api/v1/find-channel-id", json={"url": HANDLE_URL}
        )

        assert response.status_code == 200
        assert response.json() == {
            "channelId": CHANNEL_ID,
            "channelName": "Test Channel",
            "channelHandle": "testchannel",
            "channelUrl": f"https://www.youtube.com/channel/{CHANNEL_ID}",
        }

    async def test_missing_url_is_400_without_fetch(
        self, async_client: AsyncClient, fetcher: MagicMock
    ) -> None:
        response = await async_client.post("/api/v1/find-channel-id", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "URL is required"}
        fetcher.fetch.assert_not_awaited()

    async def test_invalid_url_is_400_without_fetch(
        self, async_client: AsyncClient, fetcher: MagicMock
    ) -> None:
        response = await async_client.post(
            "/api/v1/find-channel-id", json={"url": "https://example.com/@someone"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid YouTube URL"
        fetcher.fetch.assert_not_awaited()

    async def test_upstream_404(
        self, async_client: AsyncClient, fetcher: MagicMock
    ) -> None:
        fetcher.fetch.side_effect = NotFoundError(url=HANDLE_URL)

        response = await async_client.post(
            "/api/v1/find-channel-id", json={"url": HANDLE_URL}
        )

        assert response.status_code == 404
        assert response.json()["error"] == "Channel or video not found"

    async def test_missing_id_in_page_is_500(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/v1/find-channel-id", json={"url": HANDLE_URL}
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "Unable to find channel ID",
            "details": "Channel ID not found in page",
        }


class TestCheckMonetizationEndpoint:
    """Tests for POST /api/v1/check-monetization."""

    async def test_monetized_video(
        self, async_client: AsyncClient, fetcher: MagicMock, video_page_html: str
    ) -> None:
        fetcher.fetch.return_value = video_page_html

        response = await async_client.post(
            "/api/v1/check-monetization", json={"url": f"https://youtu.be/{VIDEO_ID}"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["isMonetized"] is True
        assert data["confidence"] == "high"
        assert data["indicators"] == [
            "Direct monetization flag detected",
            "Player ads configuration found",
        ]
        assert data["channelInfo"] == {"title": "Test Video"}

    async def test_no_indicators(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/v1/check-monetization", json={"url": HANDLE_URL}
        )

        assert response.status_code == 200
        assert response.json() == {
            "isMonetized": False,
            "confidence": "low",
            "indicators": ["No monetization indicators found"],
        }

    async def test_invalid_url(self, async_client: AsyncClient, fetcher: MagicMock) -> None:
        response = await async_client.post(
            "/api/v1/check-monetization", json={"url": "not a url"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Invalid YouTube URL. Please provide a valid video or channel URL."
        )
        fetcher.fetch.assert_not_awaited()

    async def test_upstream_error_is_500_with_details(
        self, async_client: AsyncClient, fetcher: MagicMock
    ) -> None:
        fetcher.fetch.side_effect = UpstreamFetchError(
            details="YouTube returned status 503", upstream_status=503
        )

        response = await async_client.post(
            "/api/v1/check-monetization", json={"url": HANDLE_URL}
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to check monetization",
            "details": "Failed to fetch YouTube page: YouTube returned status 503",
        }


class TestExtractTagsEndpoint:
    """Tests for POST /api/v1/extract-tags."""

    async def test_extracts_tags(
        self, async_client: AsyncClient, fetcher: MagicMock, video_page_html: str
    ) -> None:
        fetcher.fetch.return_value = video_page_html

        response = await async_client.post(
            "/api/v1/extract-tags",
            json={"url": f"https://www.youtube.com/watch?v={VIDEO_ID}"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "tags": ["python", "testing", "pytest"],
            "title": "Test Video",
            "totalTags": 3,
        }

    async def test_timeout(self, async_client: AsyncClient, fetcher: MagicMock) -> None:
        fetcher.fetch.side_effect = UpstreamTimeoutError(timeout=10.0)

        response = await async_client.post(
            "/api/v1/extract-tags", json={"url": VIDEO_ID}
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to extract tags"
        assert "10 seconds" in response.json()["details"]


class TestFetchChannelStatsEndpoint:
    """Tests for POST /api/v1/fetch-channel-stats."""

    async def test_stats(
        self, async_client: AsyncClient, fetcher: MagicMock, channel_about_html: str
    ) -> None:
        fetcher.fetch.return_value = channel_about_html

        response = await async_client.post(
            "/api/v1/fetch-channel-stats", json={"url": HANDLE_URL}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["channelName"] == "Test Channel"
        assert data["totalViews"] == 3650000
        assert data["videoCount"] == 120
        assert data["joinedDate"] == "Jan 1, 2020"
        assert data["daysSinceJoined"] > 365
        fetcher.fetch.assert_awaited_once_with(HANDLE_URL + "/about")


class TestFetchChannelDataEndpoint:
    """Tests for POST /api/v1/fetch-channel-data."""

    async def test_profile_with_remaining_quota(
        self,
        async_client: AsyncClient,
        fetcher: MagicMock,
        quota_gate: MagicMock,
        channel_page_html: str,
    ) -> None:
        fetcher.fetch.return_value = channel_page_html

        response = await async_client.post(
            "/api/v1/fetch-channel-data", json={"identifier": CHANNEL_ID}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["channelId"] == CHANNEL_ID
        assert data["subscriberCount"] == "1.2M subscribers"
        assert data["remainingQuota"] == 9999
        quota_gate.check.assert_awaited_once()

    async def test_quota_exhausted_is_429(
        self, async_client: AsyncClient, fetcher: MagicMock, quota_gate: MagicMock
    ) -> None:
        quota_gate.check.return_value = QuotaDecision(allowed=False, remaining=0)

        response = await async_client.post(
            "/api/v1/fetch-channel-data", json={"identifier": HANDLE_URL}
        )

        assert response.status_code == 429
        assert response.json() == {
            "error": "Daily API limit reached (10,000 requests). Please try again tomorrow.",
            "remainingQuota": 0,
        }
        fetcher.fetch.assert_not_awaited()

    @pytest.mark.parametrize(
        ("body", "error"),
        [
            ({}, "Channel identifier is required"),
            ({"identifier": "   "}, "Channel identifier is required"),
            (
                {"identifier": "https://example.com/channel/x"},
                "Could not extract channel ID from the provided identifier",
            ),
        ],
    )
    async def test_bad_identifier_spends_no_quota(
        self,
        async_client: AsyncClient,
        fetcher: MagicMock,
        quota_gate: MagicMock,
        body: dict[str, str],
        error: str,
    ) -> None:
        response = await async_client.post("/api/v1/fetch-channel-data", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == error
        quota_gate.check.assert_not_awaited()
        fetcher.fetch.assert_not_awaited()


class TestRequestEnvelope:
    """Tests for behaviour shared by every endpoint."""

    @pytest.mark.parametrize(
        ("path", "field"),
        [
            ("/api/v1/find-channel-id", "url"),
            ("/api/v1/check-monetization", "url"),
            ("/api/v1/extract-tags", "url"),
            ("/api/v1/fetch-channel-stats", "url"),
            ("/api/v1/fetch-channel-data", "identifier"),
        ],
    )
    @pytest.mark.parametrize(
        "foreign_url",
        [
            f"https://example.com/watch?v={VIDEO_ID}",
            f"https://example.com/channel/{CHANNEL_ID}",
            "https://youtube.com.example.org/@testchannel",
        ],
    )
    async def test_non_youtube_url_is_400_without_fetch(
        self,
        async_client: AsyncClient,
        fetcher: MagicMock,
        quota_gate: MagicMock,
        path: str,
        field: str,
        foreign_url: str,
    ) -> None:
        response = await async_client.post(path, json={field: foreign_url})

        assert response.status_code == 400
        assert "error" in response.json()
        fetcher.fetch.assert_not_awaited()
        quota_gate.check.assert_not_awaited()

    async def test_wrong_type_is_400(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/api/v1/extract-tags", json={"url": 42})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid request body"
        assert data["details"].startswith("url:")

    async def test_request_id_echoed(
        self, async_client: AsyncClient, fetcher: MagicMock, video_page_html: str
    ) -> None:
        fetcher.fetch.return_value = video_page_html

        response = await async_client.post(
            "/api/v1/extract-tags",
            json={"url": VIDEO_ID},
            headers={"X-Request-ID": "req-123"},
        )

        assert response.headers["X-Request-ID"] == "req-123"

    async def test_request_id_on_error_responses(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/v1/extract-tags", json={}, headers={"X-Request-ID": "req-456"}
        )

        assert response.status_code == 400
        assert response.headers["X-Request-ID"] == "req-456"

    async def test_cors_preflight(self, async_client: AsyncClient) -> None:
        response = await async_client.options(
            "/api/v1/check-monetization",
            headers={
                "Origin": "https://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] in ("*", "https://example.com")
