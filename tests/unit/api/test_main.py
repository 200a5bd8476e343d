"""Tests for the application wiring: lifespan, client IP and routes."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from creatorkit.api.main import _get_client_ip, app, lifespan


class TestLifespan:
    """Tests for startup and shutdown."""

    async def test_creates_tables_and_closes(self) -> None:
        with patch("creatorkit.api.main.db_manager") as mock_manager:
            mock_manager.create_tables = AsyncMock()
            mock_manager.close = AsyncMock()

            async with lifespan(app):
                mock_manager.create_tables.assert_awaited_once()
                mock_manager.close.assert_not_awaited()

            mock_manager.close.assert_awaited_once()


class TestGetClientIp:
    """Tests for client IP extraction."""

    def test_forwarded_for_first_entry(self) -> None:
        request = MagicMock()
        request.headers = {"x-forwarded-for": "203.0.113.7, 10.0.0.1"}

        assert _get_client_ip(request) == "203.0.113.7"

    def test_direct_client(self) -> None:
        request = MagicMock()
        request.headers = {}
        request.client.host = "192.0.2.1"

        assert _get_client_ip(request) == "192.0.2.1"

    def test_unknown_client(self) -> None:
        request = MagicMock()
        request.headers = {}
        request.client = None

        assert _get_client_ip(request) == "unknown"


@pytest.mark.parametrize(
    "path",
    [
        "/api/v1/health",
        "/api/v1/find-channel-id",
        "/api/v1/check-monetization",
        "/api/v1/extract-tags",
        "/api/v1/fetch-channel-stats",
        "/api/v1/fetch-channel-data",
        "/api/v1/revenue-estimate",
        "/api/v1/revenue-estimate/channel",
        "/api/v1/thumbnails",
        "/api/v1/generate-tags",
        "/api/v1/generate-titles",
        "/api/v1/compare-channels",
    ],
)
def test_routes_mounted(path: str) -> None:
    assert path in {route.path for route in app.routes}  # type: ignore[attr-defined]


def test_app_title_uses_configured_name() -> None:
    assert app.title == "creatorkit API"
