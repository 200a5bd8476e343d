"""Tests for FastAPI dependency providers."""

from __future__ import annotations

from unittest.mock import MagicMock

from creatorkit.api.deps import get_page_fetcher, get_quota_gate, get_tools_service
from creatorkit.config.settings import settings
from creatorkit.services.page_fetcher import PageFetcher
from creatorkit.services.quota import QuotaGate
from creatorkit.services.tools import ToolsService


def test_page_fetcher_uses_settings() -> None:
    fetcher = get_page_fetcher()

    assert isinstance(fetcher, PageFetcher)
    assert fetcher.timeout == settings.fetch_timeout_seconds
    assert fetcher.user_agent == settings.user_agent


def test_quota_gate_uses_configured_ceiling() -> None:
    gate = get_quota_gate()

    assert isinstance(gate, QuotaGate)
    assert gate.ceiling == settings.daily_quota_limit


def test_tools_service_composed_from_dependencies() -> None:
    fetcher = MagicMock(spec=PageFetcher)
    gate = MagicMock(spec=QuotaGate)

    service = get_tools_service(fetcher=fetcher, quota_gate=gate)

    assert isinstance(service, ToolsService)
    assert service.fetcher is fetcher
    assert service.quota_gate is gate
    assert service.base_url == settings.youtube_base_url
