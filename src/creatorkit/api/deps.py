"""FastAPI dependencies for API endpoints."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from creatorkit.config.database import db_manager
from creatorkit.config.settings import settings
from creatorkit.services.page_fetcher import PageFetcher
from creatorkit.services.quota import QuotaGate
from creatorkit.services.tools import ToolsService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for the quota-store session.

    Yields an async SQLAlchemy session that auto-commits on success
    and rolls back on exception.

    Yields
    ------
    AsyncSession
        An async SQLAlchemy session for database operations.
    """
    async for session in db_manager.get_session():
        yield session


def get_page_fetcher() -> PageFetcher:
    """Page fetcher configured from settings; holds no per-request state."""
    return PageFetcher(
        timeout=settings.fetch_timeout_seconds,
        user_agent=settings.user_agent,
    )


def get_quota_gate() -> QuotaGate:
    """Quota gate using the configured daily ceiling."""
    return QuotaGate(ceiling=settings.daily_quota_limit)


def get_tools_service(
    fetcher: PageFetcher = Depends(get_page_fetcher),
    quota_gate: QuotaGate = Depends(get_quota_gate),
) -> ToolsService:
    """
    Dependency for the scraping pipeline.

    Composed from the fetcher and gate dependencies so either can be
    replaced through ``app.dependency_overrides``.
    """
    return ToolsService(
        fetcher=fetcher,
        quota_gate=quota_gate,
        base_url=settings.youtube_base_url,
    )
