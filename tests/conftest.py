"""
Pytest configuration and fixtures for creatorkit tests.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from creatorkit.config.settings import Settings
from creatorkit.db.models import Base

CHANNEL_ID = "UCabcdefghijklmnopqrstuv"
VIDEO_ID = "dQw4w9WgXcQ"


@pytest.fixture
def mock_settings() -> Settings:
    """Settings for testing, backed by an in-memory quota store."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        daily_quota_limit=10000,
        fetch_timeout_seconds=10.0,
    )


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Session on a fresh in-memory SQLite database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def channel_page_html() -> str:
    """A channel home page with meta tags and an inlined ytInitialData blob."""
    return (
        "<html><head>"
        '<meta property="og:title" content="Test Channel">'
        '<meta property="og:description" content="Videos about testing things">'
        '<meta property="og:image" content="https://yt3.ggpht.com/avatar.jpg">'
        '<meta name="keywords" content="testing, python, tutorials">'
        "</head><body><script>var ytInitialData = {"
        f'"channelId":"{CHANNEL_ID}",'
        '"canonicalChannelUrl":"https://www.youtube.com/@testchannel",'
        '"subscriberCountText":{"simpleText":"1.2M subscribers"},'
        '"videosCountText":{"runs":[{"text":"345"}]},'
        '"viewCountText":{"simpleText":"12,345,678 views"},'
        '"country":"United States",'
        '"joinedDateText":{"runs":[{"text":"Joined "},{"text":"Jan 15, 2020"}]},'
        '"banner":{"thumbnails":[{"url":"https://yt3.ggpht.com/banner.jpg"}]},'
        '"adSlot":{}'
        "};</script></body></html>"
    )


@pytest.fixture
def channel_about_html() -> str:
    """A channel About page carrying the numeric statistics."""
    return (
        "<html><body><script>var ytInitialData = {"
        '"title":"Test Channel","description":"Videos about testing things",'
        '"subscriberCountText":{"accessibility":{"accessibilityData":'
        '{"label":"1.2 million subscribers"}}},'
        '"viewCountText":{"simpleText":"3,650,000 views"},'
        '"videosCountText":{"runs":[{"text":"120"},{"text":" videos"}]},'
        '"joinedDateText":{"runs":[{"text":"Joined "},{"text":"Jan 1, 2020"}]}'
        "};</script></body></html>"
    )


@pytest.fixture
def video_page_html() -> str:
    """A watch page with keyword tags and strong monetization markers."""
    return (
        "<html><head>"
        '<meta name="title" content="Test Video">'
        '<meta name="keywords" content="python, testing, pytest, ">'
        '<meta property="og:title" content="Test Video">'
        "</head><body><script>var ytInitialPlayerResponse = {"
        '"isMonetized":true,"playerAds":[{}]'
        "};</script></body></html>"
    )
