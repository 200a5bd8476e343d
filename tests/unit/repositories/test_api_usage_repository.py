"""
Tests for ApiUsageRepository against an in-memory SQLite quota store.
"""

from __future__ import annotations

import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from creatorkit.db.models import ApiUsage
from creatorkit.exceptions import RepositoryError
from creatorkit.repositories.api_usage_repository import ApiUsageRepository

pytestmark = pytest.mark.asyncio

DAY = datetime.date(2025, 3, 14)


@pytest.fixture
def repository() -> ApiUsageRepository:
    return ApiUsageRepository()


class TestGetByDate:
    """Tests for reading a day's usage row."""

    async def test_unused_day_returns_none(
        self, repository: ApiUsageRepository, db_session: AsyncSession
    ) -> None:
        assert await repository.get_by_date(db_session, DAY) is None

    async def test_returns_existing_row(
        self, repository: ApiUsageRepository, db_session: AsyncSession
    ) -> None:
        db_session.add(ApiUsage(date=DAY, youtube_api_calls=7))
        await db_session.commit()

        usage = await repository.get_by_date(db_session, DAY)

        assert usage is not None
        assert usage.youtube_api_calls == 7

    async def test_database_failure_raises_repository_error(
        self, repository: ApiUsageRepository
    ) -> None:
        session = MagicMock(spec=AsyncSession)
        session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("disk I/O error"))
        )

        with pytest.raises(RepositoryError) as exc_info:
            await repository.get_by_date(session, DAY)

        assert exc_info.value.operation == "get"
        assert isinstance(exc_info.value.original_error, OperationalError)


class TestConsume:
    """Tests for the atomic quota upsert."""

    async def test_first_call_creates_row(
        self, repository: ApiUsageRepository, db_session: AsyncSession
    ) -> None:
        count = await repository.consume(db_session, DAY, ceiling=10)
        await db_session.commit()

        assert count == 1
        usage = await repository.get_by_date(db_session, DAY)
        assert usage is not None
        assert usage.youtube_api_calls == 1

    async def test_subsequent_calls_increment(
        self, repository: ApiUsageRepository, db_session: AsyncSession
    ) -> None:
        counts = [await repository.consume(db_session, DAY, ceiling=10) for _ in range(3)]

        assert counts == [1, 2, 3]

    async def test_ceiling_reached_returns_none_without_writing(
        self, repository: ApiUsageRepository, db_session: AsyncSession
    ) -> None:
        first = await repository.consume(db_session, DAY, ceiling=2)
        second = await repository.consume(db_session, DAY, ceiling=2)
        third = await repository.consume(db_session, DAY, ceiling=2)
        await db_session.commit()

        assert (first, second, third) == (1, 2, None)
        usage = await repository.get_by_date(db_session, DAY)
        assert usage is not None
        assert usage.youtube_api_calls == 2

    async def test_days_are_counted_separately(
        self, repository: ApiUsageRepository, db_session: AsyncSession
    ) -> None:
        next_day = DAY + datetime.timedelta(days=1)

        await repository.consume(db_session, DAY, ceiling=1)
        denied = await repository.consume(db_session, DAY, ceiling=1)
        fresh = await repository.consume(db_session, next_day, ceiling=1)

        assert denied is None
        assert fresh == 1

    async def test_unsupported_dialect_raises(
        self, repository: ApiUsageRepository
    ) -> None:
        session = MagicMock(spec=AsyncSession)
        session.get_bind.return_value.dialect.name = "mysql"

        with pytest.raises(RepositoryError, match="mysql"):
            await repository.consume(session, DAY, ceiling=10)

    async def test_statement_failure_raises_repository_error(
        self, repository: ApiUsageRepository
    ) -> None:
        session = MagicMock(spec=AsyncSession)
        session.get_bind.return_value.dialect.name = "sqlite"
        session.execute = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("database is locked"))
        )

        with pytest.raises(RepositoryError) as exc_info:
            await repository.consume(session, DAY, ceiling=10)

        assert exc_info.value.operation == "consume"
        assert "2025-03-14" in exc_info.value.message
