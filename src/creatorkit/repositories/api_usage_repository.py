"""
Repository for the daily API usage counter.

The counter is shared by every concurrent request, so consuming a unit is
a single conditional upsert rather than a read followed by a write: the
database either creates today's row with a count of 1, or increments it
only while it is still below the ceiling, and reports the new count.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from creatorkit.db.models import ApiUsage
from creatorkit.exceptions import RepositoryError

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS: dict[str, Any] = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


class ApiUsageRepository:
    """Data access for ``api_usage_tracker`` rows."""

    def __init__(self) -> None:
        self.model = ApiUsage

    async def get_by_date(
        self, session: AsyncSession, day: datetime.date
    ) -> ApiUsage | None:
        """
        Get the usage row for a calendar day.

        Parameters
        ----------
        session : AsyncSession
            Database session.
        day : datetime.date
            UTC calendar day.

        Returns
        -------
        ApiUsage | None
            The row, or None if no call was made that day.

        Raises
        ------
        RepositoryError
            If the query fails.
        """
        try:
            result = await session.execute(
                select(ApiUsage).where(ApiUsage.date == day)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(
                message=f"Failed to read API usage for {day.isoformat()}",
                operation="get",
                original_error=e,
            ) from e

    async def consume(
        self, session: AsyncSession, day: datetime.date, ceiling: int
    ) -> int | None:
        """
        Atomically consume one unit of the day's quota.

        Parameters
        ----------
        session : AsyncSession
            Database session. The caller's session lifecycle commits.
        day : datetime.date
            UTC calendar day the unit is charged to.
        ceiling : int
            Maximum calls allowed for the day.

        Returns
        -------
        int | None
            The day's call count after this call, or None if the ceiling
            was already reached (nothing is written in that case).

        Raises
        ------
        RepositoryError
            If the dialect is unsupported or the statement fails.
        """
        dialect_name = session.get_bind().dialect.name
        insert_fn = _UPSERT_DIALECTS.get(dialect_name)
        if insert_fn is None:
            raise RepositoryError(
                message=f"Quota store dialect '{dialect_name}' is not supported",
                operation="consume",
            )

        stmt = insert_fn(ApiUsage).values(date=day, youtube_api_calls=1)
        stmt = stmt.on_conflict_do_update(
            index_elements=[ApiUsage.date],
            set_={
                "youtube_api_calls": ApiUsage.youtube_api_calls + 1,
                "updated_at": func.now(),
            },
            where=ApiUsage.youtube_api_calls < ceiling,
        ).returning(ApiUsage.youtube_api_calls)

        try:
            result = await session.execute(stmt)
            count = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(
                message=f"Failed to update API usage for {day.isoformat()}",
                operation="consume",
                original_error=e,
            ) from e

        logger.debug(
            "Quota consume for %s: count=%s ceiling=%d", day, count, ceiling
        )
        return count
