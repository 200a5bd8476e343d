"""
Daily quota gate for upstream page fetches.

Each gated request spends one unit of a per-day ceiling stored in the
shared quota table. The day is the UTC calendar day, so the counter resets
simply by a new row being keyed on the next date.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from creatorkit.repositories.api_usage_repository import ApiUsageRepository

logger = logging.getLogger(__name__)


def today() -> datetime.date:
    """Current UTC calendar day."""
    return datetime.datetime.now(datetime.timezone.utc).date()


@dataclass(frozen=True)
class QuotaDecision:
    """Result of a quota check."""

    allowed: bool
    remaining: int


@dataclass(frozen=True)
class QuotaStatus:
    """Read-only view of a day's usage."""

    date: datetime.date
    used: int
    limit: int

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.used)


class QuotaGate:
    """
    Allow or deny gated calls against a fixed daily ceiling.

    Parameters
    ----------
    ceiling : int
        Maximum allowed calls per UTC day.
    repository : ApiUsageRepository | None
        Data access for the usage table (default: a new repository).

    Examples
    --------
    >>> gate = QuotaGate(ceiling=10000)
    >>> decision = await gate.check(session)
    >>> decision.allowed, decision.remaining
    (True, 9999)
    """

    def __init__(
        self, ceiling: int, repository: ApiUsageRepository | None = None
    ) -> None:
        if ceiling < 1:
            raise ValueError(f"Quota ceiling must be at least 1, got {ceiling}")
        self.ceiling = ceiling
        self._repository = repository or ApiUsageRepository()

    async def check(
        self, session: AsyncSession, day: datetime.date | None = None
    ) -> QuotaDecision:
        """
        Consume one unit of the day's quota if any is left.

        Parameters
        ----------
        session : AsyncSession
            Database session for the quota store.
        day : datetime.date | None
            Calendar day to charge (default: today in UTC).

        Returns
        -------
        QuotaDecision
            ``allowed=True`` with the units left after this call, or
            ``allowed=False, remaining=0`` when the ceiling is reached.

        Raises
        ------
        RepositoryError
            If the quota store fails.
        """
        day = day or today()
        count = await self._repository.consume(session, day, self.ceiling)

        if count is None:
            logger.warning(
                "Daily quota of %d exhausted for %s", self.ceiling, day.isoformat()
            )
            return QuotaDecision(allowed=False, remaining=0)

        return QuotaDecision(allowed=True, remaining=max(0, self.ceiling - count))

    async def status(
        self, session: AsyncSession, day: datetime.date | None = None
    ) -> QuotaStatus:
        """Report the day's usage without consuming any quota."""
        day = day or today()
        usage = await self._repository.get_by_date(session, day)
        used = usage.youtube_api_calls if usage is not None else 0
        return QuotaStatus(date=day, used=used, limit=self.ceiling)
