"""Health check endpoint."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict
from sqlalchemy import text

from creatorkit import __version__
from creatorkit.config.database import db_manager

logger = logging.getLogger(__name__)


class HealthStatus(BaseModel):
    """Application health status."""

    model_config = ConfigDict(strict=True)

    status: str  # "healthy", "unhealthy"
    version: str
    database: str  # "connected", "disconnected"
    timestamp: datetime
    database_latency_ms: Optional[int] = None


router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    """
    Report whether the service and its quota store are reachable.

    Only the database is probed; YouTube is never contacted and no quota
    is spent.
    """
    db_status = "disconnected"
    db_latency_ms: Optional[int] = None
    try:
        start = time.monotonic()
        async with db_manager.get_session_factory()() as session:
            await session.execute(text("SELECT 1"))
        db_latency_ms = int((time.monotonic() - start) * 1000)
        db_status = "connected"
    except Exception as e:
        logger.warning("Health check could not reach the quota store: %s", e)

    status = "healthy" if db_status == "connected" else "unhealthy"

    return HealthStatus(
        status=status,
        version=__version__,
        database=db_status,
        timestamp=datetime.now(timezone.utc),
        database_latency_ms=db_latency_ms,
    )
