"""
Database models for creatorkit.

The only persisted entity is the per-day upstream call counter. Rows are
keyed by UTC calendar day and are never deleted, so the table doubles as a
historical usage log.
"""

from __future__ import annotations

import datetime

from sqlalchemy import Date, DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class ApiUsage(Base):
    """Daily count of quota-gated upstream calls."""

    __tablename__ = "api_usage_tracker"

    date: Mapped[datetime.date] = mapped_column(Date, primary_key=True)
    youtube_api_calls: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
