"""
Database module for creatorkit.

Contains the SQLAlchemy model for the daily quota counter.
"""

from __future__ import annotations

from creatorkit.db.models import ApiUsage, Base

__all__: list[str] = ["ApiUsage", "Base"]
