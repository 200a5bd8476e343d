"""
Repository layer for creatorkit.

Provides data access for the quota store.
"""

from __future__ import annotations

from creatorkit.repositories.api_usage_repository import ApiUsageRepository

__all__ = ["ApiUsageRepository"]
