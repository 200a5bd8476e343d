"""
Pydantic models for revenue projection.
"""

from __future__ import annotations

from creatorkit.models.channel import BaseToolModel


class RevenueEstimate(BaseToolModel):
    """
    Projected earnings for a daily view count.

    All amounts are in the CPM's currency and are not rounded; the
    calling page formats them for display.

    Attributes
    ----------
    daily, weekly, monthly, yearly : float
        Ad revenue scaled by 1, 7, 30 and 365 days.
    sponsorship_min, sponsorship_max : float
        Daily sponsorship range, zero when sponsorship is not included.
    """

    daily: float
    weekly: float
    monthly: float
    yearly: float
    sponsorship_min: float = 0.0
    sponsorship_max: float = 0.0
