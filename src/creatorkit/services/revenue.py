"""
Revenue projection for YouTube channels.

Pure arithmetic over user-entered numbers and static lookup tables; no
network access. Amounts are computed in decimal arithmetic and never
rounded between periods, so the yearly figure is exactly 365 times the
daily one and round inputs give round outputs on the wire.

Constants
---------
REVENUE_SHARE
    Creator share of ad revenue (YouTube keeps 45%).
NICHE_CPM
    Average US CPM per content niche.
NICHE_SPONSORSHIP_RATES
    Typical sponsorship payout per view, as a (min, max) range.
SHORTS_CPM_FACTOR
    Multiplier applied to the CPM for Shorts.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal

from creatorkit.models.enums import Niche
from creatorkit.models.revenue import RevenueEstimate

logger = logging.getLogger(__name__)

REVENUE_SHARE = 0.55
SHORTS_CPM_FACTOR = 0.3

NICHE_CPM: dict[Niche, float] = {
    Niche.SCIENCE_TECH: 20.8,
    Niche.TRAVEL: 18.7,
    Niche.AUTOS: 18.0,
    Niche.EDUCATION: 14.2,
    Niche.HOWTO: 13.3,
    Niche.ENTERTAINMENT: 12.5,
    Niche.PEOPLE_BLOGS: 10.0,
    Niche.GAMING: 9.2,
    Niche.NEWS: 8.3,
    Niche.COMEDY: 6.7,
    Niche.FILM: 6.3,
    Niche.SPORTS: 5.8,
    Niche.PETS: 4.2,
    Niche.NONPROFITS: 3.3,
    Niche.MUSIC: 3.0,
}

NICHE_SPONSORSHIP_RATES: dict[Niche, tuple[float, float]] = {
    Niche.SCIENCE_TECH: (0.02, 0.06),
    Niche.TRAVEL: (0.018, 0.055),
    Niche.AUTOS: (0.018, 0.05),
    Niche.EDUCATION: (0.015, 0.04),
    Niche.HOWTO: (0.013, 0.04),
    Niche.ENTERTAINMENT: (0.012, 0.035),
    Niche.PEOPLE_BLOGS: (0.01, 0.03),
    Niche.GAMING: (0.009, 0.027),
    Niche.NEWS: (0.008, 0.025),
    Niche.COMEDY: (0.007, 0.02),
    Niche.FILM: (0.006, 0.019),
    Niche.SPORTS: (0.006, 0.017),
    Niche.PETS: (0.004, 0.012),
    Niche.NONPROFITS: (0.003, 0.01),
    Niche.MUSIC: (0.003, 0.009),
}


def _decimal(value: float) -> Decimal:
    """Decimal of the shortest repr, so 0.55 stays 0.55."""
    return Decimal(repr(value))


def calculate_revenue(
    views: float,
    cpm: float,
    include_sponsorship: bool = False,
    sponsorship_min: float = 0.0,
    sponsorship_max: float = 0.0,
    revenue_share: float = REVENUE_SHARE,
) -> RevenueEstimate:
    """
    Project ad and sponsorship revenue from daily views.

    Parameters
    ----------
    views : float
        Daily views.
    cpm : float
        Advertiser cost per 1,000 impressions.
    include_sponsorship : bool
        Whether to estimate sponsorship income.
    sponsorship_min, sponsorship_max : float
        Sponsorship payout per view.
    revenue_share : float
        Creator share of ad revenue (default: 0.55).

    Returns
    -------
    RevenueEstimate
        Daily, weekly, monthly (30 days) and yearly (365 days) ad revenue,
        and the daily sponsorship range.

    Examples
    --------
    >>> calculate_revenue(10000, 10).daily
    55.0
    >>> calculate_revenue(10000, 10).yearly
    20075.0
    """
    daily_views = _decimal(views)
    ad_revenue = daily_views * _decimal(cpm) * _decimal(revenue_share) / 1000

    if include_sponsorship:
        sponsor_low = float(daily_views * _decimal(sponsorship_min))
        sponsor_high = float(daily_views * _decimal(sponsorship_max))
    else:
        sponsor_low = sponsor_high = 0.0

    return RevenueEstimate(
        daily=float(ad_revenue),
        weekly=float(ad_revenue * 7),
        monthly=float(ad_revenue * 30),
        yearly=float(ad_revenue * 365),
        sponsorship_min=sponsor_low,
        sponsorship_max=sponsor_high,
    )


def niche_cpm(niche: Niche, shorts: bool = False) -> float:
    """Average CPM for a niche, reduced for Shorts."""
    cpm = NICHE_CPM[niche]
    if not shorts:
        return cpm
    return float(_decimal(cpm) * _decimal(SHORTS_CPM_FACTOR))


def rpm(cpm: float, revenue_share: float = REVENUE_SHARE) -> float:
    """Revenue per 1,000 views the creator keeps at a given CPM."""
    return float(_decimal(cpm) * _decimal(revenue_share))


def estimate_for_niche(
    views: float,
    niche: Niche,
    shorts: bool = False,
    include_sponsorship: bool = False,
    revenue_share: float = REVENUE_SHARE,
) -> RevenueEstimate:
    """Project revenue using the niche's average CPM and sponsorship range."""
    low, high = NICHE_SPONSORSHIP_RATES[niche]
    return calculate_revenue(
        views,
        niche_cpm(niche, shorts),
        include_sponsorship,
        low,
        high,
        revenue_share,
    )


def adjusted_views(
    channel_views: float, avg_view_percentage: float, avg_engagement_rate: float
) -> int:
    """Daily views discounted by watch percentage and engagement rate."""
    return math.floor(
        channel_views * (avg_view_percentage / 100) * (avg_engagement_rate / 100)
    )


def estimate_for_channel(
    channel_views: float,
    avg_view_percentage: float,
    avg_engagement_rate: float,
    cpm: float,
    niche: Niche,
    include_sponsorship: bool = False,
    revenue_share: float = REVENUE_SHARE,
) -> RevenueEstimate:
    """
    Project revenue for an existing channel's daily views.

    Only the share of views that are watched far enough and engaged with
    is monetized; see ``adjusted_views``. The sponsorship range comes from
    the niche while the CPM is the caller's own figure.
    """
    views = adjusted_views(channel_views, avg_view_percentage, avg_engagement_rate)
    low, high = NICHE_SPONSORSHIP_RATES[niche]
    logger.debug(
        "Channel estimate: %s daily views adjusted to %d", channel_views, views
    )
    return calculate_revenue(views, cpm, include_sponsorship, low, high, revenue_share)


def project_revenue(
    views: float,
    cpm: float | None = None,
    niche: Niche | None = None,
    shorts: bool = False,
    include_sponsorship: bool = False,
    sponsorship_min: float | None = None,
    sponsorship_max: float | None = None,
    revenue_share: float = REVENUE_SHARE,
) -> RevenueEstimate:
    """
    Project revenue from whichever rate inputs the caller supplied.

    An explicit ``cpm`` wins over the niche average, and explicit
    sponsorship rates win over the niche range. The Shorts reduction
    applies to the CPM in either case.

    Raises
    ------
    ValueError
        If neither ``cpm`` nor ``niche`` is given.
    """
    if cpm is None and niche is None:
        raise ValueError("Either cpm or niche is required")

    base_cpm = cpm if cpm is not None else NICHE_CPM[niche]  # type: ignore[index]
    if shorts:
        base_cpm = float(_decimal(base_cpm) * _decimal(SHORTS_CPM_FACTOR))

    default_min, default_max = (
        NICHE_SPONSORSHIP_RATES[niche] if niche is not None else (0.0, 0.0)
    )
    return calculate_revenue(
        views,
        base_cpm,
        include_sponsorship,
        sponsorship_min if sponsorship_min is not None else default_min,
        sponsorship_max if sponsorship_max is not None else default_max,
        revenue_share,
    )
