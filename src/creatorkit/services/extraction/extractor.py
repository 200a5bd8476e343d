"""
Extraction of channel and video metadata from raw YouTube page HTML.

Every function here is a pure function of the page text (plus the current
date for the statistics endpoint). A field that cannot be found is left
empty; only ``extract_channel_id_result`` treats a missing field as an
error, because an id lookup without an id has nothing to return.
"""

from __future__ import annotations

import datetime
import logging
import re
from typing import Any, Iterable

from bs4 import BeautifulSoup

from creatorkit.exceptions import ExtractionError
from creatorkit.models.channel import (
    NO_INDICATORS_MESSAGE,
    ChannelIdResult,
    ChannelInfo,
    ChannelMetadata,
    ChannelStats,
    MonetizationResult,
    TagExtraction,
)
from creatorkit.models.enums import Confidence
from creatorkit.services.extraction.rules import (
    CHANNEL_HANDLE_RULE,
    CHANNEL_ID_RULE,
    CHANNEL_INFO_RULES,
    CHANNEL_METADATA_RULES,
    CHANNEL_NAME_RULE,
    CHANNEL_STATS_RULES,
    MONETIZATION_RULES,
    TAG_RULES,
    FieldRule,
    MetaTag,
    MonetizationRule,
)

logger = logging.getLogger(__name__)

DEFAULT_DAYS_SINCE_JOINED = 365

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")
_JOINED_DATE_RE = re.compile(r"(\w+)\s+(\d+),\s+(\d+)")
_MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}


class _Page:
    """Page text with a BeautifulSoup tree built on first use."""

    def __init__(self, html: str) -> None:
        self.html = html
        self._soup: BeautifulSoup | None = None

    @property
    def soup(self) -> BeautifulSoup:
        if self._soup is None:
            self._soup = BeautifulSoup(self.html, "html.parser")
        return self._soup

    def read(self, source: re.Pattern[str] | MetaTag) -> str | None:
        if isinstance(source, MetaTag):
            tag = self.soup.find("meta", attrs={source.attr: source.value})
            content = tag.get("content") if tag is not None else None
            return content if isinstance(content, str) and content else None

        match = source.search(self.html)
        return match.group(1) if match else None


def _apply(page: _Page, rules: Iterable[FieldRule]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for rule in rules:
        for source in rule.sources:
            raw = page.read(source)
            if raw is None:
                continue
            value = rule.transform(raw) if rule.transform else raw
            if value is not None:
                values[rule.field] = value
                break
    return values


def apply_field_rules(html: str, rules: Iterable[FieldRule]) -> dict[str, Any]:
    """
    Run field rules over a page and collect the values found.

    Parameters
    ----------
    html : str
        Raw page text.
    rules : Iterable[FieldRule]
        Rules to apply; each is independent of the others.

    Returns
    -------
    dict[str, Any]
        Field name to extracted value, for the fields that were found.
    """
    return _apply(_Page(html), rules)


def _rule_fires(html: str, rule: MonetizationRule) -> bool:
    if rule.any_of and not any(marker in html for marker in rule.any_of):
        return False
    if rule.requires is not None and rule.requires not in html:
        return False
    if rule.pattern is not None and not rule.pattern.search(html):
        return False
    return bool(rule.any_of or rule.requires or rule.pattern)


def apply_monetization_rules(
    html: str, rules: Iterable[MonetizationRule] = MONETIZATION_RULES
) -> tuple[list[str], Confidence]:
    """
    Test every monetization rule and combine the results.

    A ``HIGH`` rule sets the confidence to high, and nothing lowers it
    again; a ``MEDIUM`` rule raises low to medium.

    Returns
    -------
    tuple[list[str], Confidence]
        Indicators of the rules that fired, in rule order, and the
        resulting confidence. The list is empty when nothing fired.
    """
    indicators: list[str] = []
    confidence = Confidence.LOW

    for rule in rules:
        if not _rule_fires(html, rule):
            continue
        indicators.append(rule.indicator)
        if rule.confidence == Confidence.HIGH:
            confidence = Confidence.HIGH
        elif confidence != Confidence.HIGH:
            confidence = Confidence.MEDIUM

    return indicators, confidence


def analyze_monetization(html: str) -> MonetizationResult:
    """
    Judge whether a page shows signs of carrying ads.

    Parameters
    ----------
    html : str
        Raw channel or video page.

    Returns
    -------
    MonetizationResult
        The verdict, its confidence, the fired indicators (or the single
        "no indicators" sentinel) and the channel title and subscriber
        count when present.
    """
    indicators, confidence = apply_monetization_rules(html)
    info = apply_field_rules(html, CHANNEL_INFO_RULES)

    logger.debug("Monetization rules fired: %s", indicators or "none")

    return MonetizationResult(
        is_monetized=bool(indicators),
        confidence=confidence,
        indicators=indicators or [NO_INDICATORS_MESSAGE],
        channel_info=ChannelInfo(**info) if info else None,
    )


def extract_channel_metadata(html: str) -> ChannelMetadata:
    """Build the full channel profile, leaving absent fields empty."""
    values = apply_field_rules(html, CHANNEL_METADATA_RULES)
    indicators, confidence = apply_monetization_rules(html)

    return ChannelMetadata(
        **values,
        monetization_indicators=indicators or [NO_INDICATORS_MESSAGE],
        is_monetized=bool(indicators),
        confidence=confidence,
    )


def extract_channel_id_result(
    html: str, base_url: str = "https://www.youtube.com"
) -> ChannelIdResult:
    """
    Extract the channel id, name and handle from a channel page.

    Raises
    ------
    ExtractionError
        If the page carries no channel id.
    """
    values = apply_field_rules(
        html, (CHANNEL_ID_RULE, CHANNEL_NAME_RULE, CHANNEL_HANDLE_RULE)
    )

    channel_id = values.get("channel_id")
    if channel_id is None:
        raise ExtractionError("Channel ID not found in page")

    return ChannelIdResult(
        channel_id=channel_id,
        channel_name=values.get("channel_name", "YouTube Channel"),
        channel_handle=values.get("channel_handle"),
        channel_url=f"{base_url.rstrip('/')}/channel/{channel_id}",
    )


def extract_tags(html: str) -> TagExtraction:
    """Read the keyword tags and title of a video page."""
    values = apply_field_rules(html, TAG_RULES)
    tags: list[str] = values.get("tags", [])
    return TagExtraction(
        success=True,
        tags=tags,
        title=values.get("title", ""),
        total_tags=len(tags),
    )


def parse_count(text: str | None) -> int | None:
    """
    Parse a count rendered with thousands separators.

    Parsing stops at the first non-digit after the separators are removed,
    so ``"12,345 views"`` gives 12345 and ``"1.2K"`` gives 1.

    Examples
    --------
    >>> parse_count("1,234,567")
    1234567
    >>> parse_count("No videos") is None
    True
    """
    if not text:
        return None
    match = _LEADING_INT_RE.match(text.replace(",", ""))
    return int(match.group(1)) if match else None


def days_since_joined(joined: str | None, today: datetime.date) -> int:
    """
    Days between a ``"Mon D, YYYY"`` join date and ``today``.

    Returns 365 when the date is absent or unparseable.
    """
    if not joined:
        return DEFAULT_DAYS_SINCE_JOINED

    match = _JOINED_DATE_RE.search(joined)
    if not match:
        return DEFAULT_DAYS_SINCE_JOINED

    month = _MONTHS.get(match.group(1)[:3].lower())
    if month is None:
        return DEFAULT_DAYS_SINCE_JOINED

    try:
        joined_on = datetime.date(int(match.group(3)), month, int(match.group(2)))
    except ValueError:
        logger.debug("Ignoring impossible join date %r", joined)
        return DEFAULT_DAYS_SINCE_JOINED

    return (today - joined_on).days


def extract_channel_stats(
    html: str, today: datetime.date | None = None
) -> ChannelStats:
    """
    Read the statistics used by the revenue calculator's channel mode.

    Parameters
    ----------
    html : str
        Raw channel page (``/about`` works best).
    today : datetime.date | None
        Reference date for the channel age (default: today, UTC).

    Returns
    -------
    ChannelStats
        Name, subscriber label, numeric totals, join date, channel age in
        days and the derived average daily views.
    """
    today = today or datetime.datetime.now(datetime.timezone.utc).date()
    values = apply_field_rules(html, CHANNEL_STATS_RULES)

    total_views = parse_count(values.get("total_views")) or 0
    video_count = parse_count(values.get("video_count")) or 0
    joined_date = values.get("joined_date", "")
    days = days_since_joined(joined_date, today)
    daily_views = total_views // days if total_views > 0 and days > 0 else 0

    return ChannelStats(
        success=True,
        channel_name=values.get("channel_name", ""),
        subscriber_count=values.get("subscriber_count", "0"),
        total_views=total_views,
        video_count=video_count,
        joined_date=joined_date,
        days_since_joined=days,
        daily_views=daily_views,
    )
