"""
Declarative extraction rules for YouTube page payloads.

YouTube pages carry their data in two places: ordinary ``<meta>`` tags in
the document head and JSON blobs (``ytInitialData`` and friends) inlined in
script tags. Neither format is documented or versioned, so every field is
described here as a rule: an ordered list of sources, the first one that
yields a value wins. The extractor walks these tables with one generic
loop; changing what is scraped means editing a table, not control flow.

Classes
-------
MetaTag
    A ``<meta>`` tag source, read through BeautifulSoup.
FieldRule
    Ordered sources for one output field.
MonetizationRule
    A literal-marker test that contributes one monetization indicator.

Constants
---------
CHANNEL_ID_RULE, CHANNEL_NAME_RULE, CHANNEL_HANDLE_RULE
    Rules for the channel-id lookup.
CHANNEL_METADATA_RULES
    Rules for the full channel profile.
CHANNEL_INFO_RULES
    Rules for the context shown next to a monetization verdict.
TAG_RULES
    Rules for the tag extractor.
CHANNEL_STATS_RULES
    Rules for the statistics endpoint.
MONETIZATION_RULES
    Monetization markers, in reporting order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Union

from creatorkit.models.enums import Confidence


@dataclass(frozen=True)
class MetaTag:
    """
    Source reading the ``content`` of a ``<meta>`` tag.

    Attributes
    ----------
    attr : str
        Attribute that names the tag, ``"property"`` or ``"name"``.
    value : str
        Value of that attribute, e.g. ``"og:title"``.
    """

    attr: str
    value: str


Source = Union[re.Pattern[str], MetaTag]


@dataclass(frozen=True)
class FieldRule:
    """
    Ordered sources for one extracted field.

    Regex sources must expose the value as group 1. The optional
    ``transform`` runs on the raw value; returning None means the source
    produced nothing usable and the next source is tried.
    """

    field: str
    sources: tuple[Source, ...]
    transform: Callable[[str], object | None] | None = None


@dataclass(frozen=True)
class MonetizationRule:
    """
    One monetization signal.

    The rule fires when any literal in ``any_of`` occurs in the page (an
    empty ``any_of`` imposes no literal test). When ``requires`` is set
    that literal must also be present, and when ``pattern`` is set it must
    match somewhere in the page.

    Attributes
    ----------
    indicator : str
        Human-readable description reported when the rule fires.
    confidence : Confidence
        ``HIGH`` sets the verdict to high; ``MEDIUM`` only lifts low to
        medium.
    """

    indicator: str
    confidence: Confidence
    any_of: tuple[str, ...] = ()
    requires: str | None = None
    pattern: re.Pattern[str] | None = None


def _split_keywords(raw: str) -> list[str] | None:
    tags = [tag.strip() for tag in raw.split(",")]
    return [tag for tag in tags if tag] or None


def _unescape_json_text(raw: str) -> str:
    """Undo the escapes YouTube applies inside inlined JSON strings."""
    return (
        raw.replace("\\u0026", "&")
        .replace("\\u003d", "=")
        .replace("\\/", "/")
        .replace('\\"', '"')
    )


# Channel-id lookup ------------------------------------------------------------

CHANNEL_ID_RULE = FieldRule(
    field="channel_id",
    sources=(
        re.compile(r'"channelId":"(UC[\w-]{22})"'),
        re.compile(r'"externalId":"(UC[\w-]{22})"'),
        re.compile(
            r'property="og:url" content="https://www\.youtube\.com/channel/(UC[\w-]{22})'
        ),
    ),
)

CHANNEL_NAME_RULE = FieldRule(
    field="channel_name",
    sources=(
        MetaTag("property", "og:title"),
        re.compile(r'"channelName":"([^"]+)"'),
    ),
    transform=_unescape_json_text,
)

CHANNEL_HANDLE_RULE = FieldRule(
    field="channel_handle",
    sources=(re.compile(r'"canonicalChannelUrl":"https://www\.youtube\.com/@([^"]+)"'),),
)

# Full channel profile ---------------------------------------------------------

CHANNEL_METADATA_RULES: tuple[FieldRule, ...] = (
    CHANNEL_ID_RULE,
    CHANNEL_NAME_RULE,
    CHANNEL_HANDLE_RULE,
    FieldRule(
        field="description",
        sources=(
            MetaTag("property", "og:description"),
            MetaTag("name", "description"),
        ),
    ),
    FieldRule(
        field="thumbnail_url",
        sources=(
            MetaTag("property", "og:image"),
            re.compile(r'"avatar":\{"thumbnails":\[\{"url":"([^"]+)"'),
        ),
        transform=_unescape_json_text,
    ),
    FieldRule(
        field="banner_url",
        sources=(
            re.compile(r'"banner":\{"thumbnails":\[\{"url":"([^"]+)"'),
            re.compile(r'"banner":\{"imageBannerViewModel":\{"image":\{"sources":\[\{"url":"([^"]+)"'),
        ),
        transform=_unescape_json_text,
    ),
    FieldRule(
        field="subscriber_count",
        sources=(
            re.compile(r'"subscriberCountText":\{"simpleText":"([^"]+)"'),
            re.compile(
                r'"subscriberCountText":\{"accessibility":\{"accessibilityData":\{"label":"([^"]+)"'
            ),
        ),
    ),
    FieldRule(
        field="video_count",
        sources=(
            re.compile(r'"videosCountText":\{"runs":\[\{"text":"([^"]+)"'),
            re.compile(r'"videoCountText":\{"runs":\[\{"text":"([^"]+)"'),
        ),
    ),
    FieldRule(
        field="view_count",
        sources=(re.compile(r'"viewCountText":\{"simpleText":"([^"]+)"'),),
    ),
    FieldRule(
        field="country",
        sources=(re.compile(r'"country":"([^"]+)"'),),
    ),
    FieldRule(
        field="published_at",
        sources=(
            re.compile(r'"joinedDateText":\{"runs":\[\{"text":"Joined "\},\{"text":"([^"]+)"'),
            re.compile(r'"joinedDateText":\{"simpleText":"Joined ([^"]+)"'),
        ),
    ),
    FieldRule(
        field="tags",
        sources=(MetaTag("name", "keywords"),),
        transform=_split_keywords,
    ),
)

# Monetization context ---------------------------------------------------------

CHANNEL_INFO_RULES: tuple[FieldRule, ...] = (
    FieldRule(field="title", sources=(MetaTag("property", "og:title"),)),
    FieldRule(
        field="subscriber_count",
        sources=(re.compile(r'"subscriberCountText":\{"simpleText":"([^"]+)"'),),
    ),
)

# Tag extractor ----------------------------------------------------------------

TAG_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        field="tags",
        sources=(MetaTag("name", "keywords"),),
        transform=_split_keywords,
    ),
    FieldRule(field="title", sources=(MetaTag("name", "title"),)),
)

# Channel statistics -----------------------------------------------------------

CHANNEL_STATS_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        field="channel_name",
        sources=(re.compile(r'"title":"([^"]+)","description"'),),
        transform=_unescape_json_text,
    ),
    FieldRule(
        field="subscriber_count",
        sources=(
            re.compile(
                r'"subscriberCountText":\{"accessibility":\{"accessibilityData":\{"label":"([^"]+)"'
            ),
        ),
    ),
    FieldRule(
        field="total_views",
        sources=(re.compile(r'"viewCountText":\{"simpleText":"([^"]+) views"'),),
    ),
    FieldRule(
        field="video_count",
        sources=(re.compile(r'"videosCountText":\{"runs":\[\{"text":"([^"]+)"'),),
    ),
    FieldRule(
        field="joined_date",
        sources=(
            re.compile(r'"joinedDateText":\{"runs":\[\{"text":"Joined "\},\{"text":"([^"]+)"'),
        ),
    ),
)

# Monetization markers ---------------------------------------------------------

MONETIZATION_RULES: tuple[MonetizationRule, ...] = (
    MonetizationRule(
        indicator="Direct monetization flag detected",
        confidence=Confidence.HIGH,
        any_of=('"isMonetized":true',),
    ),
    MonetizationRule(
        indicator="Paid content overlay found",
        confidence=Confidence.HIGH,
        any_of=('"paidContentOverlay"',),
    ),
    MonetizationRule(
        indicator="Ad slots detected",
        confidence=Confidence.MEDIUM,
        any_of=("adSlot", "adModule"),
    ),
    MonetizationRule(
        indicator="Player ads configuration found",
        confidence=Confidence.HIGH,
        any_of=('"playerAds"',),
    ),
    MonetizationRule(
        indicator="Ad placements detected",
        confidence=Confidence.MEDIUM,
        any_of=('"adPlacements"',),
    ),
    MonetizationRule(
        indicator="Ad safety configuration present",
        confidence=Confidence.MEDIUM,
        requires="yt.config_.PLAYER_CONFIG",
        pattern=re.compile(r'"adSafetyReason":(\{[^}]+\})'),
    ),
    MonetizationRule(
        indicator="Companion ads or ad breaks detected",
        confidence=Confidence.MEDIUM,
        any_of=("companionAd", '"adBreakParams"'),
    ),
    MonetizationRule(
        indicator="Ads engagement panel detected",
        confidence=Confidence.MEDIUM,
        any_of=('"adsEngagementPanelContentRenderer"',),
    ),
)
