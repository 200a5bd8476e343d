"""
Offline helpers for creators: thumbnails, tags, titles and comparisons.

None of these touch the network or the quota store; they work from the
user's own input and static tables.
"""

from __future__ import annotations

import datetime
import logging
import math
import random

from creatorkit.exceptions import BadRequestError
from creatorkit.models.creator import (
    ChannelComparison,
    ChannelMetrics,
    ChannelProfile,
    GeneratedTitle,
    ThumbnailLink,
)
from creatorkit.models.enums import Niche, TitleTone

logger = logging.getLogger(__name__)

THUMBNAIL_HOST = "https://img.youtube.com"

# (file name, width, height), largest first
THUMBNAIL_SIZES: tuple[tuple[str, int, int], ...] = (
    ("maxresdefault", 1280, 720),
    ("sddefault", 640, 480),
    ("hqdefault", 480, 360),
    ("mqdefault", 320, 180),
)

MAX_GENERATED_TAGS = 30
MIN_DESCRIPTION_WORD_LENGTH = 4

NICHE_TAGS: dict[Niche, list[str]] = {
    Niche.SCIENCE_TECH: [
        "technology", "tech review", "unboxing", "gadget", "smartphone",
        "laptop", "science", "innovation", "AI", "software", "coding",
        "programming", "developer", "tech news", "comparison",
    ],
    Niche.TRAVEL: [
        "travel", "travel vlog", "destination", "vacation", "adventure",
        "backpacking", "tourism", "travel tips", "travel guide", "explore",
        "wanderlust", "trip", "journey",
    ],
    Niche.AUTOS: [
        "cars", "automotive", "car review", "vehicle", "driving", "auto",
        "supercars", "motorcycle", "bike", "car comparison", "test drive",
        "car news",
    ],
    Niche.EDUCATION: [
        "education", "learning", "tutorial", "how to", "explained", "lesson",
        "study", "educational", "knowledge", "teaching", "study tips",
        "teacher", "course", "training",
    ],
    Niche.HOWTO: [
        "how to", "tutorial", "diy", "guide", "tips", "tricks",
        "step by step", "learn", "instructions", "beginner", "easy", "quick",
        "simple",
    ],
    Niche.ENTERTAINMENT: [
        "entertainment", "fun", "comedy", "challenges", "pranks", "reactions",
        "viral", "trending", "funny", "jokes", "memes", "popular",
    ],
    Niche.PEOPLE_BLOGS: [
        "vlog", "daily vlog", "lifestyle", "day in the life", "vlogger",
        "family vlog", "vlogging", "my life", "vlogs", "daily life",
        "personal", "blog",
    ],
    Niche.GAMING: [
        "gaming", "gameplay", "walkthrough", "playthrough", "lets play",
        "game review", "gaming setup", "esports", "gaming highlights",
        "pro player", "twitch", "streaming", "console", "pc gaming",
    ],
    Niche.NEWS: [
        "news", "breaking news", "current events", "politics", "world news",
        "updates", "latest news", "trending news", "analysis", "journalism",
    ],
    Niche.COMEDY: [
        "comedy", "funny", "humor", "jokes", "stand up", "sketch", "parody",
        "satire", "memes", "laugh", "hilarious", "comedy skit",
    ],
    Niche.FILM: [
        "film", "movie", "cinema", "movie review", "film analysis", "movies",
        "film production", "filmmaking", "movie trailer", "film critique",
    ],
    Niche.SPORTS: [
        "sports", "football", "basketball", "soccer", "athletics",
        "highlights", "game", "match", "training", "workout", "fitness",
        "sports news",
    ],
    Niche.PETS: [
        "pets", "animals", "dogs", "cats", "pet care", "cute animals",
        "pet training", "pet vlog", "animal videos", "puppies", "kittens",
    ],
    Niche.NONPROFITS: [
        "nonprofit", "charity", "social cause", "activism", "volunteering",
        "awareness", "fundraising", "community", "social impact",
        "humanitarian",
    ],
    Niche.MUSIC: [
        "music", "song", "cover", "remix", "lyrics", "music video",
        "official audio", "playlist", "new music", "music 2025", "artist",
        "album",
    ],
}

TRENDING_TAGS: list[str] = [
    "2025",
    "viral",
    "trending",
    "new",
    "must watch",
    "best of",
    "top 10",
    "ultimate guide",
]

TITLE_TEMPLATES: dict[TitleTone, list[str]] = {
    TitleTone.TUTORIAL: [
        "How to {keyword} in {year} - Complete Guide",
        "{keyword}: Step-by-Step Tutorial for Beginners",
        "Learn {keyword} - {secondary} Made Easy",
        "The Ultimate {keyword} Tutorial ({secondary})",
        "{keyword} for Beginners: Everything You Need to Know",
        "Master {keyword}: {secondary} Tutorial",
        "{keyword} Tutorial - From Zero to Pro",
        "Complete {keyword} Guide: {secondary} Explained",
    ],
    TitleTone.LIST: [
        "Top {number} {keyword} You NEED to Know",
        "{number} Best {keyword} for {secondary}",
        "{number} {keyword} Tips That Actually Work",
        "{number} Ways to Improve Your {keyword}",
        "Best {keyword} of {year}: Top {number} Picks",
        "{number} {keyword} Mistakes to Avoid",
        "{number} Pro {keyword} Tips for {secondary}",
        "Top {number} {keyword} Every Beginner Should Know",
    ],
    TitleTone.INTRIGUE: [
        "This {keyword} Trick Changed Everything...",
        "Why Nobody Talks About {keyword} ({secondary})",
        "The {keyword} Secret They Don't Want You to Know",
        "I Tried {keyword} for {number} Days - Here's What Happened",
        "What Experts Don't Tell You About {keyword}",
        "The Truth About {keyword} - {secondary}",
        "{keyword} Revealed: {secondary}",
        "Why {keyword} is Better Than You Think",
    ],
    TitleTone.FUNNY: [
        "{keyword} Gone Wrong (Don't Try This)",
        "When {keyword} Gets Weird... {secondary}",
        "I Tried {keyword} and Regretted It",
        "{keyword} Fails and Wins Compilation",
        "The Funniest {keyword} Moments of {year}",
        "{keyword} But Make It Funny",
        "{keyword}: Expectation vs Reality",
        "Things Nobody Tells You About {keyword}",
    ],
}

DEFAULT_SECONDARY_KEYWORD = "Tips and Tricks"
TITLE_NUMBERS = ("5", "7", "10", "15")
TITLE_VARIANTS_PER_TEMPLATE = 3
MAX_GENERATED_TITLES = 15
POWER_WORDS = ("Ultimate", "Complete", "Best")


# Thumbnails -------------------------------------------------------------------


def thumbnail_urls(video_id: str) -> list[ThumbnailLink]:
    """
    Direct image links for a video's thumbnails, largest first.

    Examples
    --------
    >>> thumbnail_urls("dQw4w9WgXcQ")[0].url
    'https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg'
    """
    return [
        ThumbnailLink(
            url=f"{THUMBNAIL_HOST}/vi/{video_id}/{name}.jpg",
            resolution=f"{width}x{height}",
            width=width,
            height=height,
        )
        for name, width, height in THUMBNAIL_SIZES
    ]


# Tags -------------------------------------------------------------------------


def generate_tags(description: str, niche: Niche) -> list[str]:
    """
    Suggest tags from a niche's base list and the video description.

    Description words shorter than four characters are skipped. The
    result is de-duplicated in first-seen order and capped at 30 tags.
    """
    words = [
        word
        for word in description.lower().split()
        if len(word) >= MIN_DESCRIPTION_WORD_LENGTH
    ]
    # dict preserves insertion order
    merged = dict.fromkeys([*NICHE_TAGS[niche], *words])
    return list(merged)[:MAX_GENERATED_TAGS]


# Titles -----------------------------------------------------------------------


def score_title(title: str, year: str) -> int:
    """
    Rate a title from 1 to 5.

    Shorter titles score higher (70 characters or fewer display fully on
    every device). Power words and the current year each add one point,
    capped at 5.
    """
    length = len(title)
    if length <= 70:
        score = 5
    elif length <= 80:
        score = 4
    elif length <= 90:
        score = 3
    else:
        score = 2

    if any(word in title for word in POWER_WORDS):
        score = min(5, score + 1)
    if year in title:
        score = min(5, score + 1)
    return score


def generate_titles(
    keyword: str,
    secondary: str | None = None,
    tone: TitleTone = TitleTone.TUTORIAL,
    year: int | None = None,
    rng: random.Random | None = None,
) -> list[GeneratedTitle]:
    """
    Suggest scored titles for a keyword.

    Parameters
    ----------
    keyword : str
        Main keyword; must not be blank.
    secondary : str | None
        Secondary keywords (default: "Tips and Tricks").
    tone : TitleTone
        Template family to use.
    year : int | None
        Year substituted into templates (default: current year).
    rng : random.Random | None
        Source of randomness for numbers and ordering; pass a seeded
        instance for reproducible output.

    Returns
    -------
    list[GeneratedTitle]
        Up to 15 distinct titles in shuffled order.

    Raises
    ------
    BadRequestError
        If ``keyword`` is blank.
    """
    keyword = keyword.strip()
    if not keyword:
        raise BadRequestError("Please enter a main keyword")

    rng = rng or random.Random()
    year_text = str(year or datetime.date.today().year)
    secondary_text = (secondary or "").strip() or DEFAULT_SECONDARY_KEYWORD

    texts: dict[str, None] = {}
    for _ in range(TITLE_VARIANTS_PER_TEMPLATE):
        for template in TITLE_TEMPLATES[tone]:
            text = template.format(
                keyword=keyword,
                secondary=secondary_text,
                year=year_text,
                number=rng.choice(TITLE_NUMBERS),
            )
            texts.setdefault(text, None)

    titles = [
        GeneratedTitle(text=text, score=score_title(text, year_text))
        for text in texts
    ]
    rng.shuffle(titles)
    return titles[:MAX_GENERATED_TITLES]


# Channel comparison -----------------------------------------------------------


def channel_metrics(
    profile: ChannelProfile, today: datetime.date | None = None
) -> ChannelMetrics:
    """
    Derive comparison metrics from a channel's headline figures.

    The channel age is counted in whole 30-day months, at least one. The
    score adds weighted contributions from subscribers, average views,
    engagement, upload frequency and catalogue size, capped at 100.
    """
    today = today or datetime.date.today()

    avg_views = (
        profile.total_views / profile.video_count if profile.video_count > 0 else 0.0
    )
    engagement = (
        avg_views / profile.subscribers * 100 if profile.subscribers > 0 else 0.0
    )
    if profile.created_date is not None:
        months = max(1, (today - profile.created_date).days // 30)
    else:
        months = 1
    uploads_per_month = profile.video_count / months

    score = min(
        100.0,
        profile.subscribers / 1_000_000 * 20
        + avg_views / 100_000 * 20
        + min(engagement, 100.0) * 0.3
        + min(uploads_per_month * 2, 20.0)
        + profile.video_count / 100 * 20,
    )

    return ChannelMetrics(
        avg_views_per_video=avg_views,
        engagement_rate=engagement,
        uploads_per_month=uploads_per_month,
        score=math.floor(score + 0.5),
    )


def compare_channels(
    channel_a: ChannelProfile,
    channel_b: ChannelProfile,
    today: datetime.date | None = None,
) -> ChannelComparison:
    """Score two channels and name the winner; None on a tie."""
    metrics_a = channel_metrics(channel_a, today)
    metrics_b = channel_metrics(channel_b, today)

    if metrics_a.score > metrics_b.score:
        winner: str | None = channel_a.name or "Channel A"
    elif metrics_b.score > metrics_a.score:
        winner = channel_b.name or "Channel B"
    else:
        winner = None

    logger.debug(
        "Compared channels: %d vs %d, winner=%s",
        metrics_a.score,
        metrics_b.score,
        winner,
    )
    return ChannelComparison(channel_a=metrics_a, channel_b=metrics_b, winner=winner)


def format_number(value: float) -> str:
    """
    Abbreviate a count for display.

    Examples
    --------
    >>> format_number(1_234_567)
    '1.2M'
    >>> format_number(3_400)
    '3.4K'
    >>> format_number(999)
    '999'
    """
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return str(int(value)) if float(value).is_integer() else str(value)
