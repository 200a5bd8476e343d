"""
Enums for creatorkit models.

Defines enumeration types used across the application for consistent
type safety and validation.
"""

from __future__ import annotations

from enum import Enum


class IdentifierKind(str, Enum):
    """Kinds of YouTube identifiers recognised in user input."""

    VIDEO = "video"
    CHANNEL = "channel"
    HANDLE = "handle"
    CUSTOM = "custom"
    USER = "user"


class Confidence(str, Enum):
    """Strength of the evidence that a page carries ads."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Niche(str, Enum):
    """Content niches with published CPM averages."""

    SCIENCE_TECH = "science-tech"
    TRAVEL = "travel"
    AUTOS = "autos"
    EDUCATION = "education"
    HOWTO = "howto"
    ENTERTAINMENT = "entertainment"
    PEOPLE_BLOGS = "people-blogs"
    GAMING = "gaming"
    NEWS = "news"
    COMEDY = "comedy"
    FILM = "film"
    SPORTS = "sports"
    PETS = "pets"
    NONPROFITS = "nonprofits"
    MUSIC = "music"


class TitleTone(str, Enum):
    """Template families for title suggestions."""

    TUTORIAL = "tutorial"
    LIST = "list"
    INTRIGUE = "intrigue"
    FUNNY = "funny"
