"""
Pydantic models for creatorkit.

Identifier types parsed from user input, metadata extracted from YouTube
pages, and the values produced by the calculators.
"""

from __future__ import annotations

from creatorkit.models.enums import Confidence, IdentifierKind, Niche, TitleTone
from creatorkit.models.identifiers import YouTubeIdentifier, parse_identifier

__all__ = [
    "Confidence",
    "IdentifierKind",
    "Niche",
    "TitleTone",
    "YouTubeIdentifier",
    "parse_identifier",
]
