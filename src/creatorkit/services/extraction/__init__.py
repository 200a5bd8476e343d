"""
Rule-driven metadata extraction from YouTube page HTML.

``rules`` declares what to look for; ``extractor`` applies the rules and
builds the result models.
"""

from __future__ import annotations

from creatorkit.services.extraction.extractor import (
    analyze_monetization,
    apply_field_rules,
    apply_monetization_rules,
    days_since_joined,
    extract_channel_id_result,
    extract_channel_metadata,
    extract_channel_stats,
    extract_tags,
    parse_count,
)

__all__ = [
    "analyze_monetization",
    "apply_field_rules",
    "apply_monetization_rules",
    "days_since_joined",
    "extract_channel_id_result",
    "extract_channel_metadata",
    "extract_channel_stats",
    "extract_tags",
    "parse_count",
]
