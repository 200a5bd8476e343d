"""
Custom validated types for YouTube identifiers.

Provides strongly-typed wrappers for YouTube IDs that enforce format and length
constraints at the type level.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BeforeValidator, Field

VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
CHANNEL_ID_RE = re.compile(r"^UC[A-Za-z0-9_-]{22}$")
HANDLE_RE = re.compile(r"^[A-Za-z0-9_.-]{1,100}$")


def validate_video_id(v: str) -> str:
    """Validate YouTube Video ID format."""
    if not isinstance(v, str):
        raise TypeError("VideoId must be a string")

    if len(v) != 11:
        raise ValueError(
            f"VideoId must be exactly 11 characters long, got {len(v)}: {v}"
        )

    if not VIDEO_ID_RE.match(v):
        raise ValueError(f"VideoId contains invalid characters: {v}")

    return v


def validate_channel_id(v: str) -> str:
    """Validate YouTube Channel ID format."""
    if not isinstance(v, str):
        raise TypeError("ChannelId must be a string")

    if len(v) != 24:
        raise ValueError(
            f"ChannelId must be exactly 24 characters long, got {len(v)}: {v}"
        )

    if not v.startswith("UC"):
        raise ValueError(f'ChannelId must start with "UC", got: {v}')

    if not CHANNEL_ID_RE.match(v):
        raise ValueError(f"ChannelId contains invalid characters: {v}")

    return v


def validate_handle(v: str) -> str:
    """Validate a channel handle, stored without the leading ``@``."""
    if not isinstance(v, str):
        raise TypeError("Handle must be a string")

    cleaned = v.strip().lstrip("@")
    if not HANDLE_RE.match(cleaned):
        raise ValueError(f"Handle contains invalid characters: {v}")

    return cleaned


VideoId = Annotated[
    str,
    BeforeValidator(validate_video_id),
    Field(description="YouTube Video ID (11 chars, alphanumeric)"),
]

ChannelId = Annotated[
    str,
    BeforeValidator(validate_channel_id),
    Field(description="YouTube Channel ID (24 chars, starts with UC)"),
]

DisplayCount = Annotated[
    str,
    Field(
        description=(
            "Human-formatted count exactly as YouTube renders it "
            "(e.g. '1.2M subscribers'); never used in arithmetic"
        )
    ),
]
