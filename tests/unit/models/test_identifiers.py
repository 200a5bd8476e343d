"""
Tests for YouTube identifier parsing.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from creatorkit.models.enums import IdentifierKind
from creatorkit.models.identifiers import (
    YouTubeIdentifier,
    extract_video_id,
    parse_identifier,
)

VIDEO_ID = "dQw4w9WgXcQ"
CHANNEL_ID = "UCabcdefghijklmnopqrstuv"


class TestParseIdentifierVideos:
    """Video forms resolve to the bare 11-character id."""

    @pytest.mark.parametrize(
        "raw",
        [
            VIDEO_ID,
            f"https://www.youtube.com/watch?v={VIDEO_ID}",
            f"https://www.youtube.com/watch?v={VIDEO_ID}&t=42s",
            f"https://www.youtube.com/watch?feature=share&v={VIDEO_ID}",
            f"youtube.com/watch?v={VIDEO_ID}",
            f"https://youtu.be/{VIDEO_ID}",
            f"youtu.be/{VIDEO_ID}?si=abc123",
            f"https://www.youtube.com/shorts/{VIDEO_ID}",
            f"https://m.youtube.com/shorts/{VIDEO_ID}",
            f"https://www.youtube.com/embed/{VIDEO_ID}",
            f"https://www.youtube-nocookie.com/embed/{VIDEO_ID}",
            f"https://www.youtube.com/v/{VIDEO_ID}",
            f"   https://youtu.be/{VIDEO_ID}  ",
        ],
    )
    def test_video_forms(self, raw: str) -> None:
        """Test each supported video URL form."""
        identifier = parse_identifier(raw)

        assert identifier is not None
        assert identifier.kind == IdentifierKind.VIDEO
        assert identifier.value == VIDEO_ID
        assert identifier.is_video
        assert not identifier.is_channel


class TestParseIdentifierChannels:
    """Channel forms keep their kind and bare value."""

    @pytest.mark.parametrize(
        ("raw", "kind", "value"),
        [
            (
                f"https://www.youtube.com/channel/{CHANNEL_ID}",
                IdentifierKind.CHANNEL,
                CHANNEL_ID,
            ),
            (
                f"https://www.youtube.com/channel/{CHANNEL_ID}/videos",
                IdentifierKind.CHANNEL,
                CHANNEL_ID,
            ),
            (CHANNEL_ID, IdentifierKind.CHANNEL, CHANNEL_ID),
            ("https://www.youtube.com/@somehandle", IdentifierKind.HANDLE, "somehandle"),
            ("youtube.com/@some.handle", IdentifierKind.HANDLE, "some.handle"),
            ("https://www.youtube.com/@somehandle/about", IdentifierKind.HANDLE, "somehandle"),
            ("https://www.youtube.com/c/SomeName", IdentifierKind.CUSTOM, "SomeName"),
            ("https://www.youtube.com/user/legacyname", IdentifierKind.USER, "legacyname"),
        ],
    )
    def test_channel_forms(self, raw: str, kind: IdentifierKind, value: str) -> None:
        """Test each supported channel URL form."""
        identifier = parse_identifier(raw)

        assert identifier is not None
        assert identifier.kind == kind
        assert identifier.value == value
        assert identifier.is_channel


class TestParseIdentifierRejects:
    """Unrecognised input yields None rather than raising."""

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "",
            "   ",
            "not a url",
            f"https://example.com/watch?v={VIDEO_ID}",
            f"https://notyoutube.com/watch?v={VIDEO_ID}",
            "https://www.youtube.com/watch?v=short",
            "https://www.youtube.com/feed/trending",
            "UCtooShort",
        ],
    )
    def test_unrecognised_input(self, raw: str | None) -> None:
        """Test that junk input is not recognised."""
        assert parse_identifier(raw) is None


class TestPageUrl:
    """Tests for building the public page URL."""

    def test_video_page_url(self) -> None:
        identifier = YouTubeIdentifier(kind=IdentifierKind.VIDEO, value=VIDEO_ID)
        assert identifier.page_url() == f"https://www.youtube.com/watch?v={VIDEO_ID}"

    def test_handle_page_url(self) -> None:
        identifier = parse_identifier("youtube.com/@somehandle")
        assert identifier is not None
        assert identifier.page_url() == "https://www.youtube.com/@somehandle"

    def test_channel_page_url_with_custom_base(self) -> None:
        identifier = YouTubeIdentifier(kind=IdentifierKind.CHANNEL, value=CHANNEL_ID)
        assert (
            identifier.page_url("http://localhost:9000/")
            == f"http://localhost:9000/channel/{CHANNEL_ID}"
        )

    def test_user_and_custom_page_urls(self) -> None:
        custom = YouTubeIdentifier(kind=IdentifierKind.CUSTOM, value="SomeName")
        user = YouTubeIdentifier(kind=IdentifierKind.USER, value="legacyname")
        assert custom.page_url().endswith("/c/SomeName")
        assert user.page_url().endswith("/user/legacyname")


class TestYouTubeIdentifierValidation:
    """The model rejects values that do not fit their kind."""

    def test_short_video_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            YouTubeIdentifier(kind=IdentifierKind.VIDEO, value="short")

    def test_channel_id_without_uc_prefix_rejected(self) -> None:
        with pytest.raises(ValidationError):
            YouTubeIdentifier(kind=IdentifierKind.CHANNEL, value="XX" + "a" * 22)

    def test_handle_prefix_stripped(self) -> None:
        identifier = YouTubeIdentifier(kind=IdentifierKind.HANDLE, value="@somehandle")
        assert identifier.value == "somehandle"

    def test_identifier_is_frozen(self) -> None:
        identifier = YouTubeIdentifier(kind=IdentifierKind.VIDEO, value=VIDEO_ID)
        with pytest.raises(ValidationError):
            identifier.value = "aaaaaaaaaaa"  # type: ignore[misc]


class TestExtractVideoId:
    """Tests for the video-only helper."""

    def test_video_url(self) -> None:
        assert extract_video_id(f"https://youtu.be/{VIDEO_ID}") == VIDEO_ID

    def test_channel_url_gives_none(self) -> None:
        assert extract_video_id("https://www.youtube.com/@somehandle") is None

    def test_invalid_gives_none(self) -> None:
        assert extract_video_id("https://example.com") is None
