"""
Identifier parsing for user-supplied YouTube URLs.

Users paste anything from a bare video id to a full channel URL with
tracking parameters. ``parse_identifier`` reduces that input to a single
``YouTubeIdentifier`` (video, channel id, handle, custom name or legacy
user name) or ``None`` when nothing recognisable is present.

Functions
---------
parse_identifier
    Parse any supported input form into a ``YouTubeIdentifier``.
extract_video_id
    Parse only the video forms and return the bare id.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, model_validator

from creatorkit.models.enums import IdentifierKind
from creatorkit.models.youtube_types import (
    CHANNEL_ID_RE,
    VIDEO_ID_RE,
    validate_channel_id,
    validate_handle,
    validate_video_id,
)

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")

_YT = r"^https?://(?:[\w-]+\.)*youtube\.com/"
_YT_NOCOOKIE = r"^https?://(?:[\w-]+\.)*(?:youtube\.com|youtube-nocookie\.com)/"
_ID11 = r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"
_NAME = r"([A-Za-z0-9_.-]{1,100})"

# Video forms, tried before channel forms.
_VIDEO_URL_PATTERNS: list[re.Pattern[str]] = [
    re.compile(_YT + r"watch\?(?:[^#]*&)?v=" + _ID11),
    re.compile(r"^https?://(?:www\.)?youtu\.be/" + _ID11),
    re.compile(_YT + r"shorts/" + _ID11),
    re.compile(_YT_NOCOOKIE + r"embed/" + _ID11),
    re.compile(_YT + r"v/" + _ID11),
]

_CHANNEL_URL_PATTERNS: list[tuple[IdentifierKind, re.Pattern[str]]] = [
    (
        IdentifierKind.CHANNEL,
        re.compile(_YT + r"channel/(UC[A-Za-z0-9_-]{22})(?![A-Za-z0-9_-])"),
    ),
    (IdentifierKind.HANDLE, re.compile(_YT + r"@" + _NAME)),
    (IdentifierKind.CUSTOM, re.compile(_YT + r"c/" + _NAME)),
    (IdentifierKind.USER, re.compile(_YT + r"user/" + _NAME)),
]

_PATH_PREFIX: dict[IdentifierKind, str] = {
    IdentifierKind.VIDEO: "/watch?v=",
    IdentifierKind.CHANNEL: "/channel/",
    IdentifierKind.HANDLE: "/@",
    IdentifierKind.CUSTOM: "/c/",
    IdentifierKind.USER: "/user/",
}

_VALIDATORS: dict[IdentifierKind, Callable[[str], str]] = {
    IdentifierKind.VIDEO: validate_video_id,
    IdentifierKind.CHANNEL: validate_channel_id,
    IdentifierKind.HANDLE: validate_handle,
    IdentifierKind.CUSTOM: validate_handle,
    IdentifierKind.USER: validate_handle,
}


class YouTubeIdentifier(BaseModel):
    """
    A canonical YouTube identifier parsed from user input.

    Attributes
    ----------
    kind : IdentifierKind
        Which form of identifier this is.
    value : str
        The bare identifier: an 11-char video id, a ``UC`` channel id,
        or a handle / custom name / user name without prefixes.
    """

    model_config = ConfigDict(frozen=True)

    kind: IdentifierKind
    value: str

    @model_validator(mode="before")
    @classmethod
    def validate_value_for_kind(cls, data: Any) -> Any:
        """Check the value has the format its kind requires."""
        if isinstance(data, dict) and "kind" in data and "value" in data:
            kind = IdentifierKind(data["kind"])
            data = {**data, "kind": kind, "value": _VALIDATORS[kind](data["value"])}
        return data

    @property
    def is_video(self) -> bool:
        """True for video identifiers."""
        return self.kind == IdentifierKind.VIDEO

    @property
    def is_channel(self) -> bool:
        """True for any of the channel identifier forms."""
        return self.kind != IdentifierKind.VIDEO

    def page_url(self, base_url: str = "https://www.youtube.com") -> str:
        """
        Build the public page URL for this identifier.

        Parameters
        ----------
        base_url : str
            Scheme and host of the YouTube site, without trailing slash.

        Returns
        -------
        str
            e.g. ``https://www.youtube.com/watch?v=dQw4w9WgXcQ`` or
            ``https://www.youtube.com/@somehandle``.
        """
        return f"{base_url.rstrip('/')}{_PATH_PREFIX[self.kind]}{self.value}"


def _with_scheme(raw: str) -> str:
    """Prefix ``https://`` when the input carries no scheme."""
    if _SCHEME_RE.match(raw):
        return raw
    return "https://" + raw


def _match_video(url: str) -> str | None:
    for pattern in _VIDEO_URL_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def parse_identifier(raw: str | None) -> YouTubeIdentifier | None:
    """
    Parse a user-supplied string into a YouTube identifier.

    Recognised forms, in priority order: bare 11-character video id,
    ``watch?v=``, ``youtu.be/``, ``shorts/``, ``embed/``, ``/v/``,
    ``/channel/UC…``, ``/@handle``, ``/c/name``, ``/user/name`` and a
    bare ``UC`` channel id. The only normalisation applied is trimming
    whitespace and prefixing ``https://`` when no scheme is given.

    Parameters
    ----------
    raw : str | None
        URL or bare id as typed by the user.

    Returns
    -------
    YouTubeIdentifier | None
        The parsed identifier, or None if the input is not recognised.

    Examples
    --------
    >>> parse_identifier("https://youtu.be/dQw4w9WgXcQ").value
    'dQw4w9WgXcQ'
    >>> parse_identifier("youtube.com/@somehandle").value
    'somehandle'
    >>> parse_identifier("https://example.com/watch?v=dQw4w9WgXcQ") is None
    True
    """
    if raw is None:
        return None

    cleaned = raw.strip()
    if not cleaned:
        return None

    if VIDEO_ID_RE.match(cleaned):
        return YouTubeIdentifier(kind=IdentifierKind.VIDEO, value=cleaned)

    url = _with_scheme(cleaned)

    video_id = _match_video(url)
    if video_id is not None:
        return YouTubeIdentifier(kind=IdentifierKind.VIDEO, value=video_id)

    for kind, pattern in _CHANNEL_URL_PATTERNS:
        match = pattern.search(url)
        if match:
            return YouTubeIdentifier(kind=kind, value=match.group(1))

    if CHANNEL_ID_RE.match(cleaned):
        return YouTubeIdentifier(kind=IdentifierKind.CHANNEL, value=cleaned)

    return None


def extract_video_id(raw: str | None) -> str | None:
    """
    Return the video id from a video URL or bare id, or None.

    Channel URLs yield None even though they are valid identifiers.
    """
    identifier = parse_identifier(raw)
    if identifier is None or not identifier.is_video:
        return None
    return identifier.value
