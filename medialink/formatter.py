"""Build display links from media references."""

from __future__ import annotations

import re
from types import MappingProxyType

from .media_types import URL_TYPES, MediaType
from .models.media import MediaReference

_TWITCH_VIDEO_ID_RE = re.compile(r"^v(\d+)$")

LINK_PREFIXES = MappingProxyType(
    {
        MediaType.YOUTUBE.value: "https://youtu.be/",
        MediaType.YOUTUBE_PLAYLIST.value: "https://www.youtube.com/playlist?list=",
        MediaType.VIMEO.value: "https://vimeo.com/",
        MediaType.DAILYMOTION.value: "https://dailymotion.com/video/",
        MediaType.LIVESTREAM.value: "https://livestream.com/",
        MediaType.TWITCH.value: "https://twitch.tv/",
        MediaType.IMGUR.value: "https://imgur.com/a/",
        MediaType.USTREAM.value: "https://ustream.tv/channel/",
        MediaType.GOOGLE_DRIVE.value: "https://docs.google.com/file/d/",
        MediaType.HITBOX.value: "https://www.smashcast.tv/",
        MediaType.STREAMABLE.value: "https://streamable.com/",
        MediaType.TWITCH_CLIP.value: "https://clips.twitch.tv/",
    }
)


def _twitch_vod_link(media_id: str) -> str:
    match = _TWITCH_VIDEO_ID_RE.match(media_id)
    if not match:
        return ""
    return f"https://www.twitch.tv/videos/{match.group(1)}"


def format_link(media_type: str | None, media_id: str | None, short: bool = False) -> str:
    """
    Create a full link from a media type and id, or a ``type:id`` shorthand.

    Returns an empty string when either part is missing or the type has no
    known link form. Types whose id is already a URL return the id unchanged.
    """
    if not media_type or not media_id:
        return ""
    media_type = str(media_type)
    if short:
        return f"{media_type}:{media_id}"
    if media_type in URL_TYPES:
        return media_id
    if media_type == MediaType.TWITCH_VOD.value:
        return _twitch_vod_link(media_id)
    prefix = LINK_PREFIXES.get(media_type)
    if prefix is None:
        return ""
    return prefix + media_id


def format_reference(reference: MediaReference | None, short: bool = False) -> str:
    """Format a ``MediaReference``; None and the null reference give ``""``."""
    if reference is None:
        return ""
    return format_link(reference.type, reference.id, short=short)
