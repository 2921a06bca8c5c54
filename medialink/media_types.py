"""Media type codes shared by the classifier and the formatter."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class MediaType(str, Enum):
    """Short codes identifying a media host or reference kind."""

    YOUTUBE = "yt"
    YOUTUBE_PLAYLIST = "yp"
    VIMEO = "vi"
    DAILYMOTION = "dm"
    SOUNDCLOUD = "sc"
    LIVESTREAM = "li"
    TWITCH = "tw"
    TWITCH_CLIP = "tc"
    TWITCH_VOD = "tv"
    USTREAM = "us"
    HITBOX = "hb"
    GOOGLE_DRIVE = "gd"
    HLS = "hl"
    STREAMABLE = "sb"
    RTMP = "rt"
    RAW_FILE = "fi"
    CUSTOM_MANIFEST = "cm"
    IMGUR = "im"

    def __str__(self) -> str:
        return self.value


# Types whose id is already a full locator rather than a short id.
URL_TYPES = frozenset(
    {
        MediaType.SOUNDCLOUD.value,
        MediaType.RTMP.value,
        MediaType.RAW_FILE.value,
        MediaType.CUSTOM_MANIFEST.value,
        MediaType.HLS.value,
    }
)

DEFAULT_TITLE_STYLE = "bright_white"

MEDIA_TITLE_STYLES = MappingProxyType(
    {
        "yt": "bright_red",
        "li": "bright_blue",
        "vi": "bright_blue",
        "dm": "bright_yellow",
        "sc": "yellow",
        "tw": "bright_magenta",
        "tc": "bright_magenta",
        "im": "bright_green",
        "us": "blue",
        "hb": "blue",
        "gd": "bright_cyan",
        "sb": "bright_cyan",
    }
)


def media_title_style(media_type: str | None) -> str:
    """Return the rich style used to color a media title of the given type."""
    if not media_type:
        return DEFAULT_TITLE_STYLE
    return MEDIA_TITLE_STYLES.get(str(media_type), DEFAULT_TITLE_STYLE)
