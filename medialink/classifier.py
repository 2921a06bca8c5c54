"""Classify pasted links and shorthand references into media references.

Rules are tried in a fixed order, most specific first. Several hosts share
substrings (a Twitch clip, VOD and channel URL all contain ``twitch.tv``), so
reordering the table changes results.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from .link_utils import extract_query_param
from .media_types import MediaType
from .models.media import NULL_REFERENCE, MediaReference

_PLAYER_EMBEDDED_ARTIFACT = "feature=player_embedded&"
_RAW_URL_RE = re.compile(r"^https?://")
_MANIFEST_SUFFIX_RE = re.compile(r"\.json\Z")

# (type, id) for a matched rule; type is None when the code comes from the match.
RuleBuilder = Callable[[re.Match[str], str], tuple[str, str | None]]


@dataclass(frozen=True)
class MediaRule:
    """One entry of the ordered classification table."""

    name: str
    pattern: re.Pattern[str]
    build: RuleBuilder


def _group(media_type: MediaType, index: int = 1) -> RuleBuilder:
    def build(match: re.Match[str], url: str) -> tuple[str, str | None]:
        return media_type.value, match.group(index)

    return build


def _whole_url(media_type: MediaType) -> RuleBuilder:
    def build(match: re.Match[str], url: str) -> tuple[str, str | None]:
        return media_type.value, url

    return build


def _query_param(media_type: MediaType, param: str) -> RuleBuilder:
    def build(match: re.Match[str], url: str) -> tuple[str, str | None]:
        return media_type.value, extract_query_param(match.group(1), param)

    return build


def _twitch_vod(match: re.Match[str], url: str) -> tuple[str, str | None]:
    return MediaType.TWITCH_VOD.value, match.group(1) + match.group(2)


def _twitch_videos(match: re.Match[str], url: str) -> tuple[str, str | None]:
    # twitch.tv/videos/<n> replaced the /<channel>/v/<n> form; keep the same id.
    return MediaType.TWITCH_VOD.value, "v" + match.group(1)


def _shorthand(match: re.Match[str], url: str) -> tuple[str, str | None]:
    return match.group(1), match.group(2)


MEDIA_RULES: tuple[MediaRule, ...] = (
    MediaRule("rtmp", re.compile(r"^rtmp://"), _whole_url(MediaType.RTMP)),
    MediaRule("youtube_watch", re.compile(r"youtube\.com/watch\?([^#]+)"), _query_param(MediaType.YOUTUBE, "v")),
    MediaRule("youtube_shorts", re.compile(r"youtube\.com/shorts/([a-zA-Z0-9_-]{11})"), _group(MediaType.YOUTUBE)),
    MediaRule("youtu_be", re.compile(r"youtu\.be/([^?&#]+)"), _group(MediaType.YOUTUBE)),
    MediaRule(
        "youtube_playlist",
        re.compile(r"youtube\.com/playlist\?([^#]+)"),
        _query_param(MediaType.YOUTUBE_PLAYLIST, "list"),
    ),
    MediaRule("twitch_clip_host", re.compile(r"clips\.twitch\.tv/([A-Za-z]+)"), _group(MediaType.TWITCH_CLIP)),
    MediaRule("twitch_clip_path", re.compile(r"twitch\.tv/(?:.*?)/clip/([A-Za-z]+)"), _group(MediaType.TWITCH_CLIP)),
    MediaRule("twitch_vod", re.compile(r"twitch\.tv/(?:.*?)/([cv])/(\d+)", re.ASCII), _twitch_vod),
    MediaRule("twitch_videos", re.compile(r"twitch\.tv/videos/(\d+)", re.ASCII), _twitch_videos),
    MediaRule("twitch_channel", re.compile(r"twitch\.tv/([\w-]+)", re.ASCII), _group(MediaType.TWITCH)),
    MediaRule("livestream", re.compile(r"livestream\.com/([^?&#]+)"), _group(MediaType.LIVESTREAM)),
    MediaRule("ustream", re.compile(r"ustream\.tv/([^?&#]+)"), _group(MediaType.USTREAM)),
    MediaRule("hitbox", re.compile(r"(?:hitbox|smashcast)\.tv/([^?&#]+)"), _group(MediaType.HITBOX)),
    MediaRule("vimeo", re.compile(r"vimeo\.com/([^?&#]+)"), _group(MediaType.VIMEO)),
    MediaRule("dailymotion", re.compile(r"dailymotion\.com/video/([^?&#_]+)"), _group(MediaType.DAILYMOTION)),
    MediaRule("soundcloud", re.compile(r"soundcloud\.com/([^?&#]+)"), _whole_url(MediaType.SOUNDCLOUD)),
    MediaRule(
        "google_drive_file",
        re.compile(r"(?:docs|drive)\.google\.com/file/d/([a-zA-Z0-9_-]+)"),
        _group(MediaType.GOOGLE_DRIVE),
    ),
    MediaRule(
        "google_drive_open",
        re.compile(r"drive\.google\.com/open\?id=([a-zA-Z0-9_-]+)"),
        _group(MediaType.GOOGLE_DRIVE),
    ),
    MediaRule("hls", re.compile(r"(.*\.m3u8)"), _whole_url(MediaType.HLS)),
    MediaRule("streamable", re.compile(r"streamable\.com/([\w-]+)", re.ASCII), _group(MediaType.STREAMABLE)),
    # Shorthand URIs
    MediaRule("dailymotion_short", re.compile(r"^dm:([^?&#_]+)"), _group(MediaType.DAILYMOTION)),
    # Raw files and manifests keep their query string
    MediaRule("raw_file_short", re.compile(r"^fi:(.*)"), _group(MediaType.RAW_FILE)),
    MediaRule("custom_manifest_short", re.compile(r"^cm:(.*)"), _group(MediaType.CUSTOM_MANIFEST)),
    MediaRule("generic_short", re.compile(r"^([a-z]{2}):([^?&#]+)"), _shorthand),
)


def _normalize_input(raw: str) -> str:
    return raw.strip().replace(_PLAYER_EMBEDDED_ARTIFACT, "")


def _classify_raw_url(url: str) -> MediaReference | None:
    """Treat any remaining http(s) URL as a raw file or a JSON manifest."""
    path = url.split("?")[0]
    if not _RAW_URL_RE.match(path):
        return None
    if _MANIFEST_SUFFIX_RE.search(path):
        return MediaReference(type=MediaType.CUSTOM_MANIFEST.value, id=url)
    return MediaReference(type=MediaType.RAW_FILE.value, id=url)


def match_media_rule(url: str) -> tuple[MediaRule, MediaReference | None] | None:
    """
    Return the first rule matching an already-normalized string.

    The reference is None when the rule matched but could not extract an id
    (e.g. a ``watch?`` URL without ``v=``). Returns None if no rule matches.
    """
    for rule in MEDIA_RULES:
        match = rule.pattern.search(url)
        if not match:
            continue
        media_type, media_id = rule.build(match, url)
        if not media_id:
            return rule, None
        return rule, MediaReference(type=media_type, id=media_id)
    return None


def parse_media_link(raw: object) -> MediaReference | None:
    """
    Classify user input into a media reference.

    Returns ``NULL_REFERENCE`` when ``raw`` is not a string, and None when a
    string matches no rule and is not an http(s) URL.
    """
    if not isinstance(raw, str):
        return NULL_REFERENCE

    url = _normalize_input(raw)
    matched = match_media_rule(url)
    if matched is not None:
        return matched[1]
    return _classify_raw_url(url)
