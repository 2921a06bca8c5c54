"""Validation of image links against trusted image hosts."""

from __future__ import annotations

import re
from typing import Literal

_HTTPS_PREFIX = "https://"
_IMAGE_EXT = r"\.(?:jpe?g|gif|png|webp)"
_IMAGE_FLAGS = re.IGNORECASE | re.ASCII

IMAGE_HOST_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (
        "discord",
        re.compile(
            r"(?:cdn\.discordapp\.com|media\.discordapp\.net)/attachments/\d+/\d+/"
            # filename whitespace check stays Unicode-aware
            r"(?u:[^\s\0\\/:*?\"<>|])+" + _IMAGE_EXT,
            _IMAGE_FLAGS,
        ),
    ),
    ("4chan", re.compile(r"is?\d?\.(?:4cdn|4chan)\.org/\w{1,6}/\d{8,15}" + _IMAGE_EXT, _IMAGE_FLAGS)),
    ("gyazo", re.compile(r"i\.gyazo\.com/\w+" + _IMAGE_EXT, _IMAGE_FLAGS)),
    (
        "tumblr",
        re.compile(r"(?:\d+\.)?(?:static|media)\.tumblr\.com/(?:\w+/)*tumblr_\w+(?:_\w+)?" + _IMAGE_EXT, _IMAGE_FLAGS),
    ),
    ("puush", re.compile(r"puu\.sh/\w+/\w+" + _IMAGE_EXT, _IMAGE_FLAGS)),
    ("reddit", re.compile(r"i\.redd\.it/\w+" + _IMAGE_EXT, _IMAGE_FLAGS)),
    ("gfycat", re.compile(r"giant\.gfycat\.com/\w+\.gif", _IMAGE_FLAGS)),
)


def match_image_host(link: str) -> str | None:
    """Return the name of the first trusted host pattern found in ``link``."""
    for name, pattern in IMAGE_HOST_PATTERNS:
        if pattern.search(link):
            return name
    return None


def parse_image_link(value: object) -> str | Literal[False]:
    """
    Check an image link against the trusted host patterns.

    Returns ``"https://"`` plus the matched part of the link, so anything
    after the file extension (query strings, trailing text) is dropped.
    Returns False for non-strings, non-HTTPS links and unknown hosts.
    """
    if not isinstance(value, str):
        return False
    link = value.strip()
    if not link.lower().startswith(_HTTPS_PREFIX):
        return False

    for _name, pattern in IMAGE_HOST_PATTERNS:
        match = pattern.search(link)
        if match:
            return _HTTPS_PREFIX + match.group(0)
    return False
