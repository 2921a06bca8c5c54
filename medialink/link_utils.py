"""Utilities for picking apart media URLs and the text they arrive in."""

from __future__ import annotations

import re

_URL_RE = re.compile(r"https?://[^\s<>()]+", re.IGNORECASE)
_TRAILING_PUNCT_RE = re.compile(r"[)\],.?!:;]+$")
_HOSTNAME_RE = re.compile(r"^(?:https?://)(?:.+?\.)*?([^./]*?\.[^./]*?)(?:[:/]|$)", re.IGNORECASE)


def extract_query_param(query: str, param: str) -> str | None:
    """
    Return the first value bound to ``param`` in a raw query string.

    ``query`` is the part after ``?``. Values are returned as-is, without URL
    decoding; a pair with no ``=`` binds its key to an empty string.
    """
    for pair in query.split("&"):
        key, _, value = pair.partition("=")
        if key == param:
            return value
    return None


def get_hostname(link: str) -> str:
    """Extract the registrable hostname (``example.com``) from an http(s) URL."""
    match = _HOSTNAME_RE.match(link)
    if not match:
        return ""
    return match.group(1)


def clean_url_candidate(url: str) -> str:
    """Trim punctuation commonly attached to URLs in plain text."""
    cleaned = url.strip()
    cleaned = _TRAILING_PUNCT_RE.sub("", cleaned)
    return cleaned


def extract_urls_from_text(text: str | None) -> list[str]:
    """Extract plain URLs from text, in order and without duplicates."""
    if not text:
        return []
    urls: list[str] = []
    seen: set[str] = set()
    for match in _URL_RE.finditer(text):
        url = clean_url_candidate(match.group(0))
        if not url or url in seen:
            continue
        seen.add(url)
        urls.append(url)
    return urls
