"""Pydantic models for the medialink package."""

from __future__ import annotations

from .config import InterfaceConfig, MedialinkConfig
from .media import NULL_REFERENCE, MediaReference

__all__ = [
    "InterfaceConfig",
    "MediaReference",
    "MedialinkConfig",
    "NULL_REFERENCE",
]
