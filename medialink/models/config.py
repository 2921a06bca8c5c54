"""Pydantic models for medialink configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class InterfaceConfig(BaseModel):
    """Terminal output configuration."""

    color_media_titles: bool = True
    short_links: bool = False
    output_format: Literal["table", "json"] = "table"


class MedialinkConfig(BaseModel):
    """Top-level medialink configuration."""

    interface: InterfaceConfig = InterfaceConfig()
