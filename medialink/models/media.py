"""Pydantic model for resolved media references."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MediaReference(BaseModel):
    """A ``(type, id)`` pair identifying one embeddable media item.

    For some types (SoundCloud, HLS, RTMP, raw files, custom manifests) the id
    is the full URL of the media; ``type`` alone decides how to read it.
    """

    model_config = ConfigDict(frozen=True)

    type: str | None = None
    id: str | None = None

    @property
    def is_null(self) -> bool:
        return self.type is None and self.id is None


# Returned for input that is not a string at all; unmatched strings give None.
NULL_REFERENCE = MediaReference()
