"""Media link resolver - classify, format and validate embeddable media links."""

from .classifier import parse_media_link
from .formatter import format_link, format_reference
from .images import parse_image_link
from .link_utils import extract_query_param
from .media_types import MediaType
from .models.media import NULL_REFERENCE, MediaReference

try:
    from importlib.metadata import version

    __version__ = version("medialink")
except Exception:
    __version__ = "0.0.0-dev"

__all__ = [
    "MediaReference",
    "MediaType",
    "NULL_REFERENCE",
    "extract_query_param",
    "format_link",
    "format_reference",
    "parse_image_link",
    "parse_media_link",
]
