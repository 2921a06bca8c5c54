"""Shared Rich console instance and helpers."""

from rich.console import Console
from rich.markup import escape

from ..media_types import media_title_style

console = Console()


def status_icon(ok: bool) -> str:
    """Return a colored checkmark or cross for status output."""
    if ok:
        return "[green]✓[/green]"
    return "[red]✗[/red]"


def styled_type(media_type: str | None, color: bool) -> str:
    """Render a media type code, colored by host when enabled."""
    if not media_type:
        return "-"
    if not color:
        return escape(media_type)
    style = media_title_style(media_type)
    return f"[{style}]{escape(media_type)}[/{style}]"
