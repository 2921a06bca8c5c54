"""Image link validation command."""

import sys

import rich_click as click
from rich.markup import escape

from ..images import match_image_host, parse_image_link
from ._console import console, status_icon


@click.command()
@click.argument("links", nargs=-1, required=True)
def image(links: tuple[str, ...]):
    """Check image LINKS against the trusted image hosts."""
    rejected = 0
    for raw in links:
        result = parse_image_link(raw)
        if result:
            host = match_image_host(result)
            console.print(f"{status_icon(True)} {escape(result)} [dim]({host})[/dim]", soft_wrap=True)
        else:
            rejected += 1
            console.print(f"{status_icon(False)} {escape(raw)} [red]rejected[/red]", soft_wrap=True)

    if rejected:
        console.print(f"\n[red]{rejected} link(s) rejected[/red]")
        sys.exit(1)
