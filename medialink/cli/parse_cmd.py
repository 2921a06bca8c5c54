"""Parse, link and scan commands."""

import logging
import sys

import rich_click as click
from rich.markup import escape

from ..classifier import parse_media_link
from ..config import get_interface_config
from ..formatter import format_link
from ..link_utils import extract_urls_from_text, get_hostname
from ._console import console
from ._helpers import output_json, output_table, reference_row

log = logging.getLogger(__name__)

_FORMAT_OPTION = click.option(
    "--format", "-f", "fmt", type=click.Choice(["table", "json"]), default=None, help="Output format"
)
_SHORT_OPTION = click.option(
    "--short/--full", "short", default=None, help="Print type:id shorthand instead of full links"
)


@click.command()
@click.argument("inputs", nargs=-1, required=True)
@_SHORT_OPTION
@_FORMAT_OPTION
def parse(inputs: tuple[str, ...], short: bool | None, fmt: str | None):
    """Classify links or type:id shorthand into media references."""
    interface = get_interface_config()
    if short is None:
        short = interface.short_links
    fmt = fmt or interface.output_format

    rows = [reference_row(raw, parse_media_link(raw), short) for raw in inputs]
    if fmt == "json":
        output_json(rows)
    else:
        output_table(rows, "Media references", interface.color_media_titles)

    unresolved = [row["input"] for row in rows if row["type"] is None]
    if unresolved:
        for raw in unresolved:
            click.echo(f"Not a media link: {raw}", err=True)
        sys.exit(1)


@click.command()
@click.argument("media_type", metavar="TYPE")
@click.argument("media_id", metavar="ID")
@click.option("--short", is_flag=True, help="Print type:id shorthand")
def link(media_type: str, media_id: str, short: bool):
    """Build a link from a media TYPE code and ID."""
    result = format_link(media_type, media_id, short=short)
    if not result:
        console.print(f"[red]No link form for type {escape(media_type)!r}[/red]")
        sys.exit(1)
    click.echo(result)


@click.command()
@click.argument("text", required=False)
@_SHORT_OPTION
@_FORMAT_OPTION
def scan(text: str | None, short: bool | None, fmt: str | None):
    """Find media links in TEXT (or stdin) and classify each one."""
    if text is None:
        text = click.get_text_stream("stdin").read()

    interface = get_interface_config()
    if short is None:
        short = interface.short_links
    fmt = fmt or interface.output_format

    urls = extract_urls_from_text(text)
    log.debug("Found %d URL(s) in %d characters of text", len(urls), len(text))

    rows = []
    for url in urls:
        reference = parse_media_link(url)
        log.debug("%s (%s) -> %s", url, get_hostname(url) or "no host", reference)
        rows.append(reference_row(url, reference, short))

    if fmt == "json":
        output_json(rows)
        return

    if not rows:
        console.print("No links found.")
        return
    output_table(rows, f"Media links ({len(rows)})", interface.color_media_titles)
