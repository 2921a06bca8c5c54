"""Shared CLI utilities."""

import json

import rich_click as click
from rich.markup import escape
from rich.table import Table

from ..formatter import format_reference
from ..models.media import MediaReference
from ._console import console, styled_type


def reference_row(raw: str, reference: MediaReference | None, short: bool) -> dict[str, str | None]:
    """Flatten a classification result into an output row."""
    if reference is None:
        return {"input": raw, "type": None, "id": None, "link": None}
    return {
        "input": raw,
        "type": reference.type,
        "id": reference.id,
        "link": format_reference(reference, short=short) or None,
    }


def output_json(rows: list[dict]) -> None:
    click.echo(json.dumps(rows, indent=2))


def output_table(rows: list[dict], title: str, color: bool) -> None:
    table = Table(title=title)
    table.add_column("Input", overflow="fold")
    table.add_column("Type", style="bold")
    table.add_column("ID", overflow="fold")
    table.add_column("Link", overflow="fold")

    for row in rows:
        table.add_row(
            escape(row["input"]),
            styled_type(row["type"], color),
            escape(row["id"] or "-"),
            escape(row["link"] or "-"),
        )

    console.print(table)
