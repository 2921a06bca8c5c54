"""Config commands."""

import json
import sys

import rich_click as click
from pydantic import ValidationError
from rich.syntax import Syntax

from ..config import DEFAULT_CONFIG, get_config_path, load_config, save_config
from ..models.config import MedialinkConfig
from ._console import console


@click.group()
def config():
    """Manage configuration."""
    pass


@config.command("show")
def config_show():
    """Show current configuration."""
    cfg = load_config()
    json_str = json.dumps(cfg, indent=2)
    syntax = Syntax(json_str, "json", theme="monokai")
    console.print(syntax)


@config.command("path")
def config_path():
    """Show configuration file path."""
    console.print(str(get_config_path()), soft_wrap=True)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value (e.g., interface.short_links true)."""
    cfg = load_config()

    # Parse key path
    parts = key.split(".")
    target = cfg
    for part in parts[:-1]:
        if part not in target:
            target[part] = {}
        target = target[part]

    # Parse value (try as JSON, fall back to string)
    try:
        parsed_value = json.loads(value)
    except json.JSONDecodeError:
        parsed_value = value

    target[parts[-1]] = parsed_value
    try:
        MedialinkConfig.model_validate(cfg)
    except ValidationError as e:
        console.print(f"[red]Invalid value for {key}: {e.errors()[0]['msg']}[/red]")
        sys.exit(1)

    save_config(cfg)
    console.print(f"Set {key} = {parsed_value}")


@config.command("reset")
def config_reset():
    """Restore the default configuration."""
    save_config(DEFAULT_CONFIG)
    console.print("Configuration reset to defaults.")
