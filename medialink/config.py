"""Configuration management for medialink."""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

from .models.config import InterfaceConfig, MedialinkConfig

log = logging.getLogger(__name__)

# Application name for XDG paths
APP_NAME = "medialink"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "interface": {
        "color_media_titles": True,  # color the type column by media host
        "short_links": False,  # print type:id instead of full links
        "output_format": "table",  # table or json
    },
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory."""
    return Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))


def get_config_path() -> Path:
    """
    Get the path to the config file.

    Priority:
    1. MEDIALINK_CONFIG environment variable
    2. XDG default: ~/.config/medialink/config.json
    """
    env_path = os.environ.get("MEDIALINK_CONFIG")
    if env_path:
        return Path(env_path)
    return get_xdg_config_home() / APP_NAME / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration, merging with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        with open(config_path) as f:
            user_config = json.load(f)
            config = deep_merge(config, user_config)
        log.debug("Loaded config from %s", config_path)

    return config


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)
    log.debug("Saved config to %s", config_path)


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def get_interface_config() -> InterfaceConfig:
    """Load and validate the ``interface`` section of the configuration."""
    return MedialinkConfig.model_validate(load_config()).interface
