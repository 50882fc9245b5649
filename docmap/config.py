"""
Configuration constants and loading utilities for docmap.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml


# Number of in-scope modules from which the navigation switches from a flat
# grouped list to a nested tree. Not user configurable.
MODULE_THRESHOLD = 10

# Value of the readme option that disables the separate index page
README_NONE = "none"


DEFAULT_CONFIG: dict[str, Any] = {
    # Project metadata
    "project": {
        "name": "My Project",
        "description": "docmap configuration",
    },

    # Theme options
    "theme": {
        # Dotted name of the container to document, e.g. "mylib.core".
        # Empty documents the whole project.
        "entry_point": "",
        # Path of the readme rendered on index.html, or "none" to render the
        # entry point itself as index.html.
        "readme": "",
        "hide_generator": False,
        "ga_id": "",
        "ga_site": "auto",
    },

    # JSON output
    "output": {
        "indent": 2,
    },
}


def load_config(config_path: Path) -> dict[str, Any]:
    """
    Load configuration from YAML file, merged with defaults.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Configuration dictionary with user values merged over defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the top level of the file is not a mapping.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        user_config = yaml.safe_load(f) or {}

    return merge_config(user_config)


def merge_config(user_config: dict[str, Any]) -> dict[str, Any]:
    """
    Merge user values one level deep over the defaults.

    Raises:
        ValueError: If the user config is not a mapping.
    """
    if not isinstance(user_config, dict):
        raise ValueError(
            f"Config must be a mapping of sections, got {type(user_config).__name__}"
        )

    config = copy.deepcopy(DEFAULT_CONFIG)
    for key, value in user_config.items():
        if key in config and isinstance(config[key], dict):
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError(f"Config section '{key}' must be a mapping, got {value!r}")
            config[key] = {**config[key], **value}
        else:
            config[key] = value
    return config


def get_config_template() -> str:
    """Generate a documented YAML config template."""
    return '''# =============================================================================
# docmap Configuration
# =============================================================================
# docmap maps a resolved symbol tree to documents, anchors and navigation.
#
# Usage:
#   docmap tree.json --config this_file.yaml -o site-map.json -v
# =============================================================================

project:
  name: "My Project"  # Change to your project name
  description: "Auto-generated config"

# =============================================================================
# THEME
# =============================================================================
# entry_point: dotted name of the container symbol documented as the root,
#              e.g. "mylib.core". Leave empty for the whole project. A name
#              that cannot be resolved falls back to the project (warning).
#
# readme:      "none" renders the entry point as index.html. Any other value
#              renders it as globals.html next to a separate index.html.
# =============================================================================
theme:
  entry_point: ""
  readme: ""
  hide_generator: false
  ga_id: ""
  ga_site: auto

# =============================================================================
# OUTPUT
# =============================================================================
output:
  indent: 2
'''
