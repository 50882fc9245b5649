"""
Utility functions for docmap.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


def to_style_class(value: str) -> str:
    """
    Transform a camel-cased name into a css class.

    Example:
        "tsd-kind-ExternalModule" -> "tsd-kind-external-module"

    Args:
        value: String to convert.

    Returns:
        Hyphenated lowercase string.
    """
    return re.sub(r"(\w)([A-Z])", r"\1-\2", value).lower()


def join_classes(classes: list[str]) -> str:
    """Join css class tokens with single spaces, keeping their order."""
    return " ".join(classes)


def write_json(data: dict[str, Any], output_path: Path | None, indent: int = 2) -> str:
    """
    Serialize data to JSON and optionally write it to a file.

    Args:
        data: JSON-serializable data.
        output_path: File to write, or None to only return the text.
        indent: Indentation passed to ``json.dumps``.

    Returns:
        The serialized JSON text.
    """
    output = json.dumps(data, indent=indent)
    if output_path is not None:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(output)
        logger.debug("Wrote %d bytes to %s", len(output), output_path)
    return output
