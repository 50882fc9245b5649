"""
docmap - map a resolved symbol tree to documentation pages.

Moves deep comments to the symbols they describe, partitions the tree
into documents and anchors, builds the navigation and assigns css classes.
"""

__version__ = "1.0.0"

from docmap.pipeline import DocumentationPipeline, RenderResult
from docmap.config import DEFAULT_CONFIG, MODULE_THRESHOLD

__all__ = [
    "DocumentationPipeline",
    "RenderResult",
    "DEFAULT_CONFIG",
    "MODULE_THRESHOLD",
    "__version__",
]
