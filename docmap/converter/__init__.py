"""
Converter plugins that run while the symbol tree is being resolved.
"""

from docmap.converter.deep_comment import DeepCommentPlugin, find_deep_comment

__all__ = [
    "DeepCommentPlugin",
    "find_deep_comment",
]
