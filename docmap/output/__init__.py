"""
Output mapping for docmap: documents, anchors, navigation and css classes.
"""

from docmap.output.classes import apply_classes, get_group_classes, get_reflection_classes
from docmap.output.mappings import DEFAULT_MAPPINGS, TemplateMapping, get_mapping
from docmap.output.navigation import NavigationItem, build_navigation
from docmap.output.theme import DefaultTheme
from docmap.output.urls import UrlMapping, apply_anchor_url, build_urls, get_url, get_urls

__all__ = [
    "DEFAULT_MAPPINGS",
    "DefaultTheme",
    "NavigationItem",
    "TemplateMapping",
    "UrlMapping",
    "apply_anchor_url",
    "apply_classes",
    "build_navigation",
    "build_urls",
    "get_group_classes",
    "get_mapping",
    "get_reflection_classes",
    "get_url",
    "get_urls",
]
