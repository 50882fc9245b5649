"""
Pipeline orchestrator for docmap.

Runs the stages in the order the host pipeline requires: deep comments
when resolving begins, then urls, navigation and css classes when
rendering begins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docmap import __version__ as VERSION
from docmap.config import DEFAULT_CONFIG
from docmap.converter.deep_comment import DeepCommentPlugin
from docmap.output.theme import DefaultTheme

if TYPE_CHECKING:
    from typing import Any

    from docmap.models.reflections import ProjectReflection, Reflection
    from docmap.output.navigation import NavigationItem
    from docmap.output.urls import UrlMapping

logger = logging.getLogger(__name__)


class RenderResult:
    """Everything handed to the renderer."""

    def __init__(
        self,
        project: ProjectReflection,
        urls: list[UrlMapping],
        navigation: NavigationItem,
        moved_comments: int = 0,
        options: dict[str, Any] | None = None,
    ) -> None:
        self.project = project
        self.urls = urls
        self.navigation = navigation
        self.moved_comments = moved_comments
        self.options = options or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Export the result as JSON-serializable data.

        Returns:
            Dictionary with ``meta``, ``options``, ``documents``,
            ``reflections`` (keyed by id, in tree order) and ``navigation``.
        """
        reflections: dict[str, Any] = {}
        for reflection in [self.project, *self.project.walk()]:
            reflections[str(reflection.id)] = _reflection_to_dict(reflection)

        return {
            "meta": {
                "project": self.project.name,
                "version": VERSION,
                "document_count": len(self.urls),
                "moved_comments": self.moved_comments,
            },
            "options": dict(self.options),
            "documents": [mapping.to_dict() for mapping in self.urls],
            "reflections": reflections,
            "navigation": self.navigation.to_dict(),
        }


def _reflection_to_dict(reflection: Reflection) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": reflection.name,
        "kind": reflection.kind_string,
        "url": reflection.url,
        "anchor": reflection.anchor,
        "hasOwnDocument": reflection.has_own_document,
        "cssClasses": reflection.css_classes,
        "flags": reflection.flags.to_dict(),
    }
    if reflection.parent is not None:
        data["parent"] = reflection.parent.id
    if reflection.comment is not None:
        data["comment"] = reflection.comment.to_dict()
    if reflection.groups:
        data["groups"] = [
            {
                "title": group.title,
                "children": [child.id for child in group.children],
                "cssClasses": group.css_classes,
            }
            for group in reflection.groups
        ]
    return data


class DocumentationPipeline:
    """
    Run comment resolution and output mapping over one project.

    The project is mutated in place. Running the pipeline again over its own
    output changes nothing.
    """

    def __init__(
        self,
        project: ProjectReflection,
        config: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            project: The resolved symbol tree.
            config: Configuration dictionary (see DEFAULT_CONFIG).
        """
        self.project = project
        self.config = config or DEFAULT_CONFIG
        self.theme = DefaultTheme(self.config.get("theme"))
        self.deep_comments = DeepCommentPlugin()
        self.moved_comments = 0

    def resolve_begin(self) -> int:
        """Event point: the converter begins resolving. Moves deep comments."""
        self.moved_comments = self.deep_comments.on_begin_resolve(self.project)
        return self.moved_comments

    def render_begin(self) -> RenderResult:
        """Event point: rendering begins. Assigns urls, navigation and classes."""
        urls = self.theme.get_urls(self.project)
        navigation = self.theme.get_navigation(self.project)
        self.theme.apply_classes(self.project)

        logger.info(
            "Mapped %s: %d document(s), %d navigation root item(s)",
            self.project.name, len(urls), len(navigation.children),
        )
        return RenderResult(
            self.project, urls, navigation, self.moved_comments,
            self.theme.get_render_options(),
        )

    def run(self) -> RenderResult:
        """Run both event points in order."""
        self.resolve_begin()
        return self.render_begin()
