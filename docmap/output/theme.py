"""
Default theme: ties partitioning, navigation and css classes together.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from docmap.config import DEFAULT_CONFIG, MODULE_THRESHOLD, README_NONE
from docmap.output.classes import apply_classes
from docmap.output.mappings import DEFAULT_MAPPINGS
from docmap.output.navigation import build_navigation
from docmap.output.urls import get_urls

if TYPE_CHECKING:
    from typing import Any, Sequence

    from docmap.models.reflections import ProjectReflection, Reflection
    from docmap.output.mappings import TemplateMapping
    from docmap.output.navigation import NavigationItem
    from docmap.output.urls import UrlMapping

logger = logging.getLogger(__name__)


# Files that identify an output directory written by this theme
OUTPUT_MARKERS = (
    "index.html",
    "assets",
    "assets/js/main.js",
    "assets/images/icons.png",
)


THEME_PARAMETERS: tuple[dict[str, Any], ...] = (
    {
        "name": "ga_id",
        "help": "Set the Google Analytics tracking ID and activate tracking code.",
        "type": "string",
    },
    {
        "name": "ga_site",
        "help": "Set the site name for Google Analytics. Defaults to `auto`.",
        "type": "string",
        "default": "auto",
    },
    {
        "name": "hide_generator",
        "help": "Do not print the generator link at the end of the page.",
        "type": "boolean",
    },
    {
        "name": "entry_point",
        "help": "Specifies the fully qualified name of the root symbol. Defaults to global namespace.",
        "type": "string",
    },
    {
        "name": "readme",
        "help": 'Path of the readme shown on index.html, or "none" to render the entry point there.',
        "type": "string",
    },
)

# Options passed through to the external renderer
RENDER_OPTIONS = ("ga_id", "ga_site", "hide_generator")


class DefaultTheme:
    """
    Map a project to documents, navigation and css classes.

    Options are read from the ``theme`` section of the configuration.
    """

    def __init__(
        self,
        options: dict[str, Any] | None = None,
        mappings: Sequence[TemplateMapping] = DEFAULT_MAPPINGS,
    ) -> None:
        """
        Initialize the theme.

        Args:
            options: Theme options (see DEFAULT_CONFIG["theme"]).
            mappings: Template mapping rules, tried in order.
        """
        self.options = {**DEFAULT_CONFIG["theme"], **(options or {})}
        self.mappings = tuple(mappings)

    @property
    def has_readme(self) -> bool:
        return self.options.get("readme") != README_NONE

    def get_parameters(self) -> list[dict[str, Any]]:
        """Return the option declarations this theme understands."""
        return [dict(parameter) for parameter in THEME_PARAMETERS]

    def get_render_options(self) -> dict[str, Any]:
        """Return the options the external renderer reads (analytics, generator link)."""
        return {name: self.options.get(name) for name in RENDER_OPTIONS}

    def is_output_directory(self, path: Path) -> bool:
        """
        Test whether a directory contains documentation generated by this theme.

        Args:
            path: Directory to test.

        Returns:
            True if every marker file exists below the directory.
        """
        path = Path(path)
        return all((path / marker).exists() for marker in OUTPUT_MARKERS)

    def get_entry_point(self, project: ProjectReflection) -> Reflection:
        """
        Return the reflection documented as the root.

        An entry point that cannot be found, or that is not a container, is
        reported as a warning and the project is used instead.
        """
        name = self.options.get("entry_point")
        if name:
            reflection = project.get_child_by_name(name)
            if reflection is None:
                logger.warning("The entry point `%s` could not be found.", name)
            elif not reflection.is_container():
                logger.warning("The given entry point `%s` is not a container.", name)
            else:
                return reflection

        return project

    def get_urls(self, project: ProjectReflection) -> list[UrlMapping]:
        """Assign urls to every rendered reflection and list the documents."""
        entry_point = self.get_entry_point(project)
        return get_urls(project, entry_point, self.has_readme, self.mappings)

    def get_navigation(self, project: ProjectReflection) -> NavigationItem:
        """Build the navigation tree. Urls must already be assigned."""
        entry_point = self.get_entry_point(project)
        return build_navigation(project, entry_point, self.has_readme, MODULE_THRESHOLD)

    def apply_classes(self, project: ProjectReflection) -> int:
        """Assign css classes to reflections and groups."""
        return apply_classes(project)
