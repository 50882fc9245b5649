"""
Navigation tree construction.

The navigation lists the modules of the documented project. Small
projects get one flat list grouped into internal and external modules;
projects with many modules get a nested tree below the entry point's
direct module children.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docmap.config import MODULE_THRESHOLD
from docmap.models.kinds import ReflectionKind
from docmap.output.urls import GLOBALS_URL, INDEX_URL

if TYPE_CHECKING:
    from typing import Any, Callable

    from docmap.models.reflections import ProjectReflection, Reflection

logger = logging.getLogger(__name__)

DIVIDER_CLASSES = "tsd-is-external"


class NavigationItem:
    """A node of the navigation tree."""

    def __init__(
        self,
        title: str,
        url: str | None = None,
        parent: NavigationItem | None = None,
        css_classes: str | None = None,
        reflection: Reflection | None = None,
    ) -> None:
        """
        Initialize a navigation node and append it to its parent.

        Args:
            title: Visible label.
            url: Target url, or None for non-clickable dividers.
            parent: Parent node; the new node is appended to its children.
            css_classes: Explicit css classes. Defaults to the classes of
                ``reflection`` at the time they are read.
            reflection: The reflection this node points at.
        """
        self.title = title
        self.url = url
        self.parent = parent
        self.reflection = reflection
        self.children: list[NavigationItem] = []
        self.is_globals = False
        self.dedicated_urls: list[str] | None = None
        self._css_classes = css_classes

        if parent is not None:
            parent.children.append(self)

    @property
    def css_classes(self) -> str:
        if self._css_classes is not None:
            return self._css_classes
        if self.reflection is not None:
            return self.reflection.css_classes
        return ""

    @classmethod
    def create(
        cls,
        reflection: Reflection,
        parent: NavigationItem | None = None,
    ) -> NavigationItem:
        """
        Create a navigation node pointing at a reflection.

        Top level nodes show the full dotted name; nested nodes show the
        short name.
        """
        if parent is not None and parent.parent is not None:
            name = reflection.name
        else:
            name = reflection.get_full_name()

        name = name.strip()
        if name == "":
            name = f"<em>{reflection.kind_string}</em>"

        return cls(name, reflection.url, parent, reflection=reflection)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title, "url": self.url}
        if self.css_classes:
            data["cssClasses"] = self.css_classes
        if self.is_globals:
            data["isGlobals"] = True
        if self.dedicated_urls is not None:
            data["dedicatedUrls"] = list(self.dedicated_urls)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    def __repr__(self) -> str:
        return f"NavigationItem({self.title!r}, {self.url!r})"


def contains_externals(modules: list[Reflection]) -> bool:
    """Test whether any of the modules is marked as external."""
    return any(module.flags.is_external for module in modules)


def sort_reflections(modules: list[Reflection]) -> list[Reflection]:
    """Sort modules by full name with external modules last."""
    return sorted(modules, key=lambda module: (module.flags.is_external, module.get_full_name()))


def include_dedicated_urls(reflection: Reflection, item: NavigationItem) -> None:
    """
    Store the urls rendered on the reflection's pages as dedicated urls.

    Walks the whole child tree and collects the url of every descendant
    that has no document of its own and is not a module.
    """
    urls = _collect_dedicated_urls(reflection, [])
    if urls:
        item.dedicated_urls = urls


def _collect_dedicated_urls(reflection: Reflection, urls: list[str]) -> list[str]:
    for child in reflection.children.values():
        if not child.has_own_document and not child.kind_of(ReflectionKind.SomeModule) and child.url:
            urls.append(child.url)
        _collect_dedicated_urls(child, urls)
    return urls


def build_children(reflection: Reflection, parent: NavigationItem) -> None:
    """
    Create nested navigation nodes for all module children of a reflection.

    Args:
        reflection: The reflection whose module children become nodes.
        parent: Node the new nodes are appended to.
    """
    modules = reflection.get_children_by_kind(ReflectionKind.SomeModule)
    for module in sorted(modules, key=lambda module: module.get_full_name()):
        item = NavigationItem.create(module, parent)
        include_dedicated_urls(module, item)
        build_children(module, item)


def build_groups(
    reflections: list[Reflection],
    parent: NavigationItem,
    callback: Callable[[Reflection, NavigationItem], None] | None = None,
) -> None:
    """
    Create navigation nodes for a list of modules.

    When the list mixes internal and external modules, an "Internals" and an
    "Externals" divider is inserted where the category changes.

    Args:
        reflections: Modules to create nodes for.
        parent: Node the new nodes are appended to.
        callback: Invoked with each module and its new node.
    """
    has_externals = contains_externals(reflections)
    internals_added = False
    externals_added = False

    for reflection in sort_reflections(reflections):
        if has_externals and not reflection.flags.is_external and not internals_added:
            NavigationItem("Internals", None, parent, DIVIDER_CLASSES)
            internals_added = True
        elif has_externals and reflection.flags.is_external and not externals_added:
            NavigationItem("Externals", None, parent, DIVIDER_CLASSES)
            externals_added = True

        item = NavigationItem.create(reflection, parent)
        include_dedicated_urls(reflection, item)
        if callback is not None:
            callback(reflection, item)


def find_scoped_modules(project: ProjectReflection, entry_point: Reflection) -> list[Reflection]:
    """
    Return the modules shown in the navigation.

    A module is in scope when it is the entry point, or when it lies below
    the entry point without an external module in between.
    """
    modules = []
    for module in project.get_reflections_by_kind(ReflectionKind.SomeModule):
        in_scope = module is entry_point
        target = module.parent
        while not in_scope and target is not None:
            if target is entry_point:
                in_scope = True
            elif target.kind_of(ReflectionKind.ExternalModule):
                break
            target = target.parent

        if in_scope and module.is_declaration():
            modules.append(module)
    return modules


def build_navigation(
    project: ProjectReflection,
    entry_point: Reflection,
    has_readme: bool = True,
    threshold: int = MODULE_THRESHOLD,
) -> NavigationItem:
    """
    Build the navigation tree of a project.

    Args:
        project: The project being rendered.
        entry_point: Container whose subtree is documented.
        has_readme: Whether globals are rendered to a separate globals.html.
        threshold: Module count from which the nested layout is used.

    Returns:
        The root navigation node.
    """
    root = NavigationItem("Index", INDEX_URL)

    if entry_point is project:
        globals_item = NavigationItem("Globals", GLOBALS_URL if has_readme else INDEX_URL, root)
        globals_item.is_globals = True

    modules = find_scoped_modules(project, entry_point)
    if len(modules) < threshold:
        logger.debug("Building flat navigation for %d module(s)", len(modules))
        build_groups(modules, root)
    else:
        logger.debug("Building nested navigation for %d module(s)", len(modules))
        build_groups(
            entry_point.get_children_by_kind(ReflectionKind.SomeModule),
            root,
            build_children,
        )

    return root
