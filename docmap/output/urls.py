"""
Document partitioning: decide which symbols get their own page.

Symbols matching a template mapping rule are rendered to their own
document under the rule's directory; every other symbol becomes an anchor
on the nearest document that renders it.
"""

from __future__ import annotations

import logging
import posixpath
from typing import TYPE_CHECKING

from docmap.output.mappings import DEFAULT_MAPPINGS, get_mapping

if TYPE_CHECKING:
    from typing import Any, Sequence

    from docmap.models.reflections import ProjectReflection, Reflection
    from docmap.output.mappings import TemplateMapping

logger = logging.getLogger(__name__)

INDEX_URL = "index.html"
GLOBALS_URL = "globals.html"
INDEX_TEMPLATE = "index.hbs"
REFLECTION_TEMPLATE = "reflection.hbs"


class UrlMapping:
    """A document to render: the url, the symbol shown on it and its template."""

    def __init__(self, url: str, model: Reflection, template: str) -> None:
        self.url = url
        self.model = model
        self.template = template

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "id": self.model.id,
            "name": self.model.name,
            "template": self.template,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UrlMapping):
            return NotImplemented
        return (
            self.url == other.url
            and self.model is other.model
            and self.template == other.template
        )

    def __repr__(self) -> str:
        return f"UrlMapping({self.url!r}, {self.model!r}, {self.template!r})"


def get_url(
    reflection: Reflection,
    relative: Reflection | None = None,
    separator: str = ".",
) -> str:
    """
    Return the dotted alias path of a reflection.

    Args:
        reflection: The reflection the path is generated for.
        relative: Ancestor the path stops at (exclusive). The project root
            always stops the path.
        separator: Separator placed between segments.

    Returns:
        e.g. ``"mymodule.myclass"``.
    """
    url = reflection.get_alias()
    parent = reflection.parent
    if parent is not None and parent is not relative and not parent.is_project():
        url = get_url(parent, relative, separator) + separator + url
    return url


def get_urls(
    project: ProjectReflection,
    entry_point: Reflection,
    has_readme: bool = True,
    mappings: Sequence[TemplateMapping] = DEFAULT_MAPPINGS,
) -> list[UrlMapping]:
    """
    Map the symbols below the entry point to output documents.

    Args:
        project: The project being rendered.
        entry_point: Container whose subtree is documented.
        has_readme: With a readme the entry point is rendered to
            ``globals.html`` and a separate ``index.html`` overview is added.
        mappings: Template mapping rules, tried in order.

    Returns:
        Documents in pre-order traversal order.
    """
    urls: list[UrlMapping] = []

    if has_readme:
        _set_document(entry_point, GLOBALS_URL)
        urls.append(UrlMapping(GLOBALS_URL, entry_point, REFLECTION_TEMPLATE))
        urls.append(UrlMapping(INDEX_URL, project, INDEX_TEMPLATE))
        if project is not entry_point:
            _set_document(project, INDEX_URL)
    else:
        _set_document(entry_point, INDEX_URL)
        urls.append(UrlMapping(INDEX_URL, entry_point, REFLECTION_TEMPLATE))
        if project is not entry_point:
            # The project root is always a page root, even when not rendered itself
            _set_document(project, INDEX_URL)

    for child in entry_point.traverse():
        if child.id in entry_point.children and child.is_declaration():
            build_urls(child, urls, mappings)
        else:
            apply_anchor_url(child, entry_point)

    logger.debug("Partitioned %r into %d document(s)", entry_point.name, len(urls))
    return urls


def build_urls(
    reflection: Reflection,
    urls: list[UrlMapping],
    mappings: Sequence[TemplateMapping] = DEFAULT_MAPPINGS,
) -> list[UrlMapping]:
    """
    Build the url of a reflection and of everything below it.

    Args:
        reflection: The reflection the url should be created for.
        urls: List the new documents are appended to.
        mappings: Template mapping rules, tried in order.

    Returns:
        The ``urls`` list.
    """
    mapping = get_mapping(reflection, mappings)
    if mapping is None:
        apply_anchor_url(reflection, _document_owner(reflection))
        return urls

    url = posixpath.join(mapping.directory, get_url(reflection) + ".html")
    urls.append(UrlMapping(url, reflection, mapping.template))
    _set_document(reflection, url)

    for child in reflection.traverse():
        is_child_declaration = child.id in reflection.children and child.is_declaration()
        if mapping.is_leaf or not is_child_declaration:
            apply_anchor_url(child, reflection)
        else:
            build_urls(child, urls, mappings)

    return urls


def apply_anchor_url(reflection: Reflection, container: Reflection) -> None:
    """
    Render a reflection and all of its descendants as anchors on a document.

    Args:
        reflection: The reflection an anchor should be created for.
        container: The nearest reflection having its own document.
    """
    anchor = get_url(reflection, container, ".")
    if reflection.flags.is_static:
        anchor = "static-" + anchor

    reflection.url = container.url + "#" + anchor
    reflection.anchor = anchor
    reflection.has_own_document = False

    for child in reflection.traverse():
        apply_anchor_url(child, container)


def _set_document(reflection: Reflection, url: str) -> None:
    reflection.url = url
    reflection.anchor = ""
    reflection.has_own_document = True


def _document_owner(reflection: Reflection) -> Reflection:
    """Return the nearest ancestor that owns a document."""
    target = reflection.parent
    while target is not None and not target.has_own_document:
        target = target.parent
    if target is None:
        raise ValueError(f"{reflection!r} has no ancestor with its own document")
    return target
