"""
Template mapping rules: which kinds of symbols get their own document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from docmap.models.kinds import ReflectionKind

if TYPE_CHECKING:
    from typing import Sequence

    from docmap.models.reflections import Reflection


class TemplateMapping(NamedTuple):
    """
    Maps a set of kinds to an output directory and template.

    ``is_leaf`` rules render every descendant into the same document
    instead of giving children their own documents.
    """

    kinds: tuple[ReflectionKind, ...]
    is_leaf: bool
    directory: str
    template: str


DEFAULT_MAPPINGS: tuple[TemplateMapping, ...] = (
    TemplateMapping((ReflectionKind.Class,), False, "classes", "reflection.hbs"),
    TemplateMapping((ReflectionKind.Interface,), False, "interfaces", "reflection.hbs"),
    TemplateMapping((ReflectionKind.Enum,), False, "enums", "reflection.hbs"),
    TemplateMapping(
        (ReflectionKind.Module, ReflectionKind.ExternalModule),
        False,
        "modules",
        "reflection.hbs",
    ),
)


def get_mapping(
    reflection: Reflection,
    mappings: Sequence[TemplateMapping] = DEFAULT_MAPPINGS,
) -> TemplateMapping | None:
    """Return the first rule matching the reflection's kind, or None."""
    for mapping in mappings:
        if reflection.kind_of(mapping.kinds):
            return mapping
    return None
