"""
CSS class generation for reflections and reflection groups.

Tokens are emitted in a fixed order so that rendered output is
reproducible.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docmap.models.kinds import ReflectionKind, kind_name
from docmap.utils import join_classes, to_style_class

if TYPE_CHECKING:
    from docmap.models.reflections import ProjectReflection, Reflection, ReflectionGroup

logger = logging.getLogger(__name__)


def kind_class(reflection: Reflection) -> str:
    """Return the ``tsd-kind-*`` token of a reflection."""
    if reflection.kind == ReflectionKind.Accessor:
        if reflection.get_signature is None:
            return "tsd-kind-set-signature"
        if reflection.set_signature is None:
            return "tsd-kind-get-signature"
        return "tsd-kind-accessor"
    return to_style_class("tsd-kind-" + kind_name(reflection.kind))


def has_type_parameters(reflection: Reflection) -> bool:
    """True if the reflection or any of its signatures declares type parameters."""
    if reflection.type_parameters:
        return True
    return any(signature.type_parameters for signature in reflection.get_all_signatures())


def get_reflection_classes(reflection: Reflection) -> str:
    """
    Compute the css classes of a reflection.

    Args:
        reflection: A declaration reflection.

    Returns:
        Space separated class tokens.
    """
    classes = [kind_class(reflection)]

    parent = reflection.parent
    if parent is not None and parent.is_declaration():
        classes.append(to_style_class("tsd-parent-kind-" + kind_name(parent.kind)))

    flags = reflection.flags
    if has_type_parameters(reflection):
        classes.append("tsd-has-type-parameter")
    if reflection.overwrites:
        classes.append("tsd-is-overwrite")
    if reflection.inherited_from:
        classes.append("tsd-is-inherited")
    if flags.is_private:
        classes.append("tsd-is-private")
    if flags.is_protected:
        classes.append("tsd-is-protected")
    if flags.is_static:
        classes.append("tsd-is-static")
    if flags.is_external:
        classes.append("tsd-is-external")
    if not flags.is_exported:
        classes.append("tsd-is-not-exported")

    return join_classes(classes)


def get_group_classes(group: ReflectionGroup) -> str:
    """Compute the css classes of a reflection group from its aggregate flags."""
    classes = []
    if group.all_children_are_inherited:
        classes.append("tsd-is-inherited")
    if group.all_children_are_private:
        classes.append("tsd-is-private")
    if group.all_children_are_protected_or_private:
        classes.append("tsd-is-private-protected")
    if group.all_children_are_external:
        classes.append("tsd-is-external")
    if not group.some_children_are_exported:
        classes.append("tsd-is-not-exported")
    return join_classes(classes)


def apply_reflection_classes(reflection: Reflection) -> None:
    reflection.css_classes = get_reflection_classes(reflection)


def apply_group_classes(group: ReflectionGroup) -> None:
    group.css_classes = get_group_classes(group)


def apply_classes(project: ProjectReflection) -> int:
    """
    Assign css classes to every declaration and every group of the project.

    Args:
        project: The project being rendered.

    Returns:
        Number of reflections that received classes.
    """
    for group in project.groups or []:
        apply_group_classes(group)

    count = 0
    for reflection in project.walk():
        if reflection.is_declaration():
            apply_reflection_classes(reflection)
            count += 1
        if reflection.is_container():
            for group in reflection.groups or []:
                apply_group_classes(group)

    logger.debug("Applied css classes to %d reflection(s)", count)
    return count
