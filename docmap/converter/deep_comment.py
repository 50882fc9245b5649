"""
Deep comment resolution.

Moves comment tags written with dot syntax to the symbol they describe.
A class comment containing ``@param bar.x The x value`` documents the
parameter ``x`` of method ``bar``; once resolved the tag is removed from
the class comment and becomes the comment of the parameter.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docmap.models.comments import Comment, CommentTag

if TYPE_CHECKING:
    from docmap.models.reflections import ProjectReflection, Reflection

logger = logging.getLogger(__name__)


def path_segment(reflection: Reflection) -> str:
    """
    Return the name segment a reflection contributes to a deep comment path.

    Signatures and unnamed or internal (``__``-prefixed) symbols contribute
    nothing.
    """
    part = reflection.original_name
    if not part or part.startswith("__") or reflection.is_signature():
        return ""
    return part


def find_deep_comment(reflection: Reflection) -> CommentTag | None:
    """
    Search the ancestors of a reflection for a tag addressed to it.

    Every ancestor's comment is checked, including signatures that do not
    contribute to the dotted path. The nearest match wins; the project root
    is never searched.

    Args:
        reflection: A reflection without a comment.

    Returns:
        The claimed tag (already removed from its ancestor), or None.
    """
    name = path_segment(reflection)
    target = reflection.parent

    while target is not None and not target.is_project():
        comment = target.comment
        if comment is not None:
            tag = None
            if reflection.is_type_parameter():
                tag = comment.get_tag("typeparam", reflection.name)
                if tag is None:
                    tag = comment.get_tag("param", f"<{reflection.name}>")
            if tag is None and name:
                tag = comment.get_tag("param", name)

            if tag is not None:
                comment.remove_tag(tag)
                reflection.comment = Comment("", "", [CommentTag("", "", tag.text)])
                logger.debug(
                    "Moved @%s %s from %r to %r",
                    tag.tag_name, tag.param_name, target.name, reflection.name,
                )
                return tag

        # The path is relative to the ancestor whose comment is checked,
        # so a segment is only added once we move past it.
        part = path_segment(target)
        if part:
            name = part + "." + name if name else part
        target = target.parent

    return None


class DeepCommentPlugin:
    """
    Resolve dot-syntax comment tags for a whole project.

    Runs once when the converter begins resolving, before any output
    location is computed.
    """

    def on_begin_resolve(self, project: ProjectReflection) -> int:
        """
        Give every undocumented reflection its deep comment, if any.

        Args:
            project: The project to process.

        Returns:
            Number of tags moved.
        """
        moved = 0
        for reflection in list(project.walk()):
            if reflection.comment is None and find_deep_comment(reflection) is not None:
                moved += 1

        logger.debug("Deep comment resolution moved %d tag(s)", moved)
        return moved
