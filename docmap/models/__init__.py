"""
Symbol tree model for docmap.

The tree is produced by an upstream builder; docmap only moves comments
and fills in the output location fields.
"""

from docmap.models.comments import Comment, CommentTag
from docmap.models.kinds import ReflectionFlags, ReflectionKind
from docmap.models.loader import load_project, load_project_file
from docmap.models.reflections import (
    ProjectReflection,
    Reflection,
    ReflectionGroup,
    reset_reflection_ids,
)

__all__ = [
    "Comment",
    "CommentTag",
    "ProjectReflection",
    "Reflection",
    "ReflectionFlags",
    "ReflectionGroup",
    "ReflectionKind",
    "load_project",
    "load_project_file",
    "reset_reflection_ids",
]
