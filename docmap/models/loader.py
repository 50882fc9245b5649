"""
Build a symbol tree from the JSON export of the upstream tree builder.

Expected shape (all keys except ``name`` and ``kind`` are optional)::

    {
        "id": 0, "name": "my-project", "kind": "Global",
        "children": [
            {
                "name": "Foo", "kind": "Class",
                "flags": {"isExported": true},
                "comment": {"shortText": "...", "tags": [{"tag": "param", "paramName": "bar.x", "text": "..."}]},
                "children": [...],
                "signatures": [{"name": "bar", "kind": "CallSignature", "parameters": [...]}],
                "groups": [{"title": "Methods", "kind": "Method", "children": [3, 4]}]
            }
        ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from docmap.models.comments import Comment, CommentTag
from docmap.models.kinds import ReflectionKind, kind_from_name
from docmap.models.reflections import (
    ProjectReflection,
    Reflection,
    ReflectionGroup,
    reset_reflection_ids,
)

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


# camelCase keys of the JSON export -> ReflectionFlags attributes
FLAG_KEYS = {
    "isPrivate": "is_private",
    "isProtected": "is_protected",
    "isPublic": "is_public",
    "isStatic": "is_static",
    "isExternal": "is_external",
    "isExported": "is_exported",
    "isOptional": "is_optional",
    "isRest": "is_rest",
}


def load_project_file(path: Path) -> ProjectReflection:
    """
    Load a symbol tree from a JSON file.

    Args:
        path: Path to the JSON export.

    Returns:
        The project reflection.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file content is not a valid tree.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return load_project(data)


def load_project(data: dict[str, Any]) -> ProjectReflection:
    """
    Build a project reflection from a nested dictionary.

    Args:
        data: Root node of the exported tree.

    Returns:
        The project reflection with all relations and groups linked.

    Raises:
        ValueError: If a node is malformed or uses an unknown kind.
    """
    if not isinstance(data, dict):
        raise ValueError("Symbol tree root must be an object")

    reset_reflection_ids()
    loader = _TreeLoader()
    project = ProjectReflection(str(data.get("name", "")), id=loader.claim_id(data))
    loader.register(project, data)
    loader.load_relations(project, data)
    loader.link_groups()

    logger.debug("Loaded symbol tree %r with %d reflections", project.name, len(loader.by_id))
    return project


def _as_list(node: dict[str, Any], key: str) -> list[Any]:
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' of {node.get('name')!r} must be a list, got {value!r}")
    return value


def _as_dict(node: dict[str, Any], key: str) -> dict[str, Any]:
    value = node.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' of {node.get('name')!r} must be an object, got {value!r}")
    return value


def _as_id(value: Any, owner: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid reflection id {value!r} in {owner!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid reflection id {value!r} in {owner!r}") from None


class _TreeLoader:
    """Holds id bookkeeping while one tree is loaded."""

    def __init__(self) -> None:
        self.by_id: dict[int, Reflection] = {}
        self.pending_groups: list[tuple[Reflection, list[Any]]] = []
        self._next_id = 0

    def claim_id(self, node: dict[str, Any]) -> int:
        if "id" in node:
            node_id = _as_id(node["id"], node.get("name"))
        else:
            while self._next_id in self.by_id:
                self._next_id += 1
            node_id = self._next_id
        if node_id in self.by_id:
            raise ValueError(f"Duplicate reflection id: {node_id}")
        self._next_id = max(self._next_id, node_id + 1)
        return node_id

    def register(self, reflection: Reflection, node: dict[str, Any]) -> None:
        self.by_id[reflection.id] = reflection
        groups = _as_list(node, "groups")
        if groups:
            self.pending_groups.append((reflection, groups))

    def create(self, node: dict[str, Any]) -> Reflection:
        if not isinstance(node, dict) or "name" not in node or "kind" not in node:
            raise ValueError(f"Reflection node needs 'name' and 'kind': {node!r}")

        kind = kind_from_name(node["kind"])
        reflection = Reflection(str(node["name"]), kind, id=self.claim_id(node))
        if node.get("originalName"):
            reflection.original_name = str(node["originalName"])

        for key, value in _as_dict(node, "flags").items():
            attribute = FLAG_KEYS.get(key)
            if attribute is None:
                logger.debug("Ignoring unknown flag %s on %s", key, reflection.name)
                continue
            setattr(reflection.flags, attribute, bool(value))

        if node.get("comment"):
            reflection.comment = self.create_comment(_as_dict(node, "comment"))

        reflection.overwrites = node.get("overwrites")
        reflection.inherited_from = node.get("inheritedFrom")

        self.register(reflection, node)
        self.load_relations(reflection, node)
        return reflection

    def load_relations(self, reflection: Reflection, node: dict[str, Any]) -> None:
        for child in _as_list(node, "typeParameters"):
            reflection.add_type_parameter(self.create(child))
        for child in _as_list(node, "signatures"):
            reflection.add_signature(self.create(child))
        for key in ("indexSignature", "getSignature", "setSignature"):
            if node.get(key):
                reflection.add_signature(self.create(node[key]))
        for child in _as_list(node, "parameters"):
            reflection.add_parameter(self.create(child))
        for child in _as_list(node, "children"):
            reflection.add_child(self.create(child))

    def create_comment(self, node: dict[str, Any]) -> Comment:
        tags = []
        for tag in _as_list(node, "tags"):
            if not isinstance(tag, dict):
                raise ValueError(f"Comment tag must be an object, got {tag!r}")
            tags.append(
                CommentTag(
                    str(tag.get("tag", "")),
                    str(tag.get("paramName", "") or ""),
                    str(tag.get("text", "")),
                )
            )
        return Comment(
            short_text=str(node.get("shortText", "")),
            text=str(node.get("text", "")),
            tags=tags,
        )

    def link_groups(self) -> None:
        """Resolve group member ids once every reflection exists."""
        for owner, groups in self.pending_groups:
            owner.groups = []
            for group in groups:
                if not isinstance(group, dict):
                    raise ValueError(f"Group of {owner.name!r} must be an object, got {group!r}")
                members = []
                for child_id in _as_list(group, "children"):
                    child = self.by_id.get(_as_id(child_id, group.get("title")))
                    if child is None:
                        raise ValueError(
                            f"Group {group.get('title')!r} of {owner.name!r} "
                            f"references unknown id {child_id}"
                        )
                    members.append(child)
                kind = kind_from_name(group["kind"]) if group.get("kind") else ReflectionKind.Global
                owner.groups.append(ReflectionGroup(str(group.get("title", "")), kind, members))
