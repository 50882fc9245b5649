"""
Comment model: a short text, a body text and an ordered list of tags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class CommentTag:
    """A tagged comment fragment such as ``@param name text``."""

    def __init__(self, tag_name: str, param_name: str = "", text: str = "") -> None:
        self.tag_name = tag_name
        self.param_name = param_name
        self.text = text

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"tag": self.tag_name, "text": self.text}
        if self.param_name:
            data["paramName"] = self.param_name
        return data

    def __repr__(self) -> str:
        return f"CommentTag({self.tag_name!r}, {self.param_name!r}, {self.text!r})"


class Comment:
    """
    A parsed documentation comment.

    Tags are kept in declaration order. Tags addressed to nested symbols
    are moved out of this list by the deep comment plugin, so the list is
    mutated in place and tag objects are compared by identity.
    """

    def __init__(
        self,
        short_text: str = "",
        text: str = "",
        tags: list[CommentTag] | None = None,
    ) -> None:
        self.short_text = short_text
        self.text = text
        self.tags: list[CommentTag] = tags if tags is not None else []

    def get_tag(self, tag_name: str, param_name: str | None = None) -> CommentTag | None:
        """
        Return the first tag with the given name.

        Args:
            tag_name: Tag name to look for, e.g. "param".
            param_name: When given, the tag's parameter name must match too.

        Returns:
            The matching tag, or None.
        """
        for tag in self.tags:
            if tag.tag_name != tag_name:
                continue
            if param_name is None or tag.param_name == param_name:
                return tag
        return None

    def remove_tag(self, tag: CommentTag) -> None:
        """Remove a tag object from this comment (by identity)."""
        for index, candidate in enumerate(self.tags):
            if candidate is tag:
                del self.tags[index]
                return
        raise ValueError(f"{tag!r} is not part of this comment")

    def to_dict(self) -> dict[str, Any]:
        return {
            "shortText": self.short_text,
            "text": self.text,
            "tags": [tag.to_dict() for tag in self.tags],
        }

    def __repr__(self) -> str:
        return f"Comment({self.short_text!r}, tags={self.tags!r})"
