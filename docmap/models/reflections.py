"""
Symbol tree model.

A reflection is one documentable symbol. Parents own their children;
children only keep a weak back-reference to their parent. Behaviour that
depends on what a symbol is (declaration, signature, container, ...) is
derived from its kind rather than from subclasses.
"""

from __future__ import annotations

import itertools
import re
import weakref
from typing import TYPE_CHECKING

from docmap.models.kinds import (
    NON_DECLARATION_KINDS,
    ReflectionFlags,
    ReflectionKind,
    kind_string,
    mask_of,
)

if TYPE_CHECKING:
    from typing import Any, Iterable, Iterator

    from docmap.models.comments import Comment


_id_counter = itertools.count()


def reset_reflection_ids() -> None:
    """Restart id allocation at zero. Used by the loader and tests."""
    global _id_counter
    _id_counter = itertools.count()


class Reflection:
    """A node in the symbol tree."""

    def __init__(
        self,
        name: str,
        kind: ReflectionKind,
        parent: Reflection | None = None,
        id: int | None = None,
    ) -> None:
        """
        Initialize a reflection.

        Args:
            name: Declared name of the symbol.
            kind: Kind of the symbol.
            parent: Owning reflection. The new reflection is not attached to
                the parent's relations; use one of the ``add_*`` methods.
            id: Stable identifier. Allocated from a counter when omitted.
        """
        self.id = next(_id_counter) if id is None else id
        self.name = name
        self.original_name = name
        self.kind = kind
        self.flags = ReflectionFlags()
        self.comment: Comment | None = None

        self._parent_ref: weakref.ref[Reflection] | None = None
        if parent is not None:
            self.parent = parent

        # Owned relations
        self.children: dict[int, Reflection] = {}
        self.signatures: list[Reflection] = []
        self.index_signature: Reflection | None = None
        self.get_signature: Reflection | None = None
        self.set_signature: Reflection | None = None
        self.type_parameters: list[Reflection] = []
        self.parameters: list[Reflection] = []
        self.groups: list[ReflectionGroup] | None = None

        # Inheritance bookkeeping recorded by the upstream builder
        self.overwrites: Any = None
        self.inherited_from: Any = None

        # Output location, assigned by the theme
        self.url = ""
        self.anchor = ""
        self.has_own_document = False
        self.css_classes = ""

        self._alias: str | None = None
        self._aliases: list[str] | None = None

    @property
    def parent(self) -> Reflection | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Reflection | None) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    # ------------------------------------------------------------------
    # Kind predicates
    # ------------------------------------------------------------------

    def kind_of(self, kinds: ReflectionKind | Iterable[ReflectionKind]) -> bool:
        """Test whether this reflection matches any of the given kinds."""
        return (int(self.kind) & mask_of(kinds)) != 0

    @property
    def kind_string(self) -> str:
        return kind_string(self.kind)

    def is_project(self) -> bool:
        return False

    def is_declaration(self) -> bool:
        """Declarations are named members: modules, classes, methods, properties..."""
        return self.kind != ReflectionKind.Global and not self.kind_of(NON_DECLARATION_KINDS)

    def is_container(self) -> bool:
        """Containers may own child declarations."""
        return self.is_project() or self.is_declaration()

    def is_signature(self) -> bool:
        return self.kind_of(ReflectionKind.SomeSignature)

    def is_type_parameter(self) -> bool:
        return self.kind == ReflectionKind.TypeParameter

    # ------------------------------------------------------------------
    # Tree construction
    # ------------------------------------------------------------------

    def _adopt(self, reflection: Reflection) -> Reflection:
        reflection.parent = self
        return reflection

    def add_child(self, child: Reflection) -> Reflection:
        """Append a child declaration (insertion order is preserved)."""
        self.children[child.id] = self._adopt(child)
        return child

    def add_signature(self, signature: Reflection) -> Reflection:
        """Attach a signature, routed to the matching slot by its kind."""
        self._adopt(signature)
        if signature.kind == ReflectionKind.GetSignature:
            self.get_signature = signature
        elif signature.kind == ReflectionKind.SetSignature:
            self.set_signature = signature
        elif signature.kind == ReflectionKind.IndexSignature:
            self.index_signature = signature
        else:
            self.signatures.append(signature)
        return signature

    def add_parameter(self, parameter: Reflection) -> Reflection:
        self.parameters.append(self._adopt(parameter))
        return parameter

    def add_type_parameter(self, type_parameter: Reflection) -> Reflection:
        self.type_parameters.append(self._adopt(type_parameter))
        return type_parameter

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def traverse(self) -> Iterator[Reflection]:
        """
        Yield the directly owned reflections in a fixed order.

        Order: type parameters, signatures, index signature, get signature,
        set signature, parameters, children.
        """
        yield from self.type_parameters
        yield from self.signatures
        for signature in (self.index_signature, self.get_signature, self.set_signature):
            if signature is not None:
                yield signature
        yield from self.parameters
        yield from self.children.values()

    def walk(self) -> Iterator[Reflection]:
        """Yield every owned descendant in pre-order."""
        for reflection in self.traverse():
            yield reflection
            yield from reflection.walk()

    def get_all_signatures(self) -> list[Reflection]:
        """Return call, index and accessor signatures of this reflection."""
        result = list(self.signatures)
        for signature in (self.index_signature, self.get_signature, self.set_signature):
            if signature is not None:
                result.append(signature)
        return result

    def get_children_by_kind(self, kind: ReflectionKind) -> list[Reflection]:
        return [child for child in self.children.values() if child.kind_of(kind)]

    def get_child_by_name(self, name: str | list[str]) -> Reflection | None:
        """
        Resolve a dotted name relative to this reflection.

        Args:
            name: Dotted name ("mod.Class.member") or a list of segments.

        Returns:
            The matching reflection or None.
        """
        names = name.split(".") if isinstance(name, str) else list(name)
        if not names:
            return None
        head, rest = names[0], names[1:]
        for reflection in self.traverse():
            if reflection.name == head:
                if not rest:
                    return reflection
                return reflection.get_child_by_name(rest)
        return None

    def get_full_name(self, separator: str = ".") -> str:
        """Return the dotted name from the project root down to this reflection."""
        parent = self.parent
        if parent is not None and not parent.is_project():
            return parent.get_full_name(separator) + separator + self.name
        return self.name

    def get_alias(self) -> str:
        """
        Return the url-safe name of this reflection.

        The alias is unique among the reflections rendered into the same
        document and is cached once computed.
        """
        if self._alias is None:
            alias = re.sub(r"[^a-z0-9]", "_", self.name, flags=re.IGNORECASE).lower()
            if alias == "":
                alias = f"reflection-{self.id}"

            target: Reflection = self
            while (
                target.parent is not None
                and not target.parent.is_project()
                and not target.has_own_document
            ):
                target = target.parent

            if target._aliases is None:
                target._aliases = []
            suffix = ""
            index = 0
            while alias + suffix in target._aliases:
                index += 1
                suffix = f"-{index}"

            alias += suffix
            target._aliases.append(alias)
            self._alias = alias

        return self._alias

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind_string} {self.name!r} #{self.id}>"


class ProjectReflection(Reflection):
    """Root of the symbol tree."""

    def __init__(self, name: str, id: int | None = None) -> None:
        super().__init__(name, ReflectionKind.Global, id=id)

    def is_project(self) -> bool:
        return True

    def get_reflections_by_kind(self, kind: ReflectionKind) -> list[Reflection]:
        """Return every reflection of the given kind, in pre-order."""
        return [reflection for reflection in self.walk() if reflection.kind_of(kind)]


class ReflectionGroup:
    """
    A titled group of child reflections, e.g. "Classes" or "Methods".

    The aggregate flags are derived from the current children.
    """

    def __init__(
        self,
        title: str,
        kind: ReflectionKind,
        children: list[Reflection] | None = None,
    ) -> None:
        self.title = title
        self.kind = kind
        self.children: list[Reflection] = children if children is not None else []
        self.css_classes = ""

    @property
    def all_children_are_inherited(self) -> bool:
        return all(child.inherited_from for child in self.children)

    @property
    def all_children_are_private(self) -> bool:
        return all(child.flags.is_private for child in self.children)

    @property
    def all_children_are_protected_or_private(self) -> bool:
        return all(
            child.flags.is_private or child.flags.is_protected for child in self.children
        )

    @property
    def all_children_are_external(self) -> bool:
        return all(child.flags.is_external for child in self.children)

    @property
    def some_children_are_exported(self) -> bool:
        return any(child.flags.is_exported for child in self.children)

    def __repr__(self) -> str:
        return f"<ReflectionGroup {self.title!r} ({len(self.children)} children)>"
