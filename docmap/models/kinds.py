"""
Reflection kinds and flags.

Kinds are bit flags so a single mask can describe a family of kinds
(e.g. ``SomeModule`` matches both internal and external modules).
"""

from __future__ import annotations

import re
from enum import IntFlag
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, Iterable


class ReflectionKind(IntFlag):
    """Kind of a documentable symbol."""

    Global = 0
    ExternalModule = 1
    Module = 2
    Enum = 4
    EnumMember = 16
    Variable = 32
    Function = 64
    Class = 128
    Interface = 256
    Constructor = 512
    Property = 1024
    Method = 2048
    CallSignature = 4096
    IndexSignature = 8192
    ConstructorSignature = 16384
    Parameter = 32768
    TypeLiteral = 65536
    TypeParameter = 131072
    Accessor = 262144
    GetSignature = 524288
    SetSignature = 1048576
    ObjectLiteral = 2097152
    TypeAlias = 4194304
    Event = 8388608

    # Composite masks
    ClassOrInterface = 128 | 256
    VariableOrProperty = 32 | 1024
    FunctionOrMethod = 64 | 2048
    SomeSignature = 4096 | 8192 | 16384 | 524288 | 1048576
    SomeModule = 1 | 2


# Kinds that never appear as declarations (signatures, parameters, type parameters)
NON_DECLARATION_KINDS = (
    ReflectionKind.SomeSignature
    | ReflectionKind.Parameter
    | ReflectionKind.TypeParameter
)


def kind_from_name(name: str) -> ReflectionKind:
    """
    Resolve a kind by its name.

    Args:
        name: Kind name as written by the upstream tree builder (e.g. "Class").

    Returns:
        The matching ReflectionKind.

    Raises:
        ValueError: If the name is not a known kind, or names a composite mask
            such as "ClassOrInterface".
    """
    if not isinstance(name, str) or name not in ReflectionKind.__members__:
        raise ValueError(f"Unknown reflection kind: {name!r}")

    kind = ReflectionKind[name]
    value = int(kind)
    if value & (value - 1):
        raise ValueError(f"Reflection kind must be a single kind, not a mask: {name!r}")
    return kind


def kind_name(kind: ReflectionKind) -> str:
    """Return the bare name of a single kind, e.g. ``ExternalModule``."""
    return kind.name or str(int(kind))


def kind_string(kind: ReflectionKind) -> str:
    """Return a human readable kind label, e.g. ``External module``."""
    words = re.sub(r"(\w)([A-Z])", r"\1 \2", kind_name(kind))
    return words[:1] + words[1:].lower()


def mask_of(kinds: ReflectionKind | Iterable[ReflectionKind]) -> int:
    """Collapse a kind or an iterable of kinds into one bit mask."""
    if isinstance(kinds, ReflectionKind):
        return int(kinds)
    mask = 0
    for kind in kinds:
        mask |= int(kind)
    return mask


class ReflectionFlags:
    """Boolean attributes of a symbol."""

    __slots__ = (
        "is_private",
        "is_protected",
        "is_public",
        "is_static",
        "is_external",
        "is_exported",
        "is_optional",
        "is_rest",
    )

    def __init__(self, **flags: bool) -> None:
        for name in self.__slots__:
            setattr(self, name, False)
        for name, value in flags.items():
            if name not in self.__slots__:
                raise TypeError(f"Unknown reflection flag: {name}")
            setattr(self, name, bool(value))

    def to_dict(self) -> dict[str, Any]:
        """Return only the flags that are set."""
        return {name: True for name in self.__slots__ if getattr(self, name)}

    def __repr__(self) -> str:
        active = ", ".join(name for name in self.__slots__ if getattr(self, name))
        return f"ReflectionFlags({active})"
