"""Outline data model.

An outline is a list of ``Def`` trees. Each enumeration's value is its
output label, so ``Kind`` and ``Modifier`` are the single label tables used by
every renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hhoutline.syntax.pos import Pos


class Kind(str, Enum):
    """Declaration kind of an outline entry."""

    FUNCTION = "function"
    CLASS = "class"
    METHOD = "method"
    PROPERTY = "property"
    CONST = "const"
    ENUM = "enum"
    INTERFACE = "interface"
    TRAIT = "trait"
    TYPECONST = "typeconst"

    @property
    def is_container(self) -> bool:
        return self in CONTAINER_KINDS


class Modifier(str, Enum):
    """Canonical declaration modifier."""

    FINAL = "final"
    STATIC = "static"
    ABSTRACT = "abstract"
    PRIVATE = "private"
    PUBLIC = "public"
    PROTECTED = "protected"
    ASYNC = "async"


CONTAINER_KINDS = frozenset({Kind.CLASS, Kind.INTERFACE, Kind.TRAIT, Kind.ENUM})


@dataclass(frozen=True, slots=True)
class Def:
    """One outline entry.

    ``pos`` anchors the entry (usually the identifier) and always lies within
    ``span``, which covers the whole declaration. Only container kinds have
    children.
    """

    kind: Kind
    name: str
    pos: Pos
    span: Pos
    modifiers: tuple[Modifier, ...] = ()
    children: tuple[Def, ...] = ()


Outline = list[Def]
