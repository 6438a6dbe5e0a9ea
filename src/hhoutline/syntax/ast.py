"""Declaration-level syntax model for Hack source files.

The parser lowers tree-sitter's concrete syntax tree into these frozen
dataclasses. Only the shapes the outline needs are modelled in detail; every
other top-level statement becomes an ``OtherDecl`` and every other class body
entry becomes an ``OmittedMember``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hhoutline.syntax.pos import Pos


class FunKind(str, Enum):
    """Function flavour derived from ``async`` and ``yield``."""

    SYNC = "sync"
    ASYNC = "async"
    GENERATOR = "generator"
    ASYNC_GENERATOR = "async_generator"


class ClassKind(str, Enum):
    """Source form of a class-like declaration."""

    CLASS = "class"
    ABSTRACT = "abstract"
    INTERFACE = "interface"
    TRAIT = "trait"
    ENUM = "enum"


class ModifierKeyword(str, Enum):
    """Member modifier keywords as written in source."""

    FINAL = "final"
    STATIC = "static"
    ABSTRACT = "abstract"
    PRIVATE = "private"
    PUBLIC = "public"
    PROTECTED = "protected"


# =============================================================================
# Class members
# =============================================================================


@dataclass(frozen=True, slots=True)
class MethodMember:
    name: str
    name_pos: Pos
    span: Pos
    keywords: tuple[ModifierKeyword, ...] = ()
    fun_kind: FunKind = FunKind.SYNC


@dataclass(frozen=True, slots=True)
class ClassVar:
    """One declarator of a property group: ``$x = 1`` in ``public int $x = 1, $y;``."""

    name: str
    name_pos: Pos
    span: Pos


@dataclass(frozen=True, slots=True)
class ClassVarsMember:
    """A property group sharing one modifier set."""

    keywords: tuple[ModifierKeyword, ...]
    vars: tuple[ClassVar, ...]


@dataclass(frozen=True, slots=True)
class XhpAttrMember:
    var: ClassVar


@dataclass(frozen=True, slots=True)
class ConstDeclarator:
    name: str
    name_pos: Pos
    value_pos: Pos


@dataclass(frozen=True, slots=True)
class ConstMember:
    consts: tuple[ConstDeclarator, ...]


@dataclass(frozen=True, slots=True)
class AbsConstMember:
    name: str
    name_pos: Pos


@dataclass(frozen=True, slots=True)
class TypeConstMember:
    name: str
    name_pos: Pos
    span: Pos
    is_abstract: bool = False


@dataclass(frozen=True, slots=True)
class OmittedMember:
    """Trait use, require clauses, XHP category/children, and unknown entries."""

    node_type: str
    span: Pos


ClassMember = (
    MethodMember
    | ClassVarsMember
    | XhpAttrMember
    | ConstMember
    | AbsConstMember
    | TypeConstMember
    | OmittedMember
)


# =============================================================================
# Top-level declarations
# =============================================================================


@dataclass(frozen=True, slots=True)
class FunDecl:
    name: str
    name_pos: Pos
    span: Pos
    fun_kind: FunKind = FunKind.SYNC


@dataclass(frozen=True, slots=True)
class ClassDecl:
    name: str
    name_pos: Pos
    span: Pos
    class_kind: ClassKind = ClassKind.CLASS
    is_final: bool = False
    body: tuple[ClassMember, ...] = ()


@dataclass(frozen=True, slots=True)
class OtherDecl:
    """Statements, type aliases, module constants and anything else."""

    node_type: str
    span: Pos


Decl = FunDecl | ClassDecl | OtherDecl


@dataclass(frozen=True, slots=True)
class Program:
    """A parsed file: top-level declarations in source order."""

    decls: tuple[Decl, ...] = ()
    error_count: int = 0
