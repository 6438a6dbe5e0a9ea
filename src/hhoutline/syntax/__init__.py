"""Hack syntax: positions, the declaration model, and the tree-sitter parser."""

from hhoutline.syntax.ast import (
    ClassDecl,
    ClassKind,
    FunDecl,
    FunKind,
    ModifierKeyword,
    OtherDecl,
    Program,
)
from hhoutline.syntax.parser import HackParser, parse_best_effort, strip_ns
from hhoutline.syntax.pos import Pos

__all__ = [
    "ClassDecl",
    "ClassKind",
    "FunDecl",
    "FunKind",
    "HackParser",
    "ModifierKeyword",
    "OtherDecl",
    "Pos",
    "Program",
    "parse_best_effort",
    "strip_ns",
]
