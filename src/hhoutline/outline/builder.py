"""Outline construction for a whole program."""

from __future__ import annotations

from hhoutline.core.logging import get_logger
from hhoutline.outline.models import Outline
from hhoutline.outline.summarize import summarize_class, summarize_fun
from hhoutline.syntax.ast import ClassDecl, FunDecl, Program

log = get_logger(__name__)


def outline_program(program: Program) -> Outline:
    """Top-level functions and class-likes in source order; other statements are skipped."""
    outline: Outline = []
    for decl in program.decls:
        if isinstance(decl, FunDecl):
            outline.append(summarize_fun(decl))
        elif isinstance(decl, ClassDecl):
            outline.append(summarize_class(decl))
    log.debug(
        "outline.built",
        declarations=len(program.decls),
        entries=len(outline),
        parse_errors=program.error_count,
    )
    return outline
