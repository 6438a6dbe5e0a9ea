"""Shared fixtures for outline tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from hhoutline.outline.models import Def, Kind, Modifier
from hhoutline.syntax.pos import Pos

PosFactory = Callable[..., Pos]


@pytest.fixture
def pos() -> PosFactory:
    """Build a single-line position, or a multi-line one with ``line_end``."""

    def make(line: int, col_start: int, col_end: int, line_end: int | None = None) -> Pos:
        return Pos("", line, col_start, line if line_end is None else line_end, col_end)

    return make


@pytest.fixture
def sample_forest(pos: PosFactory) -> list[Def]:
    """A function, then a trait with a static method, then a class with mixed members."""
    return [
        Def(Kind.FUNCTION, "top", pos(2, 9, 12), pos(2, 0, 25, 2)),
        Def(
            Kind.TRAIT,
            "T",
            pos(3, 6, 7),
            pos(3, 0, 1, 7),
            children=(
                Def(
                    Kind.METHOD,
                    "helper",
                    pos(4, 25, 31),
                    pos(4, 2, 3, 6),
                    modifiers=(Modifier.PUBLIC, Modifier.STATIC),
                ),
            ),
        ),
        Def(
            Kind.CLASS,
            "C",
            pos(8, 6, 7),
            pos(8, 0, 1, 14),
            children=(
                Def(Kind.PROPERTY, "x", pos(9, 14, 16), pos(9, 14, 16)),
                Def(Kind.CONST, "K", pos(10, 12, 13), pos(10, 12, 17)),
                Def(Kind.TYPECONST, "TT", pos(11, 13, 15), pos(11, 2, 22)),
                Def(
                    Kind.METHOD,
                    "run",
                    pos(12, 18, 21),
                    pos(12, 2, 3, 13),
                    modifiers=(Modifier.PUBLIC, Modifier.ASYNC),
                ),
            ),
        ),
    ]
