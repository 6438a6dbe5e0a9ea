"""Absolute source positions.

A ``Pos`` covers a range of one file: 1-based lines, 0-based columns, with
an exclusive end column. The output encodings use the 1-based start column
and the 1-based inclusive end column, which is the same number as the
0-based exclusive end.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, order=True)
class Pos:
    """An absolute source range."""

    filename: str
    line_start: int
    col_start: int
    line_end: int
    col_end: int

    @classmethod
    def from_node(cls, node: Any, filename: str = "") -> Pos:
        """Build a position from a tree-sitter node's start/end points."""
        (start_row, start_col) = node.start_point
        (end_row, end_col) = node.end_point
        return cls(filename, start_row + 1, start_col, end_row + 1, end_col)

    @classmethod
    def btw(cls, first: Pos, last: Pos) -> Pos:
        """Smallest range spanning the start of ``first`` through the end of ``last``."""
        return cls(first.filename, first.line_start, first.col_start, last.line_end, last.col_end)

    @property
    def start(self) -> tuple[int, int]:
        return (self.line_start, self.col_start)

    @property
    def end(self) -> tuple[int, int]:
        return (self.line_end, self.col_end)

    def contains(self, other: Pos) -> bool:
        """True when ``other`` lies within this range."""
        return self.start <= other.start and other.end <= self.end

    def info_pos(self) -> tuple[int, int, int]:
        """(line, char_start, char_end) of the first line."""
        return (self.line_start, self.col_start + 1, self.col_end)

    def info_pos_extended(self) -> tuple[int, int, int, int]:
        """(line_start, line_end, char_start, char_end)."""
        return (self.line_start, self.line_end, self.col_start + 1, self.col_end)

    def to_json(self) -> dict[str, Any]:
        line, char_start, char_end = self.info_pos()
        return {
            "filename": self.filename,
            "line": line,
            "char_start": char_start,
            "char_end": char_end,
        }

    def to_multiline_json(self) -> dict[str, Any]:
        line_start, line_end, char_start, char_end = self.info_pos_extended()
        return {
            "filename": self.filename,
            "line_start": line_start,
            "char_start": char_start,
            "line_end": line_end,
            "char_end": char_end,
        }

    def string(self) -> str:
        line, char_start, char_end = self.info_pos()
        return f'File "{self.filename}", line {line}, characters {char_start}-{char_end}:'

    def multiline_string(self) -> str:
        line_start, line_end, char_start, char_end = self.info_pos_extended()
        return (
            f'File "{self.filename}", line {line_start}, character {char_start} - '
            f"line {line_end}, character {char_end}:"
        )
