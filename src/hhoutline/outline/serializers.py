"""Renderers for outlines and legacy entry lists.

``to_json`` and ``to_json_legacy`` return plain JSON-compatible values;
``print_outline`` writes the human-readable dump to a text stream.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any, TextIO

from hhoutline.outline.legacy import LegacyEntry
from hhoutline.outline.models import Def


def def_to_json(def_: Def) -> dict[str, Any]:
    return {
        "kind": def_.kind.value,
        "name": def_.name,
        "position": def_.pos.to_json(),
        "span": def_.span.to_multiline_json(),
        "modifiers": [modifier.value for modifier in def_.modifiers],
        "children": to_json(def_.children),
    }


def to_json(outline: Iterable[Def]) -> list[dict[str, Any]]:
    """Structured tree for editor document outlines."""
    return [def_to_json(def_) for def_ in outline]


def to_json_legacy(entries: Iterable[LegacyEntry]) -> list[dict[str, Any]]:
    """Flat list in the legacy ``--outline`` shape."""
    result: list[dict[str, Any]] = []
    for entry in entries:
        line, char_start, char_end = entry.pos.info_pos()
        result.append(
            {
                "name": entry.name,
                "type": entry.type,
                "line": line,
                "char_start": char_start,
                "char_end": char_end,
            }
        )
    return result


def print_outline(outline: Iterable[Def], out: TextIO | None = None, indent: str = "") -> None:
    """Write an indented text dump, two spaces deeper per nesting level."""
    out = out if out is not None else sys.stdout
    for def_ in outline:
        out.write(f"{indent}{def_.name}\n")
        out.write(f"{indent}  kind: {def_.kind.value}\n")
        out.write(f"{indent}  position: {def_.pos.string()}\n")
        out.write(f"{indent}  span: {def_.span.multiline_string()}\n")
        out.write(f"{indent}  modifiers: ")
        for modifier in def_.modifiers:
            out.write(f"{modifier.value} ")
        out.write("\n\n")
        print_outline(def_.children, out, indent + "  ")
