"""Flattening into the legacy ``--outline`` entry list.

Entries come out in forward pre-order: a declaration, then its members, with
siblings in source order. Properties, constants and type constants are not
part of the legacy format.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from hhoutline.outline.models import Def, Kind, Modifier
from hhoutline.syntax.pos import Pos


@dataclass(frozen=True, slots=True)
class LegacyEntry:
    pos: Pos
    name: str
    type: str


# None marks kinds that the legacy format does not show
_LEGACY_LABELS: dict[Kind, str | None] = {
    Kind.FUNCTION: "function",
    Kind.CLASS: "class",
    Kind.ENUM: "class",
    Kind.INTERFACE: "class",
    Kind.TRAIT: "class",
    Kind.METHOD: "method",
    Kind.PROPERTY: None,
    Kind.CONST: None,
    Kind.TYPECONST: None,
}


def _legacy_label(def_: Def) -> str | None:
    label = _LEGACY_LABELS[def_.kind]
    if def_.kind is Kind.METHOD and Modifier.STATIC in def_.modifiers:
        return "static method"
    return label


def _flatten(prefix: str, defs: Iterable[Def], out: list[LegacyEntry]) -> None:
    for def_ in defs:
        label = _legacy_label(def_)
        if label is None:
            continue
        if def_.kind.is_container:
            out.append(LegacyEntry(def_.pos, def_.name, label))
            _flatten(f"{prefix}{def_.name}::", def_.children, out)
        elif def_.kind is Kind.METHOD:
            out.append(LegacyEntry(def_.pos, prefix + def_.name, label))
        else:
            out.append(LegacyEntry(def_.pos, def_.name, label))


def to_legacy(outline: Iterable[Def]) -> list[LegacyEntry]:
    entries: list[LegacyEntry] = []
    _flatten("", outline, entries)
    return entries
