"""Outline operations over source text.

Each call parses ``content`` afresh; nothing is cached between calls. Syntax
errors never raise: a broken file yields whatever declarations tree-sitter
could recover, possibly none.
"""

from __future__ import annotations

from typing import Any, TextIO

from hhoutline.outline import serializers
from hhoutline.outline.builder import outline_program
from hhoutline.outline.legacy import LegacyEntry, to_legacy
from hhoutline.outline.models import Outline
from hhoutline.syntax.parser import DEFAULT_GRAMMAR, parse_best_effort


def outline(content: str | bytes, filename: str = "", grammar: str = DEFAULT_GRAMMAR) -> Outline:
    return outline_program(parse_best_effort(content, filename=filename, grammar=grammar))


def outline_legacy(
    content: str | bytes, filename: str = "", grammar: str = DEFAULT_GRAMMAR
) -> list[LegacyEntry]:
    return to_legacy(outline(content, filename=filename, grammar=grammar))


def outline_json(
    content: str | bytes, filename: str = "", grammar: str = DEFAULT_GRAMMAR
) -> list[dict[str, Any]]:
    return serializers.to_json(outline(content, filename=filename, grammar=grammar))


def outline_legacy_json(
    content: str | bytes, filename: str = "", grammar: str = DEFAULT_GRAMMAR
) -> list[dict[str, Any]]:
    return serializers.to_json_legacy(outline_legacy(content, filename=filename, grammar=grammar))


def print_outline_source(
    content: str | bytes,
    out: TextIO | None = None,
    filename: str = "",
    grammar: str = DEFAULT_GRAMMAR,
) -> None:
    serializers.print_outline(outline(content, filename=filename, grammar=grammar), out)
