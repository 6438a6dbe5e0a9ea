"""Declaration outlines of Hack files."""

from hhoutline.outline.builder import outline_program
from hhoutline.outline.legacy import LegacyEntry, to_legacy
from hhoutline.outline.models import CONTAINER_KINDS, Def, Kind, Modifier, Outline
from hhoutline.outline.ops import (
    outline,
    outline_json,
    outline_legacy,
    outline_legacy_json,
    print_outline_source,
)
from hhoutline.outline.serializers import to_json, to_json_legacy

__all__ = [
    "CONTAINER_KINDS",
    "Def",
    "Kind",
    "LegacyEntry",
    "Modifier",
    "Outline",
    "outline",
    "outline_json",
    "outline_legacy",
    "outline_legacy_json",
    "outline_program",
    "print_outline_source",
    "to_json",
    "to_json_legacy",
    "to_legacy",
]
