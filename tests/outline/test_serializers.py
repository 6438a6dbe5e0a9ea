"""Tests for outline renderers (JSON tree, legacy JSON, text dump)."""

from __future__ import annotations

import io
from collections.abc import Callable

from hhoutline.outline.legacy import LegacyEntry, to_legacy
from hhoutline.outline.models import Def, Kind, Modifier
from hhoutline.outline.serializers import print_outline, to_json, to_json_legacy
from hhoutline.syntax.pos import Pos

PosFactory = Callable[..., Pos]


class TestToJson:
    def test_def_keys_and_encodings(self, pos: PosFactory) -> None:
        def_ = Def(
            Kind.METHOD,
            "run",
            Pos("a.php", 3, 18, 3, 21),
            Pos("a.php", 3, 2, 5, 3),
            modifiers=(Modifier.PUBLIC, Modifier.ASYNC),
        )

        [result] = to_json([def_])

        assert result == {
            "kind": "method",
            "name": "run",
            "position": {"filename": "a.php", "line": 3, "char_start": 19, "char_end": 21},
            "span": {
                "filename": "a.php",
                "line_start": 3,
                "char_start": 3,
                "line_end": 5,
                "char_end": 3,
            },
            "modifiers": ["public", "async"],
            "children": [],
        }

    def test_children_nest(self, sample_forest: list[Def]) -> None:
        result = to_json(sample_forest)

        assert [node["name"] for node in result] == ["top", "T", "C"]
        assert [child["kind"] for child in result[2]["children"]] == [
            "property",
            "const",
            "typeconst",
            "method",
        ]
        assert result[1]["children"][0]["modifiers"] == ["public", "static"]

    def test_empty(self) -> None:
        assert to_json([]) == []


class TestToJsonLegacy:
    def test_entry_shape(self) -> None:
        entries = [LegacyEntry(Pos("", 2, 9, 2, 12), "foo", "function")]

        assert to_json_legacy(entries) == [
            {"name": "foo", "type": "function", "line": 2, "char_start": 10, "char_end": 12}
        ]

    def test_positions_match_tree_positions(self, sample_forest: list[Def]) -> None:
        legacy = to_json_legacy(to_legacy(sample_forest))
        tree = to_json(sample_forest)

        method = tree[2]["children"][3]["position"]
        [entry] = [e for e in legacy if e["name"] == "C::run"]
        assert (entry["line"], entry["char_start"], entry["char_end"]) == (
            method["line"],
            method["char_start"],
            method["char_end"],
        )


class TestPrintOutline:
    def test_exact_dump(self, pos: PosFactory) -> None:
        method = Def(
            Kind.METHOD,
            "m",
            pos(2, 25, 26),
            pos(2, 2, 33),
            modifiers=(Modifier.PUBLIC, Modifier.STATIC),
        )
        class_ = Def(Kind.CLASS, "C", pos(1, 6, 7), pos(1, 0, 1, 3), children=(method,))
        out = io.StringIO()

        print_outline([class_], out)

        assert out.getvalue() == (
            "C\n"
            "  kind: class\n"
            '  position: File "", line 1, characters 7-7:\n'
            '  span: File "", line 1, character 1 - line 3, character 1:\n'
            "  modifiers: \n"
            "\n"
            "  m\n"
            "    kind: method\n"
            '    position: File "", line 2, characters 26-26:\n'
            '    span: File "", line 2, character 3 - line 2, character 33:\n'
            "    modifiers: public static \n"
            "\n"
        )

    def test_empty_outline_prints_nothing(self) -> None:
        out = io.StringIO()

        print_outline([], out)

        assert out.getvalue() == ""
