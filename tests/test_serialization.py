"""Tests for concisemark.serialization: tree JSON round-trip."""

import json

import pytest

from concisemark import Page
from concisemark.nodes import EmphasisStyle, NodeKind
from concisemark.parser import Parser
from concisemark.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    """Serialized shape."""

    def test_heading(self) -> None:
        root = Parser("# T\n").parse()
        assert to_dict(root) == {
            "kind": "SECTION",
            "span": [0, 4],
            "attrs": {},
            "children": [
                {
                    "kind": "HEADING",
                    "span": [0, 4],
                    "attrs": {"level": "1"},
                    "children": [
                        {"kind": "TEXT", "span": [2, 3], "attrs": {}, "children": []},
                    ],
                },
            ],
        }

    def test_emphasis_key(self) -> None:
        emphasis = Parser("**b**\n").parse().children[0].children[0]
        data = to_dict(emphasis)
        assert data["kind"] == "EMPHASIS"
        assert data["emphasis"] == "BOLD"

    def test_attrs_are_copied(self) -> None:
        heading = Parser("# T\n").parse().children[0]
        data = to_dict(heading)
        data["attrs"]["level"] = "9"
        assert heading.get_attr("level") == "1"


class TestRoundTrip:
    """from_json(to_json(tree)) rebuilds an equal tree over the same buffer."""

    SOURCE = "# Title\n\n- *a* `b`\n    [c](d) @kbd{e}\n\n    code\n$x$\n"

    def test_round_trip(self) -> None:
        page = Page(self.SOURCE)
        data = to_json(page.root)
        restored = from_json(data, page.content)
        assert to_dict(restored) == to_dict(page.root)
        assert restored.tree is not page.root.tree

    def test_restored_tree_keeps_semantics(self) -> None:
        root = Parser("**b** $x$\n").parse()
        restored = from_dict(to_dict(root), root.tree.content)
        bold, _, math, _ = restored.children[0].children
        assert bold.emphasis is EmphasisStyle.BOLD
        assert bold.children[0].text == "b"
        assert math.kind is NodeKind.MATH
        assert math.is_inlined() is False

    def test_json_is_deterministic(self) -> None:
        root = Parser("- a\n- b\n").parse()
        assert to_json(root) == to_json(Parser("- a\n- b\n").parse())
        assert list(json.loads(to_json(root))) == ["attrs", "children", "kind", "span"]

    def test_indent(self) -> None:
        root = Parser("a\n").parse()
        assert "\n" in to_json(root, indent=2)
        assert "\n" not in to_json(root)

    def test_non_ascii_is_kept(self) -> None:
        root = Parser("# Ünïcode\n").parse()
        heading = root.children[0]
        heading.set_attr("id", "ünïcode")
        assert "ünïcode" in to_json(root)


class TestFromDictErrors:
    """Invalid serialized data."""

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="unknown node kind"):
            from_dict({"kind": "TABLE", "span": [0, 1]}, "a\n")

    def test_unknown_emphasis(self) -> None:
        data = {"kind": "EMPHASIS", "span": [0, 1], "emphasis": "UNDERLINE"}
        with pytest.raises(ValueError, match="UNDERLINE"):
            from_dict(data, "a\n")

    def test_span_outside_buffer(self) -> None:
        with pytest.raises(ValueError, match="exceeds buffer"):
            from_dict({"kind": "TEXT", "span": [0, 50]}, "a\n")
