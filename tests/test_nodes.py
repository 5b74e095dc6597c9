"""Tests for the arena tree model and spans."""

import pytest

from concisemark.location import Span
from concisemark.nodes import NodeKind, NodeTree
from concisemark.parser import Parser


class TestSpan:
    """Half-open ranges into the buffer."""

    def test_slice_and_len(self) -> None:
        span = Span(2, 7)
        assert span.slice("# Title\n") == "Title"
        assert len(span) == 5

    @pytest.mark.parametrize(("start", "end"), [(-1, 2), (5, 4)])
    def test_invalid_span(self, start: int, end: int) -> None:
        with pytest.raises(ValueError, match="invalid span"):
            Span(start, end)

    def test_shift_and_contains(self) -> None:
        assert Span(1, 3).shift(4) == Span(5, 7)
        assert Span(0, 10).contains(Span(2, 5))
        assert not Span(2, 5).contains(Span(0, 10))
        assert Span(3, 3).is_empty()

    def test_line_col(self) -> None:
        buffer = "ab\ncd\nef\n"
        assert Span(0, 0).line_col(buffer) == (1, 1)
        assert Span(4, 5).line_col(buffer) == (2, 2)
        assert Span(6, 6).line_col(buffer) == (3, 1)

    def test_str(self) -> None:
        assert str(Span(1, 4)) == "[1, 4)"


class TestNodeTree:
    """Building trees by hand."""

    def test_add_sets_parent_and_index(self) -> None:
        tree = NodeTree("ab\n")
        root = tree.new_node(NodeKind.SECTION, Span(0, 3))
        first = tree.new_node(NodeKind.TEXT, Span(0, 1))
        second = tree.new_node(NodeKind.TEXT, Span(1, 3))
        root.add(first)
        root.add(second)

        assert root.children == [first, second]
        assert first.parent == root
        assert (first.index, second.index) == (0, 1)
        assert second.text == "b\n"
        assert len(tree) == 3

    def test_span_beyond_buffer(self) -> None:
        tree = NodeTree("ab\n")
        with pytest.raises(ValueError, match="exceeds buffer"):
            tree.new_node(NodeKind.TEXT, Span(0, 10))

    def test_node_attaches_once(self) -> None:
        tree = NodeTree("ab\n")
        root = tree.new_node(NodeKind.SECTION, Span(0, 3))
        other = tree.new_node(NodeKind.PARAGRAPH, Span(0, 3))
        child = tree.new_node(NodeKind.TEXT, Span(0, 1))
        root.add(child)
        with pytest.raises(ValueError, match="already attached"):
            other.add(child)

    def test_node_cannot_adopt_itself(self) -> None:
        tree = NodeTree("ab\n")
        root = tree.new_node(NodeKind.SECTION, Span(0, 3))
        with pytest.raises(ValueError, match="already attached"):
            root.add(root)

    def test_cross_tree_link_rejected(self) -> None:
        left = NodeTree("a\n")
        right = NodeTree("a\n")
        parent = left.new_node(NodeKind.SECTION, Span(0, 2))
        child = right.new_node(NodeKind.TEXT, Span(0, 1))
        with pytest.raises(ValueError, match="different trees"):
            parent.add(child)

    def test_attrs_are_copied_on_creation(self) -> None:
        tree = NodeTree("a\n")
        attrs = {"level": "1"}
        node = tree.new_node(NodeKind.HEADING, Span(0, 2), attrs=attrs)
        attrs["level"] = "9"
        assert node.get_attr("level") == "1"


class TestNodeHandle:
    """Node handle behavior."""

    def test_handles_compare_by_record(self) -> None:
        root = Parser("a\n").parse()
        assert root.children[0] == root.children[0]
        assert root.children[0] is not root.children[0]
        assert len({root.children[0], root.children[0]}) == 1

    def test_handles_from_different_trees_differ(self) -> None:
        assert Parser("a\n").parse() != Parser("a\n").parse()

    def test_attrs(self) -> None:
        heading = Parser("# T\n").parse().children[0]
        assert heading.get_attr("missing") == ""
        assert heading.get_attr("missing", "x") == "x"
        heading.set_attr("id", "t")
        assert heading.attrs["id"] == "t"

    def test_walk_is_preorder(self) -> None:
        root = Parser("# a\n\nb *c*\n").parse()
        kinds = [node.kind for node in root.walk()]
        assert kinds == [
            NodeKind.SECTION,
            NodeKind.HEADING,
            NodeKind.TEXT,
            NodeKind.BLANK_LINE,
            NodeKind.PARAGRAPH,
            NodeKind.TEXT,
            NodeKind.EMPHASIS,
            NodeKind.TEXT,
            NodeKind.TEXT,
        ]

    def test_repr_truncates(self) -> None:
        root = Parser("a" * 30 + "\n").parse()
        assert repr(root) == "Node(SECTION, [0, 31), '" + "a" * 17 + "...')"

    def test_len_is_span_length(self) -> None:
        heading = Parser("# T\n").parse().children[0]
        assert len(heading) == 4


class TestIsInlined:
    """Display/inline context of math and code."""

    def test_lone_math_is_display(self) -> None:
        math = Parser("$x$\n").parse().children[0].children[0]
        assert math.kind is NodeKind.MATH
        assert math.is_inlined() is True

    def test_math_with_text_is_inline(self) -> None:
        math = Parser("a $x$\n").parse().children[0].children[1]
        assert math.kind is NodeKind.MATH
        assert math.is_inlined() is False

    def test_math_beside_another_formula_is_inline(self) -> None:
        paragraph = Parser("$x$ $y$\n").parse().children[0]
        assert [child.is_inlined() for child in paragraph.children if child.kind is NodeKind.MATH] == [
            False,
            False,
        ]

    def test_detached_math_is_display(self) -> None:
        tree = NodeTree("$x$\n")
        assert tree.new_node(NodeKind.MATH, Span(0, 3)).is_inlined() is True

    def test_code_span_and_block(self) -> None:
        span = Parser("`a`\n").parse().children[0].children[0]
        block = Parser("    a\n").parse().children[0]
        assert span.is_inlined() is True
        assert block.is_inlined() is False
