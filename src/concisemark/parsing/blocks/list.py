"""List parsing for the ConciseMark parser.

A LIST token is cut into items, and each item becomes:

LIST_ITEM  (head + body)
├── LIST_HEAD  inline children: the head text after ``"- "``
└── LIST_BODY  block children: the body lines, parsed at ``indent + 4``

Nested lists come from parsing the body again with a deeper indent. The body
is not parsed here: it is queued as a block job, so arbitrarily deep nesting
never grows the Python call stack.

"""

from __future__ import annotations

from typing import NamedTuple

from concisemark.lexer.classifiers.list import (
    BODY_INDENT,
    LIST_MARK,
    is_head_continuation,
    is_list_body,
    is_list_head,
)
from concisemark.location import Span
from concisemark.nodes import Node, NodeKind, NodeTree
from concisemark.parsing.blocks.core import BlockJob
from concisemark.utils.text import split_lines


class ListItemRange(NamedTuple):
    """One item of a list block, before it becomes nodes.

    Attributes:
        indent: Indentation of the item body (list indent + 4)
        head: Head lines (marker line and its continuations)
        body: Blank and deeper-indented lines after the head

    """

    indent: int
    head: Span
    body: Span


def split_list_items(block: str, indent: int) -> tuple[list[ListItemRange], int | None]:
    """Cut a list block into item ranges relative to ``block``.

    Returns:
        (items, stopped_at): ``stopped_at`` is the offset of the first line
        that does not open an item, or None when the whole block was used.

    Example:
        >>> items, _ = split_list_items("- a\\n\\n    b\\n- c\\n", 0)
        >>> [(i.head, i.body) for i in items]
        [(Span(start=0, end=4), Span(start=4, end=11)), (Span(start=11, end=15), Span(start=15, end=15))]

    """
    lines = split_lines(block)
    line_count = len(lines)
    items: list[ListItemRange] = []
    offset = 0
    i = 0

    while i < line_count:
        if not is_list_head(lines[i], indent):
            return items, offset

        head_start = offset
        offset += len(lines[i])
        i += 1
        while i < line_count and is_head_continuation(lines[i], indent):
            offset += len(lines[i])
            i += 1

        body_start = offset
        while i < line_count and is_list_body(lines[i], indent):
            offset += len(lines[i])
            i += 1

        items.append(
            ListItemRange(
                indent=indent + BODY_INDENT,
                head=Span(head_start, body_start),
                body=Span(body_start, offset),
            )
        )

    return items, None


class ListParsingMixin:
    """List parsing.

    Required Host Methods:
        - _parse_inline(parent, start, end) -> None
        - _report_truncation(offset, end, reason) -> None

    """

    _content: str
    _tree: NodeTree

    def _parse_list(self, span: Span, indent: int, jobs: list[BlockJob]) -> Node:
        """Build a LIST node from a LIST token and queue the item bodies."""
        tree = self._tree
        list_node = tree.new_node(NodeKind.LIST, span)

        items, stopped_at = split_list_items(span.slice(self._content), indent)
        for item in items:
            head = item.head.shift(span.start)
            body = item.body.shift(span.start)

            item_node = tree.new_node(NodeKind.LIST_ITEM, Span(head.start, body.end))
            head_node = tree.new_node(NodeKind.LIST_HEAD, head)
            self._parse_inline(head_node, *self._head_text_range(head, indent))
            body_node = tree.new_node(NodeKind.LIST_BODY, body)

            item_node.add(head_node)
            item_node.add(body_node)
            list_node.add(item_node)

            if not body.is_empty():
                jobs.append(BlockJob(body_node, body.start, body.end, item.indent))

        if stopped_at is not None:
            self._report_truncation(
                span.start + stopped_at, span.end, "list item without a marker"
            )
        return list_node

    def _head_text_range(self, head: Span, indent: int) -> tuple[int, int]:
        """Range of the head text: after the marker, trailing whitespace removed."""
        text = head.slice(self._content)
        start = head.start + indent + len(LIST_MARK)
        end = head.start + len(text.rstrip())
        return start, max(start, end)
