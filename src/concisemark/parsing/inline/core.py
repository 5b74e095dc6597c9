"""Core inline (statement) parsing for the ConciseMark parser.

Scans a span of the buffer left to right and attaches a flat, ordered
sequence of inline nodes to a parent. The children's spans tile the scanned
span exactly: every character ends up either in a matched construct or in a
TEXT run.

Thread Safety:
All methods use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from concisemark.location import Span
from concisemark.nodes import Node, NodeKind, NodeTree

# Characters that may start an inline construct
INLINE_SPECIAL = frozenset("@`$*![")

# Boundaries of fenced pairs; an unmatched fence is skipped as a whole run
PAIR_CHARS = frozenset("`$*")


def _skip_run(text: str, pos: int, char: str) -> int:
    """Return the offset just past the run of ``char`` starting at ``pos``."""
    text_len = len(text)
    while pos < text_len and text[pos] == char:
        pos += 1
    return pos


class InlineParsingCoreMixin:
    """Core inline parsing methods.

    Required Host Attributes:
        - _content: str
        - _tree: NodeTree

    Required Host Methods (from other mixins):
        - _try_parse_mark(text, pos, base) -> tuple[Node, int] | None
        - _try_parse_code_span(text, pos, base) -> tuple[Node, int] | None
        - _try_parse_math(text, pos, base) -> tuple[Node, int] | None
        - _try_parse_emphasis(text, pos, base) -> tuple[Node, int] | None
        - _try_parse_link(text, pos, base) -> tuple[Node, int] | None

    """

    _content: str
    _tree: NodeTree

    def _parse_inline(self, parent: Node, start: int, end: int) -> None:
        """Parse ``content[start:end]`` and attach the inline nodes to ``parent``.

        Pending literal characters accumulate until a construct matches at the
        cursor; the pending run is then emitted as TEXT before the construct.
        """
        if start >= end:
            return

        text = self._content[start:end]
        text_len = len(text)
        pos = 0
        text_start = 0

        while pos < text_len:
            char = text[pos]
            if char not in INLINE_SPECIAL:
                pos += 1
                continue

            result = self._try_parse_construct(char, text, pos, start)
            if result is None:
                pos = _skip_run(text, pos, char) if char in PAIR_CHARS else pos + 1
                continue

            node, new_pos = result
            if pos > text_start:
                parent.add(self._new_text(start + text_start, start + pos))
            parent.add(node)
            pos = text_start = new_pos

        if text_start < text_len:
            parent.add(self._new_text(start + text_start, end))

    def _try_parse_construct(
        self, char: str, text: str, pos: int, base: int
    ) -> tuple[Node, int] | None:
        """Try each construct that can start with ``char``, in priority order."""
        match char:
            case "@":
                return self._try_parse_mark(text, pos, base)
            case "`":
                return self._try_parse_code_span(text, pos, base)
            case "$":
                return self._try_parse_math(text, pos, base)
            case "*":
                return self._try_parse_emphasis(text, pos, base)
            case "!" | "[":
                return self._try_parse_link(text, pos, base)
            case _:
                return None

    def _new_text(self, start: int, end: int) -> Node:
        return self._tree.new_node(NodeKind.TEXT, Span(start, end))

