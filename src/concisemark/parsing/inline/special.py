"""Special inline parsing for the ConciseMark parser.

Handles extension marks (``@tag[attrs]{value}``), code spans and math.
"""

from __future__ import annotations

from concisemark.location import Span
from concisemark.matchers import match_mark, match_pair
from concisemark.nodes import Node, NodeKind, NodeTree

CODE_BOUNDARY = "`"
MATH_BOUNDARY = "$"


class SpecialInlineMixin:
    """Extension marks, code spans and math.

    Each ``_try_parse_*`` method looks at ``text[pos:]`` and returns the
    detached node plus the offset just past it, or None. ``base`` is the
    buffer offset of ``text[0]``.

    """

    _tree: NodeTree

    def _try_parse_mark(self, text: str, pos: int, base: int) -> tuple[Node, int] | None:
        """Parse ``@tag[attrs]{value}`` into an EXTENSION node."""
        mark = match_mark(text, pos)
        if mark is None:
            return None
        end = pos + mark.size
        node = self._tree.new_node(
            NodeKind.EXTENSION,
            Span(base + pos, base + end),
            attrs={"name": mark.name, "attrs": mark.attrs, "value": mark.value},
        )
        return node, end

    def _try_parse_code_span(
        self, text: str, pos: int, base: int
    ) -> tuple[Node, int] | None:
        """Parse a backtick pair into an inlined CODE node.

        The node spans the fences too; renderers strip them.
        """
        pair = match_pair(text, CODE_BOUNDARY, pos)
        if pair is None:
            return None
        end = pos + pair.number_of_char
        node = self._tree.new_node(
            NodeKind.CODE, Span(base + pos, base + end), attrs={"inlined": ""}
        )
        return node, end

    def _try_parse_math(self, text: str, pos: int, base: int) -> tuple[Node, int] | None:
        """Parse ``$tex$`` (or ``$$tex$$``) into a MATH node.

        Display or inline mode is not decided here: it depends on the node's
        siblings, see ``Node.is_inlined``.
        """
        pair = match_pair(text, MATH_BOUNDARY, pos)
        if pair is None:
            return None
        end = pos + pair.number_of_char
        return self._tree.new_node(NodeKind.MATH, Span(base + pos, base + end)), end
