"""Emphasis parsing for the ConciseMark parser.

``*text*`` is italic and ``**text**`` is bold. The fence width alone decides
the style; there are no flanking rules. Wider fences (``***``) stay literal.
The content between the fences is inline-parsed again, so emphasis may hold
code spans, links and marks.
"""

from __future__ import annotations

from concisemark.location import Span
from concisemark.matchers import match_pair
from concisemark.nodes import EmphasisStyle, Node, NodeKind, NodeTree

EMPHASIS_BOUNDARY = "*"

_STYLES = {1: EmphasisStyle.ITALIC, 2: EmphasisStyle.BOLD}


class EmphasisMixin:
    """Emphasis parsing.

    Required Host Methods:
        - _parse_inline(parent, start, end) -> None

    """

    _tree: NodeTree

    def _try_parse_emphasis(
        self, text: str, pos: int, base: int
    ) -> tuple[Node, int] | None:
        pair = match_pair(text, EMPHASIS_BOUNDARY, pos)
        if pair is None:
            return None
        style = _STYLES.get(pair.width)
        if style is None:
            return None

        end = pos + pair.number_of_char
        node = self._tree.new_node(
            NodeKind.EMPHASIS, Span(base + pos, base + end), emphasis=style
        )
        inner_start = base + pos + pair.width
        self._parse_inline(node, inner_start, inner_start + len(pair.content))
        return node, end
