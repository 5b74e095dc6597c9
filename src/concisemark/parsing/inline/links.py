"""Link and image parsing for the ConciseMark parser.

Only the inline form is supported: ``[name](uri)`` and ``![name](uri)``.
There are no reference links, titles or angle-bracket destinations.
"""

from __future__ import annotations

from concisemark.location import Span
from concisemark.matchers import match_link
from concisemark.nodes import Node, NodeKind, NodeTree


class LinkParsingMixin:
    """Link and image parsing."""

    _tree: NodeTree

    def _try_parse_link(self, text: str, pos: int, base: int) -> tuple[Node, int] | None:
        """Parse a link or image at ``pos``.

        Returns (node, new_position) or None if not a link. Links carry
        ``href`` and ``name`` attributes, images ``src`` and ``name``.
        """
        link = match_link(text, pos)
        if link is None:
            return None

        end = pos + link.size
        span = Span(base + pos, base + end)
        if link.is_image:
            node = self._tree.new_node(
                NodeKind.IMAGE, span, attrs={"src": link.uri, "name": link.name}
            )
        else:
            node = self._tree.new_node(
                NodeKind.LINK, span, attrs={"href": link.uri, "name": link.name}
            )
        return node, end
