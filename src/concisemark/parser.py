"""Recursive descent parser producing a position-indexed AST.

Consumes the block token stream from Lexer and builds the node arena.
Every node records only a span into the buffer; no text is copied.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: Inline content (marks, code, math, emphasis, links)
- `BlockParsingMixin`: Block-level content (headings, code, lists, paragraphs)

Thread Safety:
- Parser instances are single-use; create one per document
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from concisemark.errors import ParseError
from concisemark.location import Span
from concisemark.nodes import Node, NodeKind, NodeTree
from concisemark.parsing import BlockParsingMixin, InlineParsingMixin


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Parser for the ConciseMark dialect.

    Usage:
        >>> root = Parser("# Hello\\n\\nWorld\\n").parse()
        >>> [child.kind.name for child in root.children]
        ['HEADING', 'BLANK_LINE', 'PARAGRAPH']

    Configuration:
        Parser reads configuration from ContextVar instead of instance
        attributes. Use set_parse_config() or parse_config_context() before
        creating a Parser if you need non-default configuration.

    """

    __slots__ = (
        "_content",
        "_content_offset",
        "_source_file",
        "_tree",
        "_diagnostics",
    )

    def __init__(
        self,
        source: str,
        content_offset: int = 0,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Document text; a final newline is appended when missing
            content_offset: Where the body starts (after any front matter)
            source_file: Optional source file path for error messages

        """
        if not source.endswith("\n"):
            source += "\n"
        if not 0 <= content_offset <= len(source):
            msg = f"content offset {content_offset} outside buffer of length {len(source)}"
            raise ValueError(msg)
        self._content = source
        self._content_offset = content_offset
        self._source_file = source_file
        self._tree = NodeTree(source)
        self._diagnostics: list[ParseError] = []

    @property
    def content(self) -> str:
        """The buffer every node span indexes into."""
        return self._content

    @property
    def diagnostics(self) -> list[ParseError]:
        """Input dropped during the last parse, one error per truncation."""
        return self._diagnostics

    def parse(self) -> Node:
        """Parse the source into a tree.

        Returns:
            The root SECTION node, spanning from the content offset to the
            end of the buffer.

        Raises:
            ParseError: Only in strict mode, when input had to be dropped.
        """
        self._tree = NodeTree(self._content)
        self._diagnostics = []
        end = len(self._content)
        root = self._tree.new_node(NodeKind.SECTION, Span(self._content_offset, end))
        self._parse_blocks(root, self._content_offset, end)
        return root
