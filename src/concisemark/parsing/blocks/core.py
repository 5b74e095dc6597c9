"""Core block parsing for the ConciseMark parser.

Provides block dispatch and the basic blocks (headings, code blocks,
paragraphs, blank lines).
"""

from __future__ import annotations

from typing import NamedTuple

from concisemark.config import get_parse_config
from concisemark.errors import ParseError
from concisemark.lexer import Lexer
from concisemark.lexer.classifiers.heading import HEADING_MARK
from concisemark.location import Span
from concisemark.nodes import Node, NodeKind, NodeTree
from concisemark.tokens import TokenType
from concisemark.utils.logger import get_logger

logger = get_logger(__name__)

MAX_HEADING_LEVEL = 6


class BlockJob(NamedTuple):
    """A buffer range waiting to be block-parsed into ``parent``.

    Attributes:
        parent: Node the blocks are attached to (root or LIST_BODY)
        start: Buffer offset where the range begins
        end: Buffer offset where the range ends
        indent: Block indentation of the range

    """

    parent: Node
    start: int
    end: int
    indent: int


class BlockParsingCoreMixin:
    """Core block parsing methods.

    Required Host Attributes:
        - _content: str
        - _tree: NodeTree
        - _diagnostics: list[ParseError]
        - _source_file: str | None

    Required Host Methods:
        - _parse_inline(parent, start, end) -> None
        - _parse_list(span, indent, jobs) -> Node

    """

    _content: str
    _tree: NodeTree
    _diagnostics: list[ParseError]
    _source_file: str | None

    def _parse_blocks(self, parent: Node, start: int, end: int, indent: int = 0) -> None:
        """Parse ``content[start:end]`` into block nodes under ``parent``.

        List item bodies found along the way are queued on the same job
        stack instead of being parsed recursively.
        """
        jobs = [BlockJob(parent, start, end, indent)]
        while jobs:
            self._parse_block_range(jobs.pop(), jobs)

    def _parse_block_range(self, job: BlockJob, jobs: list[BlockJob]) -> None:
        parent, start, end, indent = job
        lexer = Lexer(self._content[start:end], indent)

        for token in lexer.tokenize():
            span = Span(start + token.start, start + token.end)
            match token.type:
                case TokenType.BLANK_LINE:
                    node = self._tree.new_node(NodeKind.BLANK_LINE, span)
                case TokenType.HEADING:
                    node = self._parse_heading(span, indent)
                case TokenType.CODEBLOCK:
                    node = self._tree.new_node(NodeKind.CODE, span)
                case TokenType.LIST:
                    node = self._parse_list(span, indent, jobs)
                case TokenType.PARAGRAPH:
                    node = self._tree.new_node(NodeKind.PARAGRAPH, span)
                    self._parse_inline(node, span.start, span.end)
            parent.add(node)

        if lexer.stopped_at is not None:
            self._report_truncation(start + lexer.stopped_at, end, "block tokenizer stopped")

    def _parse_heading(self, span: Span, indent: int) -> Node:
        """Parse one heading line.

        The level is the number of ``#`` characters, clamped to 1..6. The
        inline children cover the title with the hashes, surrounding
        whitespace and newline removed.
        """
        line = span.slice(self._content)
        pos = indent
        line_len = len(line)
        while pos < line_len and line[pos] == HEADING_MARK:
            pos += 1
        level = min(max(pos - indent, 1), MAX_HEADING_LEVEL)

        node = self._tree.new_node(NodeKind.HEADING, span, attrs={"level": str(level)})

        title = line[pos:]
        title_start = pos + len(title) - len(title.lstrip())
        title_end = len(line.rstrip())
        if title_start < title_end:
            self._parse_inline(node, span.start + title_start, span.start + title_end)
        return node

    def _report_truncation(self, offset: int, end: int, reason: str) -> None:
        """Record that ``content[offset:end]`` was dropped from the tree.

        Raises:
            ParseError: When the active config is strict.
        """
        lineno, col = Span(offset, offset).line_col(self._content)
        error = ParseError(
            f"{reason}; {end - offset} characters dropped",
            lineno=lineno,
            col_offset=col,
            source_file=self._source_file,
        )
        if get_parse_config().strict:
            raise error
        logger.warning("%s", error)
        self._diagnostics.append(error)
