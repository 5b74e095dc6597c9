"""Line-oriented block lexer.

Implements a window-based approach: look at the lines under the cursor,
classify them (pure logic), then commit the cursor past the consumed lines.
Every token consumes whole lines, so the cursor is always a line index.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import accumulate

from concisemark.errors import ParseError
from concisemark.lexer.classifiers import (
    CodeblockClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    ParagraphClassifierMixin,
)
from concisemark.location import Span
from concisemark.tokens import Token, TokenType
from concisemark.utils.logger import get_logger
from concisemark.utils.text import is_blank, split_lines

logger = get_logger(__name__)


class Lexer(
    HeadingClassifierMixin,
    CodeblockClassifierMixin,
    ListClassifierMixin,
    ParagraphClassifierMixin,
):
    """Block tokenizer for one slice of the buffer at one indentation.

    Classification, in priority order, of the first line under the cursor:

    1. whitespace only → BLANK_LINE (that one line)
    2. ``indent`` spaces + ``#`` → HEADING (that one line)
    3. ``indent + 4`` spaces → CODEBLOCK
    4. ``indent`` spaces + ``"- "`` → LIST
    5. otherwise → PARAGRAPH

    Usage:
        >>> for token in Lexer("# Hello\\n\\nWorld\\n").tokenize():
        ...     print(token)
        Token(HEADING, '# Hello\\n', 0)
        Token(BLANK_LINE, '\\n', 8)
        Token(PARAGRAPH, 'World\\n', 9)

    The token stream is forward-only. If a classifier ever fails to consume
    anything, lexing stops, the rest of the slice is dropped and a
    ``ParseError`` is appended to ``diagnostics``.

    """

    __slots__ = (
        "_source",
        "_indent",
        "_indent_str",
        "_lines",
        "_offsets",
        "_line",
        "_diagnostics",
        "_stopped_at",
    )

    def __init__(self, source: str, indent: int = 0) -> None:
        """Initialize lexer with source text.

        Args:
            source: Slice of the buffer to tokenize
            indent: Block indentation (0 at top level, 4 per list nesting)
        """
        self._source = source
        self._indent = indent
        self._indent_str = " " * indent
        self._lines = split_lines(source)
        self._offsets = [0, *accumulate(len(line) for line in self._lines)]
        self._line = 0
        self._diagnostics: list[ParseError] = []
        self._stopped_at: int | None = None

    @property
    def diagnostics(self) -> list[ParseError]:
        """Problems met while lexing (empty for well-formed input)."""
        return self._diagnostics

    @property
    def stopped_at(self) -> int | None:
        """Slice offset where lexing gave up, or None if it reached the end."""
        return self._stopped_at

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a block token stream.

        Yields:
            Token objects one at a time; their lengths tile the consumed
            part of the source.
        """
        line_count = len(self._lines)
        while self._line < line_count:
            token = self._classify(self._line)
            consumed = self._count_lines(token)
            if consumed == 0 or self._offsets[self._line + consumed] != token.end:
                self._halt(token.start)
                return
            self._line += consumed
            yield token

    def _classify(self, lineno: int) -> Token:
        """Classify the block starting at ``lineno`` (pure, no cursor move)."""
        line = self._lines[lineno]
        if is_blank(line):
            return Token(TokenType.BLANK_LINE, line, self._line_offset(lineno))
        return (
            self._try_classify_heading(lineno)
            or self._try_classify_codeblock(lineno)
            or self._try_classify_list(lineno)
            or self._classify_paragraph(lineno)
        )

    def _line_offset(self, lineno: int) -> int:
        return self._offsets[lineno]

    def _count_lines(self, token: Token) -> int:
        value = token.value
        count = value.count("\n")
        if value and not value.endswith("\n"):
            count += 1
        if self._line + count >= len(self._offsets):
            return 0
        return count

    def _halt(self, offset: int) -> None:
        """Stop lexing at ``offset`` and record what was dropped."""
        lineno, col = Span(offset, offset).line_col(self._source)
        dropped = len(self._source) - offset
        error = ParseError(
            f"block tokenizer stopped; {dropped} trailing characters dropped",
            lineno=lineno,
            col_offset=col,
        )
        logger.debug("%s", error)
        self._diagnostics.append(error)
        self._stopped_at = offset
        self._line = len(self._lines)
