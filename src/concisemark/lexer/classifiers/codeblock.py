"""Indented code block classifier mixin."""

from itertools import islice

from concisemark.tokens import Token, TokenType
from concisemark.utils.text import indent_width, is_blank

# Extra indentation, beyond the block indent, that opens a code block
CODE_INDENT = 4


class CodeblockClassifierMixin:
    """Mixin providing indented code block classification."""

    _lines: list[str]
    _indent: int

    def _line_offset(self, lineno: int) -> int:
        """Offset of a line in the lexed slice. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_codeblock(self, lineno: int) -> Token | None:
        """Try to classify a code block starting at ``lineno``.

        The first line must start with ``indent + 4`` spaces. The block then
        takes every following line that is blank or indented at least as
        deep, so blank lines inside (and trailing) the block belong to it.
        """
        min_indent = self._indent + CODE_INDENT
        first = self._lines[lineno]
        if not first.startswith(" " * min_indent):
            return None

        code = [first]
        for line in islice(self._lines, lineno + 1, None):
            if not (is_blank(line) or indent_width(line) >= min_indent):
                break
            code.append(line)
        return Token(TokenType.CODEBLOCK, "".join(code), self._line_offset(lineno))
