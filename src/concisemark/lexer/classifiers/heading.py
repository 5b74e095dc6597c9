"""Heading classifier mixin."""

from concisemark.tokens import Token, TokenType

HEADING_MARK = "#"


class HeadingClassifierMixin:
    """Mixin providing heading classification.

    A heading is one line starting with the block indent followed by ``#``.
    The level is resolved by the parser, not here.
    """

    _lines: list[str]
    _indent_str: str

    def _line_offset(self, lineno: int) -> int:
        """Offset of a line in the lexed slice. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_heading(self, lineno: int) -> Token | None:
        """Try to classify the line at ``lineno`` as a heading.

        Returns:
            Token consuming exactly that line, or None.
        """
        line = self._lines[lineno]
        if not line.startswith(self._indent_str + HEADING_MARK):
            return None
        return Token(TokenType.HEADING, line, self._line_offset(lineno))
