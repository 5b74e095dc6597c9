"""Paragraph classifier mixin.

Paragraphs are the fallback block. Their extent is decided by scanning
characters rather than lines: inline marks and backtick code spans are
stepped over whole, so a newline inside them never ends the paragraph.
Outside those constructs a newline ends the paragraph unless the next line
is indented exactly like the block.
"""

from itertools import islice

from concisemark.matchers import MARK_START, match_mark, match_pair
from concisemark.tokens import Token, TokenType
from concisemark.utils.text import indent_width, is_blank

CODE_FENCE = "`"


class ParagraphClassifierMixin:
    """Mixin providing paragraph classification."""

    _lines: list[str]
    _indent: int

    def _line_offset(self, lineno: int) -> int:
        """Offset of a line in the lexed slice. Implemented by Lexer."""
        raise NotImplementedError

    def _classify_paragraph(self, lineno: int) -> Token:
        """Classify a paragraph starting at ``lineno``. Always succeeds."""
        run: list[str] = []
        for line in islice(self._lines, lineno, None):
            if is_blank(line):
                break
            run.append(line)
        text = "".join(run)

        pos = 0
        text_len = len(text)
        while pos < text_len:
            char = text[pos]
            if char == MARK_START:
                mark = match_mark(text, pos)
                if mark is not None:
                    pos += mark.size
                    continue
            elif char == CODE_FENCE:
                pair = match_pair(text, CODE_FENCE, pos)
                if pair is not None:
                    pos += pair.number_of_char
                else:
                    # An unclosed fence stays literal as a whole run
                    while pos < text_len and text[pos] == CODE_FENCE:
                        pos += 1
                continue

            pos += 1
            if char == "\n":
                line_end = text.find("\n", pos)
                next_line = text[pos:] if line_end == -1 else text[pos:line_end]
                if indent_width(next_line) != self._indent:
                    break

        return Token(TokenType.PARAGRAPH, text[:pos], self._line_offset(lineno))
