"""List classifier mixin.

A list block is the maximal run of lines that are one of:

- a head line: ``indent`` spaces, then ``"- "``, then text
- a head continuation: exactly ``indent + 2`` spaces, then non-space text,
  allowed only right after a head line or another continuation
- a blank line
- a body line: indented at least ``indent + 4`` spaces

Splitting the block into items is the parser's job (see
``concisemark.parsing.blocks.list``); the same line rules apply there.
"""

from itertools import islice

from concisemark.tokens import Token, TokenType
from concisemark.utils.text import is_blank

LIST_MARK = "- "
# Indentation of a list item body relative to its list
BODY_INDENT = 4
# Indentation of a wrapped head line relative to its list
HEAD_CONTINUATION_INDENT = 2


def is_list_head(line: str, indent: int) -> bool:
    """Whether ``line`` opens a list item at ``indent``."""
    return line.startswith(" " * indent + LIST_MARK)


def is_head_continuation(line: str, indent: int) -> bool:
    """Whether ``line`` wraps a list head at ``indent``.

    Valid:

        - list head
          head line continued

    Not valid (the continuation does not align with the head text):

        - list head
           misaligned continuation
    """
    width = indent + HEAD_CONTINUATION_INDENT
    return (
        line.startswith(" " * width)
        and len(line) > width
        and not line[width].isspace()
    )


def is_list_body(line: str, indent: int) -> bool:
    """Whether ``line`` belongs to an item body (blank lines included)."""
    return is_blank(line) or line.startswith(" " * (indent + BODY_INDENT))


class ListClassifierMixin:
    """Mixin providing list block classification."""

    _lines: list[str]
    _indent: int

    def _line_offset(self, lineno: int) -> int:
        """Offset of a line in the lexed slice. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_list(self, lineno: int) -> Token | None:
        """Try to classify a list block starting at ``lineno``."""
        indent = self._indent
        first = self._lines[lineno]
        if not is_list_head(first, indent):
            return None

        block = [first]
        in_head = True
        for line in islice(self._lines, lineno + 1, None):
            if is_list_head(line, indent):
                in_head = True
            elif in_head and is_head_continuation(line, indent):
                pass
            elif is_list_body(line, indent):
                in_head = False
            else:
                break
            block.append(line)
        return Token(TokenType.LIST, "".join(block), self._line_offset(lineno))
