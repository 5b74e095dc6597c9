"""Token and TokenType definitions for the ConciseMark lexer.

The lexer produces a forward-only stream of block tokens. Each token holds
the exact text it consumed, so token lengths tile the lexed slice.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Block token types, one per line-granular construct."""

    BLANK_LINE = auto()  # whitespace-only line
    HEADING = auto()  # # Heading (exactly one line)
    CODEBLOCK = auto()  # indented by indent + 4 spaces
    LIST = auto()  # - item (head, continuation, blank and body lines)
    PARAGRAPH = auto()  # everything else


@dataclass(frozen=True, slots=True)
class Token:
    """A block token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw text consumed, terminators included
        start: Offset of the token within the lexed slice

    """

    type: TokenType
    value: str
    start: int = 0

    def __len__(self) -> int:
        return len(self.value)

    @property
    def end(self) -> int:
        return self.start + len(self.value)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.start})"
