"""Span tracking into the immutable source buffer.

Nodes never copy text. Each node holds a half-open ``[start, end)`` range of
code point offsets into the buffer it was parsed from, and text is recovered by
slicing. Slicing a ``str`` cannot split a character, so every span always
yields valid text.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range ``[start, end)`` into a source buffer.

    Examples:
        >>> span = Span(2, 7)
        >>> span.slice("# Title\\n")
        'Title'
        >>> len(span)
        5
        >>> span.shift(10)
        Span(start=12, end=17)

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            msg = f"invalid span [{self.start}, {self.end})"
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"

    def slice(self, buffer: str) -> str:
        """Return the text this span covers in ``buffer``."""
        return buffer[self.start : self.end]

    def shift(self, offset: int) -> Span:
        """Return the same range moved ``offset`` code points to the right."""
        return Span(self.start + offset, self.end + offset)

    def contains(self, other: Span) -> bool:
        """Whether ``other`` lies entirely inside this span."""
        return self.start <= other.start and other.end <= self.end

    def is_empty(self) -> bool:
        return self.start == self.end

    def line_col(self, buffer: str) -> tuple[int, int]:
        """Compute the 1-indexed (line, column) of the span start.

        Used for diagnostics only; nodes do not store line numbers.
        """
        lineno = buffer.count("\n", 0, self.start) + 1
        line_start = buffer.rfind("\n", 0, self.start) + 1
        return lineno, self.start - line_start + 1
