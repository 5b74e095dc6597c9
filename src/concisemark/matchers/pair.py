"""Fenced inline pair matcher.

A pair is a run of ``k`` boundary characters, some content, and the next run
of exactly ``k`` boundary characters: `` `code` ``, ``$math$``, ``*em*``,
``**strong**``. The fence width is measured from the opening run; a shorter
run inside the content does not close the pair.

Examples:
    >>> match_pair("`a` tail", "`")
    Pair(content='a', boundaries='`')
    >>> match_pair("``a`", "`") is None
    True

"""

from __future__ import annotations

from typing import NamedTuple


class Pair(NamedTuple):
    """A matched fenced span.

    Attributes:
        content: Text strictly between the opening and closing fences.
        boundaries: The fence string (``k`` boundary characters).

    """

    content: str
    boundaries: str

    @property
    def width(self) -> int:
        """Fence width ``k``."""
        return len(self.boundaries)

    @property
    def number_of_char(self) -> int:
        """Characters consumed: both fences plus the content."""
        return 2 * len(self.boundaries) + len(self.content)


def match_pair(text: str, boundary: str, pos: int = 0) -> Pair | None:
    """Match a pair fenced by ``boundary`` starting exactly at ``pos``.

    Args:
        text: Window to scan
        boundary: Single fence character
        pos: Offset in ``text`` where the opening fence must start

    Returns:
        The match, or None when ``text[pos]`` is not ``boundary`` or no closing
        fence of the same width follows.
    """
    text_len = len(text)
    if pos >= text_len or text[pos] != boundary:
        return None

    end = pos
    while end < text_len and text[end] == boundary:
        end += 1
    fence = text[pos:end]

    # The opening run is maximal, so the first hit is past at least one
    # content character.
    close = text.find(fence, end)
    if close == -1:
        return None
    return Pair(content=text[end:close], boundaries=fence)
