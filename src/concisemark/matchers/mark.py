"""Extension mark matcher: ``@tag[attrs]{value}``.

Syntax:
    @kbd{cmd+c}             tag and value
    @img[width=50%]{a.png}  optional attributes in brackets
    @emoji(smile)           ``(`` and ``<`` are accepted openers too
    @char{{ } }}            repeat the opener to allow the closer in the body

The head runs from ``@`` to the first opener and may not contain a newline.
Only tags in the configured allow-list match; anything else stays literal
text.

"""

from __future__ import annotations

from collections.abc import Collection
from typing import NamedTuple

from concisemark.config import get_parse_config

MARK_START = "@"

# Opening delimiter -> closing delimiter
_DELIMITERS = {"{": "}", "(": ")", "<": ">"}


class Mark(NamedTuple):
    """A matched extension mark.

    Attributes:
        name: Tag name (trimmed)
        attrs: Text between the brackets, "" when absent (trimmed)
        value: Body between the fences (trimmed)
        size: Characters consumed from ``@`` through the closing fence

    """

    name: str
    attrs: str
    value: str
    size: int


def _split_head(head: str) -> tuple[str, str] | None:
    """Split ``tag[attrs]`` into (tag, attrs); None for malformed brackets."""
    opens = head.count("[")
    closes = head.count("]")
    if opens == 0 and closes == 0:
        return head, ""
    if opens != 1 or closes != 1:
        return None
    beg = head.index("[")
    end = head.index("]")
    if end < beg:
        return None
    return head[:beg], head[beg + 1 : end]


def match_mark(
    text: str,
    pos: int = 0,
    tags: Collection[str] | None = None,
) -> Mark | None:
    """Match an extension mark starting exactly at ``pos``.

    Args:
        text: Window to scan
        pos: Offset of the ``@``
        tags: Allowed tag names; defaults to ``ParseConfig.mark_tags``

    Returns:
        The match, or None for any syntax error, an unknown tag, or a
        missing closing fence.
    """
    text_len = len(text)
    if pos >= text_len or text[pos] != MARK_START:
        return None

    opener_pos = pos + 1
    while opener_pos < text_len:
        char = text[opener_pos]
        if char in _DELIMITERS:
            break
        if char == "\n":
            return None
        opener_pos += 1
    else:
        return None

    split = _split_head(text[pos + 1 : opener_pos])
    if split is None:
        return None
    tag, attrs = split

    allowed = tags if tags is not None else get_parse_config().mark_tags
    if tag not in allowed:
        return None

    opener = text[opener_pos]
    body_start = opener_pos
    while body_start < text_len and text[body_start] == opener:
        body_start += 1
    width = body_start - opener_pos

    close = text.find(_DELIMITERS[opener] * width, body_start)
    if close == -1:
        return None

    return Mark(
        name=tag.strip(),
        attrs=attrs.strip(),
        value=text[body_start:close].strip(),
        size=close + width - pos,
    )
