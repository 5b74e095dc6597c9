"""Link and image matcher.

Markdown: ``[name](uri)`` and ``![name](uri)``.

The name ends at the first ``](`` after the opening bracket, and the link
ends at the first ``)`` after that. A name may therefore contain brackets
and parentheses, but a uri may not contain ``)``.

Examples:
    >>> match_link("[Google Home (google)](https://google.com)")
    Link(name='Google Home (google)', uri='https://google.com', is_image=False, size=42)
    >>> match_link("[see [1]](https://x.org)").name
    'see [1]'
    >>> match_link("[google] (https://google.com)") is None
    True

"""

from __future__ import annotations

from typing import NamedTuple


class Link(NamedTuple):
    """A matched link or image.

    Attributes:
        name: Text between the brackets
        uri: Text between the parentheses
        is_image: True for the ``![...](...)`` form
        size: Characters consumed, including ``!`` for images

    """

    name: str
    uri: str
    is_image: bool
    size: int


def match_link(text: str, pos: int = 0) -> Link | None:
    """Match a link or image starting exactly at ``pos``."""
    if text.startswith("![", pos):
        is_image = True
        bracket = pos + 1
    elif text.startswith("[", pos):
        is_image = False
        bracket = pos
    else:
        return None

    name_end = text.find("](", bracket + 1)
    if name_end == -1:
        return None

    uri_end = text.find(")", name_end + 2)
    if uri_end == -1:
        return None

    return Link(
        name=text[bracket + 1 : name_end],
        uri=text[name_end + 2 : uri_end],
        is_image=is_image,
        size=uri_end + 1 - pos,
    )
