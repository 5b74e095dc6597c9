"""StringBuilder for renderer output.

Renderers append fragments to a list and join once at the end, instead of
concatenating strings node by node.

Thread Safety:
StringBuilder instances are local to one render() call.

"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Accumulates output fragments.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("Hello").append("</p>").build()
        '<p>Hello</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def extend(self, strings: Iterable[str]) -> StringBuilder:
        """Append several fragments in order."""
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join everything appended so far."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Number of fragments, not characters."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
