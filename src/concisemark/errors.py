"""Exception classes for ConciseMark.

Malformed Markdown never raises out of ``parse``: unmatched inline syntax
degrades to text and truncated input is reported as a diagnostic. These
exceptions describe the remaining failure modes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from concisemark.nodes import Node


class ConciseMarkError(Exception):
    """Base exception for all ConciseMark errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(ConciseMarkError):
    """Input the block tokenizer could not consume.

    Normally recorded as a diagnostic on the parsed page. Raised only when
    the active ``ParseConfig`` has ``strict=True``.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class MetaError(ConciseMarkError):
    """Front matter block present but not valid TOML or missing fields."""

    pass


class TransformError(ConciseMarkError):
    """A transform hook failed on one node.

    Collected by ``transform()``; the walk continues past the failing node.
    """

    def __init__(self, node: Node, cause: Exception) -> None:
        self.node = node
        self.cause = cause
        super().__init__(f"transform hook failed on {node.kind.name} {node.span}: {cause!r}")


class RenderError(ConciseMarkError):
    """Renderer given input it cannot render, such as a hook result that is not a string."""

    pass
