"""Parsing subsystem for the ConciseMark parser.

Provides mixin classes for modular parsing functionality:
- `InlineParsingMixin`: Inline content (marks, code, math, emphasis, links)
- `BlockParsingMixin`: Block-level content (headings, code, lists, paragraphs)

Architecture:
The parser uses a mixin-based design for separation of concerns. Each mixin
handles one aspect of the grammar.

Example:
    >>> from concisemark.parsing import BlockParsingMixin, InlineParsingMixin
    >>> class Parser(InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from concisemark.parsing.blocks import BlockParsingMixin
from concisemark.parsing.inline import InlineParsingMixin

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
]
