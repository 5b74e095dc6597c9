"""Block parsing subsystem for the ConciseMark parser.

Provides mixins for parsing block-level content:
- Headings
- Indented code blocks
- Lists (with nested bodies)
- Paragraphs
- Blank lines

Architecture:
Block parsing is split into logical modules:
- core: Block dispatch, basic blocks and the block job stack
- list: List segmentation into items

"""

from concisemark.parsing.blocks.core import BlockJob, BlockParsingCoreMixin
from concisemark.parsing.blocks.list import (
    ListItemRange,
    ListParsingMixin,
    split_list_items,
)


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
):
    """Combined block parsing mixin.

    Combines all block parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _content: str
        - _tree: NodeTree
        - _diagnostics: list[ParseError]
        - _source_file: str | None

    Required Host Methods:
        - _parse_inline(parent, start, end) -> None

    """


__all__ = [
    "BlockJob",
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ListItemRange",
    "ListParsingMixin",
    "split_list_items",
]
