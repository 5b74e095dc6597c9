"""Inline parsing subsystem for the ConciseMark parser.

Provides mixins for parsing inline content:
- Extension marks (@tag[attrs]{value})
- Code spans (`)
- Math ($expression$)
- Emphasis (*italic*, **bold**)
- Links and images

Architecture:
A single left-to-right scan. At each special character the matching
construct parser is tried; on success any pending literal text is emitted
first, then the construct. There is no delimiter stack: fences pair up by
width alone.

"""

from __future__ import annotations

from concisemark.parsing.inline.core import InlineParsingCoreMixin
from concisemark.parsing.inline.emphasis import EmphasisMixin
from concisemark.parsing.inline.links import LinkParsingMixin
from concisemark.parsing.inline.special import SpecialInlineMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    LinkParsingMixin,
    SpecialInlineMixin,
):
    """Combined inline parsing mixin.

    Combines all inline parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _content: str
        - _tree: NodeTree

    """

    pass


__all__ = [
    "EmphasisMixin",
    "InlineParsingCoreMixin",
    "InlineParsingMixin",
    "LinkParsingMixin",
    "SpecialInlineMixin",
]
