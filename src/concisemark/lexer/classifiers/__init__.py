"""Block-level classifiers for the ConciseMark lexer.

Each classifier is a mixin that decides whether the lines at the cursor form
a particular block and, if so, how many of them it consumes. Classifiers
never move the cursor themselves.
"""

from concisemark.lexer.classifiers.codeblock import (
    CodeblockClassifierMixin,
)
from concisemark.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from concisemark.lexer.classifiers.list import (
    ListClassifierMixin,
)
from concisemark.lexer.classifiers.paragraph import (
    ParagraphClassifierMixin,
)

__all__ = [
    "CodeblockClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "ParagraphClassifierMixin",
]
