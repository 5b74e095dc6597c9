"""Line-oriented block lexer for the ConciseMark parser.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + cursor)
└── classifiers/         # Block-type classification mixins
    ├── heading.py       # # Heading
    ├── codeblock.py     # Indented code
    ├── list.py          # - list blocks
    └── paragraph.py     # Paragraph fallback

Usage:
    >>> from concisemark.lexer import Lexer
    >>> [t.type.name for t in Lexer("# Hello\\n\\nWorld\\n").tokenize()]
    ['HEADING', 'BLANK_LINE', 'PARAGRAPH']

"""

from concisemark.lexer.core import Lexer

__all__ = ["Lexer"]
