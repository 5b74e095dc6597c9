"""Inline construct matchers.

Pure functions that take a text window and an offset, and either report a
match (with its consumed length and extracted fields) or return None. A
None result is never an error: the caller keeps the characters as text.

Used by both the lexer (paragraph extent) and the inline parser.
"""

from concisemark.matchers.links import Link, match_link
from concisemark.matchers.mark import MARK_START, Mark, match_mark
from concisemark.matchers.pair import Pair, match_pair

__all__ = [
    "MARK_START",
    "Link",
    "Mark",
    "Pair",
    "match_link",
    "match_mark",
    "match_pair",
]
