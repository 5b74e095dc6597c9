"""Utility modules for ConciseMark.

Provides:
- text: line splitting and HTML/LaTeX escaping
- logger: get_logger for logging
"""

from concisemark.utils.logger import get_logger
from concisemark.utils.text import (
    escape_attr,
    escape_html,
    escape_latex,
    indent_width,
    is_blank,
    remove_indent,
    split_lines,
)

__all__ = [
    "escape_attr",
    "escape_html",
    "escape_latex",
    "get_logger",
    "indent_width",
    "is_blank",
    "remove_indent",
    "split_lines",
]
