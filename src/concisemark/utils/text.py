"""Text processing utilities for ConciseMark.

Line helpers used by the lexer, and escaping helpers used by the renderers.

Example:
    >>> from concisemark.utils.text import split_lines
    >>> split_lines("a\\nb\\n")
    ['a\\n', 'b\\n']
"""

from __future__ import annotations

import html as html_module
import textwrap

_LATEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, keeping the terminators.

    ``str.splitlines`` also breaks on form feeds, vertical tabs and Unicode
    separators, which would desynchronize line lengths from the buffer.
    """
    if not text:
        return []
    lines = text.split("\n")
    result = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result


def is_blank(line: str) -> bool:
    """Whether a line holds nothing but whitespace."""
    return not line.strip()


def indent_width(line: str) -> int:
    """Number of leading whitespace characters (the line terminator excluded)."""
    body = line.rstrip("\n")
    return len(body) - len(body.lstrip())


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for HTML element content.

    Examples:
        >>> escape_html("a < b & c")
        'a &lt; b &amp; c'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False)


def escape_attr(text: str) -> str:
    """Escape text for use inside a double-quoted HTML attribute."""
    if not text:
        return ""
    return html_module.escape(text, quote=True)


def escape_latex(text: str) -> str:
    """Escape LaTeX special characters.

    Examples:
        >>> escape_latex("50% of $5")
        '50\\\\% of \\\\$5'
    """
    if not text:
        return ""
    return "".join(_LATEX_SPECIALS.get(char, char) for char in text)


def remove_indent(text: str) -> str:
    """Remove the common indentation of all lines and strip the result.

    Used for indented code blocks, whose lines carry the block indent.
    """
    return textwrap.dedent(text).strip()
