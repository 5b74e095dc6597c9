"""Tests for text utilities and StringBuilder."""

import pytest

from concisemark.stringbuilder import StringBuilder
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


class TestSplitLines:
    """Splitting on newline only."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a\n"]),
            ("a\n\nb", ["a\n", "\n", "b"]),
            ("a\x0cb c\n", ["a\x0cb c\n"]),
        ],
    )
    def test_split(self, text: str, expected: list[str]) -> None:
        assert split_lines(text) == expected


class TestLineHelpers:
    """Blank and indentation checks."""

    def test_is_blank(self) -> None:
        assert is_blank("\n")
        assert is_blank(" \t \n")
        assert not is_blank("  a\n")

    def test_indent_width(self) -> None:
        assert indent_width("    a\n") == 4
        assert indent_width("a\n") == 0
        assert indent_width("") == 0
        assert indent_width("   \n") == 3

    def test_remove_indent(self) -> None:
        assert remove_indent("    a\n      b\n\n") == "a\n  b"


class TestEscaping:
    """HTML and LaTeX escaping."""

    def test_escape_html_keeps_quotes(self) -> None:
        assert escape_html('<a href="x">') == '&lt;a href="x"&gt;'

    def test_escape_attr_quotes(self) -> None:
        assert escape_attr('a"b') == "a&quot;b"

    def test_escape_latex(self) -> None:
        assert escape_latex("a_b & {c} ~ ^ \\") == (
            "a\\_b \\& \\{c\\} \\textasciitilde{} \\textasciicircum{} \\textbackslash{}"
        )

    @pytest.mark.parametrize("escape", [escape_html, escape_attr, escape_latex])
    def test_empty(self, escape) -> None:  # type: ignore[no-untyped-def]
        assert escape("") == ""


class TestStringBuilder:
    """Fragment accumulation."""

    def test_build(self) -> None:
        sb = StringBuilder()
        sb.append("<p>").append("").extend(["a", "", "b"]).append("</p>")
        assert sb.build() == "<p>ab</p>"
        assert len(sb) == 4
        assert sb

    def test_empty(self) -> None:
        sb = StringBuilder()
        assert not sb
        assert sb.build() == ""


class TestLogger:
    """Logger namespacing."""

    def test_names(self) -> None:
        assert get_logger("mymodule").name == "concisemark.mymodule"
        assert get_logger("concisemark.lexer").name == "concisemark.lexer"
        assert get_logger("concisemark").name == "concisemark"
