"""Tests for the exception hierarchy."""

import pytest

from concisemark.errors import (
    ConciseMarkError,
    MetaError,
    ParseError,
    RenderError,
    TransformError,
)
from concisemark.parser import Parser


class TestHierarchy:
    """All errors share one base class."""

    @pytest.mark.parametrize("cls", [MetaError, ParseError, RenderError, TransformError])
    def test_subclasses_base(self, cls: type) -> None:
        assert issubclass(cls, ConciseMarkError)


class TestParseError:
    """Location formatting."""

    def test_message_only(self) -> None:
        error = ParseError("dropped")
        assert str(error) == "dropped"
        assert error.lineno is None

    def test_line_and_column(self) -> None:
        assert str(ParseError("dropped", lineno=3, col_offset=5)) == "3:5 dropped"

    def test_line_only(self) -> None:
        assert str(ParseError("dropped", lineno=3)) == "3 dropped"

    def test_source_file(self) -> None:
        error = ParseError("dropped", lineno=1, col_offset=1, source_file="a.md")
        assert str(error) == "a.md:1:1 dropped"
        assert error.message == "dropped"


class TestTransformError:
    """Errors collected by transform()."""

    def test_wraps_node_and_cause(self) -> None:
        node = Parser("# T\n").parse().children[0]
        cause = KeyError("src")
        error = TransformError(node, cause)
        assert error.node == node
        assert error.cause is cause
        assert str(error) == "transform hook failed on HEADING [0, 4): KeyError('src')"
