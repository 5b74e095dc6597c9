"""Tests for HtmlRenderer."""

from __future__ import annotations

import pytest

from concisemark import Page
from concisemark.errors import RenderError
from concisemark.nodes import Node, NodeKind
from concisemark.parser import Parser
from concisemark.renderers.html import BROKEN_IMAGE_ALT, HtmlRenderer


def _html(source: str, **kwargs: object) -> str:
    return HtmlRenderer(**kwargs).render(Parser(source).parse())  # type: ignore[arg-type]


def _first(root: Node, kind: NodeKind) -> Node:
    return next(node for node in root.walk() if node.kind is kind)


class TestBlocks:
    """Block-level output."""

    def test_heading(self) -> None:
        assert _html("# Title\n") == "<div><h1>Title</h1></div>"

    @pytest.mark.parametrize("level", [2, 3, 6])
    def test_heading_levels(self, level: int) -> None:
        assert _html("#" * level + " T\n") == f"<div><h{level}>T</h{level}></div>"

    def test_blank_line_renders_nothing(self) -> None:
        assert _html("# Hello\n\nWorld\n") == "<div><h1>Hello</h1><p>World\n</p></div>"

    def test_text_is_escaped(self) -> None:
        assert _html("a & b <c>\n") == "<div><p>a &amp; b &lt;c&gt;\n</p></div>"

    def test_code_block(self) -> None:
        assert _html("    x = 1\n    y < 2\n") == (
            "<div><pre><code>x = 1\ny &lt; 2</code></pre></div>"
        )

    def test_list(self) -> None:
        assert _html("- a\n- b\n") == "<div><ul><li>a</li><li>b</li></ul></div>"

    def test_nested_list(self) -> None:
        assert _html("- a\n    - b\n") == "<div><ul><li>a<ul><li>b</li></ul></li></ul></div>"

    def test_list_body_paragraph(self) -> None:
        assert _html("- a\n    b\n") == "<div><ul><li>a<p>    b\n</p></li></ul></div>"

    def test_invalid_heading_level_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        root = Parser("# T\n").parse()
        root.children[0].set_attr("level", "nine")
        assert HtmlRenderer().render(root) == "<div><h1>T</h1></div>"
        assert "heading level parse failed" in caplog.text

    def test_render_subtree(self) -> None:
        root = Parser("# T\n\nbody\n").parse()
        assert HtmlRenderer().render(root.children[2]) == "<p>body\n</p>"


class TestInline:
    """Inline output."""

    def test_emphasis(self) -> None:
        assert _html("*a* **b**\n") == "<div><p><em>a</em> <strong>b</strong>\n</p></div>"

    def test_code_span(self) -> None:
        assert _html("`a < b`\n") == "<div><p><code>a &lt; b</code>\n</p></div>"

    def test_link(self) -> None:
        assert _html("[a](http://x?a=1&b=2)\n") == (
            '<div><p><a href="http://x?a=1&amp;b=2">a</a>\n</p></div>'
        )

    def test_link_without_name_shows_href(self) -> None:
        assert '<a href="u">u</a>' in _html("[](u)\n")

    def test_image(self) -> None:
        assert _html("![c](d.png)\n") == '<div><p><img alt="c" src="d.png"/>\n</p></div>'

    def test_image_without_name(self) -> None:
        root = Parser("![c](d.png)\n").parse()
        del _first(root, NodeKind.IMAGE).attrs["name"]
        assert f'alt="{BROKEN_IMAGE_ALT}"' in HtmlRenderer().render(root)


class TestMath:
    """Math output, with and without a typesetter."""

    def test_display_math_fallback(self) -> None:
        assert _html("$x^2$\n") == '<div><p><div class="math">x^2</div>\n</p></div>'

    def test_inline_math_fallback(self) -> None:
        assert _html("a $x<y$\n") == '<div><p>a <span class="math">x&lt;y</span>\n</p></div>'

    def test_double_fence(self) -> None:
        assert '<div class="math">x</div>' in _html("$$x$$\n")

    def test_typesetter(self) -> None:
        calls: list[tuple[str, bool]] = []

        def typeset(tex: str, display: bool) -> str:
            calls.append((tex, display))
            return f"[{tex}]"

        assert _html("$a$ and $b$\n", math_typesetter=typeset) == (
            "<div><p>[a] and [b]\n</p></div>"
        )
        assert calls == [("a", False), ("b", False)]

    def test_failing_typesetter_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        def typeset(tex: str, display: bool) -> str:
            raise ValueError("bad tex")

        html = _html("$x$\n", math_typesetter=typeset)
        assert html == "<div><p>$x$\n</p></div>"
        assert "failed to render math equation" in caplog.text

    def test_failing_typesetter_keeps_escaped_source(self) -> None:
        def typeset(tex: str, display: bool) -> str:
            raise ValueError("bad tex")

        html = _html("a $x<y$\n", math_typesetter=typeset)
        assert html == "<div><p>a $x&lt;y$\n</p></div>"


class TestMarks:
    """Extension marks."""

    def test_kbd(self) -> None:
        assert _html("@kbd{cmd+c}\n") == "<div><p><kbd>⌘</kbd>+<kbd>c</kbd>\n</p></div>"

    def test_char_is_escaped(self) -> None:
        assert _html("@char{<}\n") == "<div><p>&lt;\n</p></div>"

    def test_emoji(self) -> None:
        assert _html("@emoji{smile;not_an_emoji_xyz}\n") == (
            "<div><p>😄 not_an_emoji_xyz \n</p></div>"
        )

    def test_other_tags_render_value(self) -> None:
        assert _html("@sym{alpha}\n") == "<div><p>alpha\n</p></div>"

    def test_unsupported_mark(self, caplog: pytest.LogCaptureFixture) -> None:
        root = Parser("@kbd{x}\n").parse()
        del _first(root, NodeKind.EXTENSION).attrs["name"]
        assert HtmlRenderer().render(root) == "<div><p><pre><code>@kbd{x}</code></pre>\n</p></div>"
        assert "unsupported mark element" in caplog.text


class TestRenderHook:
    """Render hooks override whole subtrees."""

    def test_override(self) -> None:
        def hook(node: Node) -> str | None:
            if node.kind is NodeKind.HEADING:
                return "<b>X</b>"
            return None

        assert _html("# a *b*\n\nc\n", render_hook=hook) == "<div><b>X</b><p>c\n</p></div>"

    def test_hook_sees_every_rendered_node(self) -> None:
        seen: list[NodeKind] = []

        def hook(node: Node) -> None:
            seen.append(node.kind)

        _html("- a\n", render_hook=hook)
        assert seen == [
            NodeKind.SECTION,
            NodeKind.LIST,
            NodeKind.LIST_ITEM,
            NodeKind.LIST_HEAD,
            NodeKind.TEXT,
            NodeKind.LIST_BODY,
        ]

    def test_non_string_result(self) -> None:
        with pytest.raises(RenderError, match="expected str or None"):
            _html("a\n", render_hook=lambda node: 1)

    def test_page_render(self) -> None:
        page = Page("![a](b)\n")
        html = page.render(lambda node: "<img/>" if node.kind is NodeKind.IMAGE else None)
        assert html == "<div><p><img/>\n</p></div>"
