"""HTML renderer using StringBuilder pattern.

Block nodes wrap their children in a tag pair. TEXT, CODE, MATH, LINK,
IMAGE and EXTENSION nodes are "void": they render straight from their own
span and attributes.

Thread Safety:
The renderer holds configuration only. Multiple threads can share one
HtmlRenderer instance as long as the hooks they pass are thread-safe.
"""

from __future__ import annotations

from concisemark.nodes import EmphasisStyle, Node, NodeKind
from concisemark.renderers.marks import RenderTarget, render_mark
from concisemark.renderers.protocol import MathTypesetter, RenderHook, resolve_override
from concisemark.stringbuilder import StringBuilder
from concisemark.utils.logger import get_logger
from concisemark.utils.text import escape_attr, escape_html, remove_indent

logger = get_logger(__name__)

BROKEN_IMAGE_ALT = "image link is broken"

_BLOCK_TAGS = {
    NodeKind.SECTION: "div",
    NodeKind.PARAGRAPH: "p",
    NodeKind.LIST: "ul",
    NodeKind.LIST_ITEM: "li",
}

_EMPHASIS_TAGS = {
    EmphasisStyle.ITALIC: "em",
    EmphasisStyle.BOLD: "strong",
}


def heading_level(node: Node) -> int:
    """Heading level from the ``level`` attribute, 1 when it is unusable."""
    raw = node.get_attr("level")
    try:
        level = int(raw)
    except ValueError:
        level = 0
    if not 1 <= level <= 6:
        logger.warning("heading level parse failed: %r, set it to level 1", raw)
        return 1
    return level


class HtmlRenderer:
    """Render a tree to HTML.

    Usage:
        >>> from concisemark.parser import Parser
        >>> HtmlRenderer().render(Parser("# Hello *World*\\n").parse())
        '<div><h1>Hello <em>World</em></h1></div>'

    Hooks:
        ``render_hook(node)`` is asked first at every node; a string result
        replaces the node and its whole subtree. ``math_typesetter(tex,
        display)`` turns formulas into markup (e.g. a KaTeX binding); without
        one, math is emitted as escaped TeX for client-side typesetting.

    """

    __slots__ = ("_render_hook", "_math_typesetter")

    def __init__(
        self,
        render_hook: RenderHook | None = None,
        *,
        math_typesetter: MathTypesetter | None = None,
    ) -> None:
        self._render_hook = render_hook
        self._math_typesetter = math_typesetter

    def render(self, node: Node) -> str:
        """Render ``node`` and its subtree to an HTML string.

        Raises:
            RenderError: If the render hook returns a non-string value.
        """
        sb = StringBuilder()
        self._render_node(node, sb)
        return sb.build()

    def _render_node(self, node: Node, sb: StringBuilder) -> None:
        override = resolve_override(self._render_hook, node)
        if override is not None:
            sb.append(override)
            return

        match node.kind:
            case NodeKind.TEXT:
                sb.append(escape_html(node.text))
            case NodeKind.CODE:
                self._render_code(node, sb)
            case NodeKind.MATH:
                self._render_math(node, sb)
            case NodeKind.LINK:
                href = node.get_attr("href")
                name = node.get_attr("name") or href
                sb.append(f'<a href="{escape_attr(href)}">{escape_html(name)}</a>')
            case NodeKind.IMAGE:
                alt = node.get_attr("name", BROKEN_IMAGE_ALT)
                src = node.get_attr("src")
                sb.append(f'<img alt="{escape_attr(alt)}" src="{escape_attr(src)}"/>')
            case NodeKind.EXTENSION:
                self._render_extension(node, sb)
            case NodeKind.BLANK_LINE:
                pass
            case NodeKind.HEADING:
                self._render_wrapped(node, f"h{heading_level(node)}", sb)
            case NodeKind.EMPHASIS:
                self._render_wrapped(node, _EMPHASIS_TAGS.get(node.emphasis, "em"), sb)
            case _:
                self._render_wrapped(node, _BLOCK_TAGS.get(node.kind), sb)

    def _render_wrapped(self, node: Node, tag: str | None, sb: StringBuilder) -> None:
        """Render children, inside ``<tag>`` when there is one."""
        if tag:
            sb.append(f"<{tag}>")
        for child in node.children:
            self._render_node(child, sb)
        if tag:
            sb.append(f"</{tag}>")

    def _render_code(self, node: Node, sb: StringBuilder) -> None:
        if node.is_inlined():
            code = node.text.strip("`").strip()
            sb.append(f"<code>{escape_html(code)}</code>")
        else:
            sb.append(f"<pre><code>{escape_html(remove_indent(node.text))}</code></pre>")

    def _render_math(self, node: Node, sb: StringBuilder) -> None:
        tex = node.text.strip("$").strip()
        display = node.is_inlined()
        if self._math_typesetter is not None:
            try:
                sb.append(self._math_typesetter(tex, display))
                return
            except Exception:
                logger.warning("failed to render math equation: %s", node.text, exc_info=True)
                sb.append(escape_html(node.text))
                return
        tag = "div" if display else "span"
        sb.append(f'<{tag} class="math">{escape_html(tex)}</{tag}>')

    def _render_extension(self, node: Node, sb: StringBuilder) -> None:
        value = render_mark(node, RenderTarget.HTML)
        if value is None:
            logger.warning("unsupported mark element: %s", node.text)
            sb.append(f"<pre><code>{escape_html(node.text)}</code></pre>")
        else:
            sb.append(value)
