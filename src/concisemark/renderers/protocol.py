"""Renderer protocol and hook types, the stable interface for tree renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
``HtmlRenderer`` and ``LatexRenderer`` are the built-in implementations.

Example:
    from concisemark.renderers.protocol import ASTRenderer

    def render_page(renderer: ASTRenderer, page: Page) -> str:
        return renderer.render(page.root)

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias

from concisemark.errors import RenderError
from concisemark.nodes import Node

# Returns replacement output for a node's whole subtree, or None for the
# default rendering.
RenderHook: TypeAlias = Callable[[Node], str | None]

# Typesets a TeX formula; the flag is True for display mode.
MathTypesetter: TypeAlias = Callable[[str, bool], str]


class ASTRenderer(Protocol):
    """Protocol for tree renderers."""

    def render(self, node: Node) -> str:
        """Render a node and its subtree to a string.

        Args:
            node: Usually the root SECTION of a page.

        Returns:
            Rendered string output.

        """
        ...


def resolve_override(hook: RenderHook | None, node: Node) -> str | None:
    """Ask ``hook`` for a replacement of ``node``'s subtree.

    Raises:
        RenderError: If the hook returns something other than str or None.
    """
    if hook is None:
        return None
    override = hook(node)
    if override is not None and not isinstance(override, str):
        msg = (
            f"render hook returned {type(override).__name__} for "
            f"{node.kind.name} {node.span}; expected str or None"
        )
        raise RenderError(msg)
    return override
