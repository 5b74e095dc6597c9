"""ConciseMark renderers.

Renderers convert a parsed tree into output formats.

Available Renderers:
- HtmlRenderer: Renders the tree to HTML
- LatexRenderer: Renders the tree to a LaTeX document body

Thread Safety:
Renderers keep no per-render state on the instance.
Safe for concurrent use from multiple threads.

"""

from concisemark.renderers.html import HtmlRenderer
from concisemark.renderers.latex import Cmd, LatexRenderer
from concisemark.renderers.marks import RenderTarget, render_mark
from concisemark.renderers.protocol import ASTRenderer, MathTypesetter, RenderHook

__all__ = [
    "ASTRenderer",
    "Cmd",
    "HtmlRenderer",
    "LatexRenderer",
    "MathTypesetter",
    "RenderHook",
    "RenderTarget",
    "render_mark",
]
