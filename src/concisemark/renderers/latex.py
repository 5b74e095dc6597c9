"""LaTeX renderer.

Emits a document body (no preamble). Expected packages: ``hyperref`` for
links, ``listings`` with a ``verb`` style for code blocks, ``graphicx`` and
``float`` for figures.

Thread Safety:
The renderer holds configuration only; one instance may be shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from concisemark.nodes import EmphasisStyle, Node, NodeKind
from concisemark.renderers.html import BROKEN_IMAGE_ALT, heading_level
from concisemark.renderers.marks import RenderTarget, render_mark
from concisemark.renderers.protocol import RenderHook, resolve_override
from concisemark.stringbuilder import StringBuilder
from concisemark.utils.logger import get_logger
from concisemark.utils.text import escape_latex, remove_indent

logger = get_logger(__name__)

MISSING_IMAGE = "\n\n\\textbf{could not find image}\n\n"

_SECTIONING = {1: "section", 2: "subsection"}

_EMPHASIS_COMMANDS = {
    EmphasisStyle.ITALIC: "textit",
    EmphasisStyle.BOLD: "textbf",
}


@dataclass(slots=True)
class Cmd:
    """A LaTeX command ``\\name[opt]{pos}`` or environment ``\\begin{name}``.

    Arguments are trimmed. Every command ends with a newline. An unnamed
    Cmd renders as its body alone.

    Example:
        >>> str(Cmd("href").with_posarg("https://a.org").with_posarg("a"))
        '\\\\href{https://a.org}{a}\\n'
        >>> str(Cmd("itemize", enclosed=True).append("\\\\item\\n"))
        '\\\\begin{itemize}\\n\\\\item\\n\\\\end{itemize}\\n'

    """

    name: str
    enclosed: bool = False
    optargs: list[str] = field(default_factory=list)
    posargs: list[str] = field(default_factory=list)
    body: StringBuilder = field(default_factory=StringBuilder)

    def with_optarg(self, arg: str) -> Cmd:
        self.optargs.append(arg.strip())
        return self

    def with_posarg(self, arg: str) -> Cmd:
        self.posargs.append(arg.strip())
        return self

    def append(self, content: str) -> Cmd:
        self.body.append(content)
        return self

    def __str__(self) -> str:
        name = self.name.strip()
        if not name:
            return self.body.build()

        sb = StringBuilder()
        sb.append(f"\\begin{{{name}}}" if self.enclosed else f"\\{name}")
        sb.extend(f"[{arg}]" for arg in self.optargs)
        sb.extend(f"{{{arg}}}" for arg in self.posargs)
        sb.append("\n")
        if self.enclosed:
            sb.append(self.body.build())
            sb.append(f"\\end{{{name}}}\n")
        return sb.build()


class LatexRenderer:
    """Render a tree to LaTeX.

    Usage:
        >>> from concisemark.parser import Parser
        >>> LatexRenderer().render(Parser("# Hello\\n").parse())
        '\\\\section{Hello}\\n'

    Args:
        render_hook: Same contract as for ``HtmlRenderer``.
        check_images: Emit a figure only for image files that exist on disk;
            missing ones become a bold notice. Disable when the LaTeX is
            compiled somewhere else.

    """

    __slots__ = ("_render_hook", "_check_images")

    def __init__(
        self,
        render_hook: RenderHook | None = None,
        *,
        check_images: bool = True,
    ) -> None:
        self._render_hook = render_hook
        self._check_images = check_images

    def render(self, node: Node) -> str:
        """Render ``node`` and its subtree to a LaTeX string."""
        return self._render_node(node)

    def _render_children(self, node: Node) -> str:
        return "".join(self._render_node(child) for child in node.children)

    def _render_node(self, node: Node) -> str:
        override = resolve_override(self._render_hook, node)
        if override is not None:
            return override

        match node.kind:
            case NodeKind.TEXT:
                return escape_latex(node.text)
            case NodeKind.BLANK_LINE:
                return ""
            case NodeKind.EMPHASIS:
                command = _EMPHASIS_COMMANDS.get(node.emphasis, "textit")
                return f"\\{command}{{ {self._render_children(node)} }}"
            case NodeKind.MATH:
                tex = node.text.strip("$").strip()
                return f"$${tex}$$" if node.is_inlined() else f"${tex}$"
            case NodeKind.CODE:
                return self._render_code(node)
            case NodeKind.LINK:
                url = node.get_attr("href")
                name = node.get_attr("name") or url
                return str(Cmd("href").with_posarg(url).with_posarg(escape_latex(name)))
            case NodeKind.IMAGE:
                return self._render_image(node)
            case NodeKind.HEADING:
                name = _SECTIONING.get(heading_level(node), "subsubsection")
                return str(Cmd(name).with_posarg(self._render_children(node)))
            case NodeKind.LIST:
                return str(Cmd("itemize", enclosed=True).append(self._render_children(node)))
            case NodeKind.LIST_ITEM:
                return str(Cmd("item")) + self._render_children(node)
            case NodeKind.PARAGRAPH:
                return "\n" + self._render_children(node)
            case NodeKind.EXTENSION:
                value = render_mark(node, RenderTarget.LATEX)
                if value is None:
                    logger.warning("unsupported mark element: %s", node.text)
                    return escape_latex(node.text)
                return value
            case _:
                # SECTION, LIST_HEAD and LIST_BODY add no markup of their own
                return self._render_children(node)

    def _render_code(self, node: Node) -> str:
        if node.is_inlined():
            code = node.text.strip("`").strip()
            return f"\\verb|{code}|"
        listing = Cmd("lstlisting", enclosed=True).with_optarg("style=verb")
        return str(listing.append(remove_indent(node.text) + "\n"))

    def _render_image(self, node: Node) -> str:
        alt = node.get_attr("name", BROKEN_IMAGE_ALT)
        src = node.get_attr("src")
        if self._check_images and not Path(src).is_file():
            logger.warning("image path [%s] does not exist, ignored.", src)
            return MISSING_IMAGE
        figure = Cmd("figure", enclosed=True).with_optarg("H")
        figure.append(f"\\centerline{{\\includegraphics[width=0.7\\textwidth]{{{src}}}}}\n")
        figure.append(f"\\caption{{{escape_latex(alt)}}}\n")
        return str(figure)
