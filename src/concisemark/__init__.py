"""
ConciseMark: a simplified Markdown dialect parsed into a position-indexed tree.

Every node records a span into the source buffer instead of copying text.
The tree can be rewritten in place by transform hooks and rendered to HTML
or LaTeX, with render hooks overriding any subtree.

Quick Start:
    >>> from concisemark import parse, render
    >>> page = parse("# Title\\n")
    >>> render(page)
    '<div><h1>Title</h1></div>'

    >>> # Or use the Page class directly
    >>> from concisemark import Page
    >>> page = Page("Some *text* with @kbd{cmd+c}\\n")
    >>> html = page.render()

Hooks:
    >>> from concisemark import NodeKind
    >>> page = Page("![logo](/logo.png)\\n")
    >>> def absolutize(node):
    ...     if node.kind is NodeKind.IMAGE:
    ...         node.set_attr("src", "https://example.com" + node.get_attr("src"))
    >>> page.transform(absolutize)
    []

Installation:
    pip install concisemark
"""

from __future__ import annotations

from concisemark.config import (
    DEFAULT_MARK_TAGS,
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from concisemark.errors import (
    ConciseMarkError,
    MetaError,
    ParseError,
    RenderError,
    TransformError,
)
from concisemark.lexer import Lexer
from concisemark.location import Span
from concisemark.meta import Meta, extract_meta
from concisemark.nodes import EmphasisStyle, Node, NodeKind, NodeTree
from concisemark.parser import Parser
from concisemark.renderers import (
    ASTRenderer,
    HtmlRenderer,
    LatexRenderer,
    MathTypesetter,
    RenderHook,
)
from concisemark.serialization import from_dict, from_json, to_dict, to_json
from concisemark.tokens import Token, TokenType
from concisemark.visitor import BaseVisitor, TransformHook, transform, walk

__version__ = "0.4.2"


class Page:
    """A parsed document: front matter, tree and the buffer it indexes.

    Usage:
        >>> page = Page("# Hello\\n\\nWorld\\n")
        >>> page.meta is None
        True
        >>> page.root.children[0].get_attr("level")
        '1'
        >>> page.render()
        '<div><h1>Hello</h1><p>World\\n</p></div>'

    Thread Safety:
        Parsing installs ``config`` in a ContextVar for the duration of the
        parse only. A page may be rendered from several threads; transforms
        must not run concurrently with other access to the same page.

    """

    __slots__ = ("_meta", "_root", "_content", "_diagnostics")

    def __init__(
        self,
        source: str,
        *,
        config: ParseConfig | None = None,
        source_file: str | None = None,
    ) -> None:
        """Parse ``source``.

        Args:
            source: Document text; a final newline is appended when missing
            config: Parse configuration (defaults to the active one)
            source_file: Optional source file path for error messages

        Raises:
            ParseError: Only with ``strict=True``, when input had to be dropped.
        """
        if not source.endswith("\n"):
            source += "\n"

        with parse_config_context(config or get_parse_config()):
            meta, offset = (None, 0)
            if get_parse_config().front_matter:
                meta, offset = extract_meta(source)
            parser = Parser(source, content_offset=offset, source_file=source_file)
            self._root = parser.parse()

        self._meta = meta
        self._content = parser.content
        self._diagnostics = parser.diagnostics

    @property
    def meta(self) -> Meta | None:
        """Front matter, or None when the page has none (or it was invalid)."""
        return self._meta

    @property
    def root(self) -> Node:
        """The root SECTION node."""
        return self._root

    @property
    def content(self) -> str:
        """The buffer every span indexes into, front matter included."""
        return self._content

    @property
    def diagnostics(self) -> list[ParseError]:
        """Input dropped while parsing; empty for well-formed documents."""
        return self._diagnostics

    def render(
        self,
        hook: RenderHook | None = None,
        *,
        math_typesetter: MathTypesetter | None = None,
    ) -> str:
        """Render to HTML.

        If ``hook`` returns a string for a node, that string is used in place
        of the node and its subtree; None keeps the default rendering.
        """
        return HtmlRenderer(hook, math_typesetter=math_typesetter).render(self._root)

    def render_latex(
        self,
        hook: RenderHook | None = None,
        *,
        check_images: bool = True,
    ) -> str:
        """Render to a LaTeX document body."""
        return LatexRenderer(hook, check_images=check_images).render(self._root)

    def transform(self, hook: TransformHook) -> list[TransformError]:
        """Apply ``hook`` to every node, parents first (see ``visitor.transform``)."""
        return transform(self._root, hook)


def parse(
    source: str,
    *,
    config: ParseConfig | None = None,
    source_file: str | None = None,
) -> Page:
    """Parse ConciseMark source into a Page.

    Example:
        >>> page = parse("- a\\n- b\\n")
        >>> [item.kind.name for item in page.root.children[0].children]
        ['LIST_ITEM', 'LIST_ITEM']
    """
    return Page(source, config=config, source_file=source_file)


def render(page: Page, hook: RenderHook | None = None) -> str:
    """Render a Page to HTML.

    Example:
        >>> render(parse("**bold**\\n"))
        '<div><p><strong>bold</strong>\\n</p></div>'
    """
    return page.render(hook)


__all__ = [
    # Config
    "DEFAULT_MARK_TAGS",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "ConciseMarkError",
    "MetaError",
    "ParseError",
    "RenderError",
    "TransformError",
    # Pipeline
    "Lexer",
    "Meta",
    "Page",
    "Parser",
    "Span",
    "Token",
    "TokenType",
    "extract_meta",
    "parse",
    "render",
    # Tree
    "EmphasisStyle",
    "Node",
    "NodeKind",
    "NodeTree",
    # Traversal
    "BaseVisitor",
    "TransformHook",
    "transform",
    "walk",
    # Rendering
    "ASTRenderer",
    "HtmlRenderer",
    "LatexRenderer",
    "MathTypesetter",
    "RenderHook",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "__version__",
]
