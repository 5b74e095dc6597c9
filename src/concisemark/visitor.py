"""AST traversal for ConciseMark.

Provides a pre-order walk, the in-place ``transform`` used by transform
hooks, and a base visitor class with match-based dispatch.

Example, collecting all link targets:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_link(self, node: Node) -> None:
            self.hrefs.append(node.get_attr("href"))

    collector = LinkCollector()
    collector.visit(page.root)

Example, absolutizing image sources:

    def absolutize(node: Node) -> None:
        if node.kind is NodeKind.IMAGE:
            node.set_attr("src", "https://example.com/" + node.get_attr("src").lstrip("/"))

    errors = transform(page.root, absolutize)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. A
    transform mutates attribute maps in place, so one tree must not be
    transformed and read from different threads at the same time.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeAlias, TypeVar

from concisemark.errors import TransformError
from concisemark.nodes import Node, NodeKind
from concisemark.utils.logger import get_logger

logger = get_logger(__name__)

TransformHook: TypeAlias = Callable[[Node], object]


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its descendants depth-first, parents before children.

    Iterative, so deeply nested lists never hit the recursion limit.
    """
    return node.walk()


def transform(root: Node, hook: TransformHook) -> list[TransformError]:
    """Apply ``hook`` to every node under ``root`` in pre-order.

    The hook mutates nodes in place (through ``set_attr`` or ``attrs``); its
    return value is ignored. An exception raised by the hook is logged and
    collected, and the walk carries on with the next node, so one failing
    node never stops its siblings or descendants from being visited.

    Returns:
        One ``TransformError`` per node the hook failed on.
    """
    errors: list[TransformError] = []
    for node in walk(root):
        try:
            hook(node)
        except Exception as e:
            error = TransformError(node, e)
            logger.warning("%s", error)
            errors.append(error)
    return errors


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node kinds you care about.
    Unhandled kinds fall through to ``visit_default``. Children are walked
    automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        for child in node.children:
            self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node kinds without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_section(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_list(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_list_head(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_list_body(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_blank_line(self, node: Node) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Node) -> T:
        """Code spans and code blocks; tell them apart with ``is_inlined()``."""
        return self.visit_default(node)

    def visit_math(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Node) -> T:
        return self.visit_default(node)

    def visit_extension(self, node: Node) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node.kind:
            case NodeKind.SECTION:
                return self.visit_section(node)
            case NodeKind.HEADING:
                return self.visit_heading(node)
            case NodeKind.PARAGRAPH:
                return self.visit_paragraph(node)
            case NodeKind.LIST:
                return self.visit_list(node)
            case NodeKind.LIST_ITEM:
                return self.visit_list_item(node)
            case NodeKind.LIST_HEAD:
                return self.visit_list_head(node)
            case NodeKind.LIST_BODY:
                return self.visit_list_body(node)
            case NodeKind.BLANK_LINE:
                return self.visit_blank_line(node)
            case NodeKind.TEXT:
                return self.visit_text(node)
            case NodeKind.EMPHASIS:
                return self.visit_emphasis(node)
            case NodeKind.CODE:
                return self.visit_code(node)
            case NodeKind.MATH:
                return self.visit_math(node)
            case NodeKind.LINK:
                return self.visit_link(node)
            case NodeKind.IMAGE:
                return self.visit_image(node)
            case NodeKind.EXTENSION:
                return self.visit_extension(node)
            case _:
                return self.visit_default(node)


__all__ = [
    "BaseVisitor",
    "TransformHook",
    "transform",
    "walk",
]
