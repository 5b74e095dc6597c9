"""AST tree model for ConciseMark.

The tree is an arena: a ``NodeTree`` owns one flat list of ``NodeRecord``s and
every parent/child relation is an integer index into that list. ``Node`` is a
light handle ``(tree, id)`` over one record.

- Ownership is strictly tree-shaped and there are no reference cycles: a
  record's parent link is an index, not an object reference.
- Records are created once during parsing and never duplicated.
- The attribute map is the only field a later transform may mutate.

Node Kinds:
NodeKind.SECTION (root, or the body of a list item via LIST_BODY)
├── HEADING        inline children, attr ``level``
├── PARAGRAPH      inline children
├── CODE           code block (no ``inlined`` attr)
├── LIST
│   └── LIST_ITEM
│       ├── LIST_HEAD  inline children
│       └── LIST_BODY  block children
└── BLANK_LINE

Inline kinds: TEXT, EMPHASIS (italic|bold, inline children), CODE
(attr ``inlined``), MATH, LINK (``href``, ``name``), IMAGE (``src``,
``name``), EXTENSION (``name``, ``attrs``, ``value``).

Thread Safety:
A tree is built and walked by one thread at a time. Transform hooks may
mutate attribute maps while a walk reads other nodes of the same tree;
concurrent traversals of one tree need external locking.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

from concisemark.location import Span


class NodeKind(Enum):
    """The closed set of node kinds."""

    SECTION = auto()
    HEADING = auto()
    PARAGRAPH = auto()
    TEXT = auto()
    EMPHASIS = auto()
    CODE = auto()
    MATH = auto()
    LINK = auto()
    IMAGE = auto()
    LIST = auto()
    LIST_ITEM = auto()
    LIST_HEAD = auto()
    LIST_BODY = auto()
    EXTENSION = auto()
    BLANK_LINE = auto()


class EmphasisStyle(Enum):
    """Emphasis strength, from the fence width (``*`` or ``**``)."""

    ITALIC = auto()
    BOLD = auto()


@dataclass(slots=True)
class NodeRecord:
    """Storage for one node inside a ``NodeTree``.

    Attributes:
        kind: Node kind
        span: Range of the node in the tree's buffer
        emphasis: Style for EMPHASIS nodes, None otherwise
        attrs: Mutable attribute map (string to string)
        parent: Index of the parent record, None for the root
        index: Position among the parent's children
        children: Indices of child records in document order

    """

    kind: NodeKind
    span: Span
    emphasis: EmphasisStyle | None = None
    attrs: dict[str, str] = field(default_factory=dict)
    parent: int | None = None
    index: int = 0
    children: list[int] = field(default_factory=list)


class NodeTree:
    """Arena owning every node record of one parsed document.

    Usage:
        >>> tree = NodeTree("# Title\\n")
        >>> root = tree.new_node(NodeKind.SECTION, Span(0, 8))
        >>> heading = tree.new_node(NodeKind.HEADING, Span(0, 8), attrs={"level": "1"})
        >>> tree.add(root, heading)
        >>> root.children[0] == heading
        True

    """

    __slots__ = ("_content", "_records", "__weakref__")

    def __init__(self, content: str) -> None:
        self._content = content
        self._records: list[NodeRecord] = []

    @property
    def content(self) -> str:
        """The immutable source buffer every span indexes into."""
        return self._content

    def __len__(self) -> int:
        return len(self._records)

    def record(self, node_id: int) -> NodeRecord:
        return self._records[node_id]

    def new_node(
        self,
        kind: NodeKind,
        span: Span,
        *,
        emphasis: EmphasisStyle | None = None,
        attrs: dict[str, str] | None = None,
    ) -> Node:
        """Allocate a detached node."""
        if span.end > len(self._content):
            msg = f"span {span} exceeds buffer of length {len(self._content)}"
            raise ValueError(msg)
        self._records.append(
            NodeRecord(kind=kind, span=span, emphasis=emphasis, attrs=dict(attrs or {}))
        )
        return Node(self, len(self._records) - 1)

    def add(self, parent: Node, child: Node) -> None:
        """Append ``child`` to ``parent``, setting its parent link and sibling index.

        O(1). A node can be attached only once.
        """
        if parent.tree is not self or child.tree is not self:
            msg = "cannot link nodes from different trees"
            raise ValueError(msg)
        child_rec = self._records[child.id]
        if child_rec.parent is not None or child.id == parent.id:
            msg = f"node {child.id} is already attached"
            raise ValueError(msg)
        parent_rec = self._records[parent.id]
        child_rec.parent = parent.id
        child_rec.index = len(parent_rec.children)
        parent_rec.children.append(child.id)


class Node:
    """Handle to one node of a ``NodeTree``.

    Handles are cheap views: two handles are equal when they point at the same
    record of the same tree. Everything except ``attrs`` is read-only.

    """

    __slots__ = ("_tree", "_id")

    def __init__(self, tree: NodeTree, node_id: int) -> None:
        self._tree = tree
        self._id = node_id

    @property
    def tree(self) -> NodeTree:
        return self._tree

    @property
    def id(self) -> int:
        return self._id

    @property
    def _record(self) -> NodeRecord:
        return self._tree.record(self._id)

    @property
    def kind(self) -> NodeKind:
        return self._record.kind

    @property
    def span(self) -> Span:
        return self._record.span

    @property
    def emphasis(self) -> EmphasisStyle | None:
        return self._record.emphasis

    @property
    def attrs(self) -> dict[str, str]:
        """The live attribute map; transform hooks may mutate it."""
        return self._record.attrs

    @property
    def index(self) -> int:
        """Position among the parent's children (0 for the root)."""
        return self._record.index

    @property
    def parent(self) -> Node | None:
        parent_id = self._record.parent
        if parent_id is None:
            return None
        return Node(self._tree, parent_id)

    @property
    def children(self) -> list[Node]:
        return [Node(self._tree, child_id) for child_id in self._record.children]

    @property
    def text(self) -> str:
        """The source text this node spans."""
        return self._record.span.slice(self._tree.content)

    def __len__(self) -> int:
        return len(self._record.span)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._tree is other._tree and self._id == other._id

    def __hash__(self) -> int:
        return hash((id(self._tree), self._id))

    def __repr__(self) -> str:
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Node({self.kind.name}, {self.span}, {text!r})"

    def get_attr(self, name: str, default: str = "") -> str:
        """Return an attribute, or ``default`` when it is absent."""
        return self._record.attrs.get(name, default)

    def set_attr(self, name: str, value: str) -> None:
        self._record.attrs[name] = value

    def add(self, child: Node) -> None:
        """Append ``child`` to this node (see ``NodeTree.add``)."""
        self._tree.add(self, child)

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants in pre-order."""
        stack = [self._id]
        while stack:
            node_id = stack.pop()
            yield Node(self._tree, node_id)
            stack.extend(reversed(self._tree.record(node_id).children))

    def is_inlined(self) -> bool:
        """Context predicate for code and math nodes.

        For MATH: True iff every sibling holds only whitespace, i.e. the
        formula stands alone in its block and is typeset in display mode.
        For every other kind: True iff the ``inlined`` attribute is set,
        which the parser does for backtick code spans.
        """
        record = self._record
        if record.kind is NodeKind.MATH:
            if record.parent is None:
                return True
            content = self._tree.content
            for sibling_id in self._tree.record(record.parent).children:
                if sibling_id == self._id:
                    continue
                if self._tree.record(sibling_id).span.slice(content).strip():
                    return False
            return True
        return "inlined" in record.attrs


__all__ = [
    "EmphasisStyle",
    "Node",
    "NodeKind",
    "NodeRecord",
    "NodeTree",
]
