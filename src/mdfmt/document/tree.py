# topmark:header:start
#
#   project      : mdfmt
#   file         : tree.py
#   file_relpath : src/mdfmt/document/tree.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Typed document tree consumed by the formatter.

The tree is an arena: nodes live in a list owned by `DocumentTree` and refer to
their parent and children by integer index. A node's payload is a small frozen
dataclass selected by its `NodeKind`.

Literal payloads (text runs, inline code, code blocks, HTML blocks) are stored
as UTF-8 ``bytes``; the formatter decodes them and recovers locally from
invalid sequences.

Traversal:
    `DocumentTree.walk` yields ``(index, entering)`` pairs in document order,
    one Enter event before a node's children and one Exit event after them,
    using an explicit work list rather than recursion.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar, Union, cast


class NodeKind(str, Enum):
    """Kinds of node produced by the parser adapter."""

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    CODE_BLOCK = "code_block"
    LINK = "link"
    HTML_BLOCK = "html_block"
    THEMATIC_BREAK = "thematic_break"
    LIST = "list"
    ITEM = "item"
    TEXT = "text"
    CODE = "code"
    SOFT_BREAK = "soft_break"
    LINE_BREAK = "line_break"

    # Passthrough kinds: kept in the tree, formatted only through their children
    BLOCK_QUOTE = "block_quote"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    IMAGE = "image"
    HTML_INLINE = "html_inline"
    OTHER = "other"


# --- Payloads ---


@dataclass(frozen=True, slots=True)
class Heading:
    """ATX or setext heading; ``level`` is 1..6."""

    level: int


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced or indented code block."""

    info: str
    literal: bytes


@dataclass(frozen=True, slots=True)
class Link:
    """Inline link or autolink."""

    url: str
    title: str = ""


@dataclass(frozen=True, slots=True)
class HtmlBlock:
    """Raw HTML block."""

    literal: bytes


@dataclass(frozen=True, slots=True)
class ListData:
    """Bullet or ordered list.

    Attributes:
        delimiter (str): The source marker: ``"*"``, ``"-"`` or ``"+"`` for
            bullet lists, ``"."`` or ``")"`` for ordered lists.
        tight (bool): Whether items are not separated by blank lines.
        ordered (bool): Whether this is an ordered list.
        start (int | None): Start number of an ordered list.
    """

    delimiter: str
    tight: bool
    ordered: bool = False
    start: int | None = None


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal payload of a text run, inline code span or inline HTML."""

    literal: bytes


@dataclass(frozen=True, slots=True)
class Unknown:
    """Payload of an `NodeKind.OTHER` node: the parser's own type name."""

    name: str


Payload = Union[Heading, CodeBlock, Link, HtmlBlock, ListData, Literal, Unknown]

P = TypeVar("P", Heading, CodeBlock, Link, HtmlBlock, ListData, Literal, Unknown)


@dataclass(slots=True)
class Node:
    """A node of the arena.

    Attributes:
        index (int): Position of the node in its `DocumentTree`.
        kind (NodeKind): The node kind.
        payload (Payload | None): Kind-specific data, or ``None``.
        parent (int | None): Index of the parent node; ``None`` for the root.
        children (list[int]): Child indices in document order.
    """

    index: int
    kind: NodeKind
    payload: Payload | None = None
    parent: int | None = None
    children: list[int] = field(default_factory=lambda: [])

    def data(self, payload_type: type[P]) -> P:
        """Return the payload, checked against the expected payload type.

        Raises:
            TypeError: If the payload is missing or of another type.
        """
        if not isinstance(self.payload, payload_type):
            raise TypeError(
                f"{self.kind.value} node #{self.index} has payload {self.payload!r}, "
                f"expected {payload_type.__name__}"
            )
        return cast("P", self.payload)


class DocumentTree:
    """Arena of `Node` objects rooted at a single `NodeKind.DOCUMENT` node.

    Nodes are appended with `add`; a child is always added after its parent,
    and siblings are kept in insertion order, which is document order.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"DocumentTree(nodes={len(self._nodes)})"

    @property
    def root(self) -> int:
        """Index of the root node.

        Raises:
            ValueError: If the tree is empty.
        """
        if not self._nodes:
            raise ValueError("Empty document tree has no root")
        return 0

    def add(
        self,
        kind: NodeKind,
        payload: Payload | None = None,
        parent: int | None = None,
    ) -> int:
        """Append a node and link it under ``parent``.

        Args:
            kind (NodeKind): Kind of the new node.
            payload (Payload | None): Kind-specific payload.
            parent (int | None): Parent index; must be ``None`` only for the
                first node (the root).

        Returns:
            int: Index of the new node.

        Raises:
            ValueError: If a second root is added or ``parent`` is unknown.
        """
        index = len(self._nodes)
        if parent is None:
            if self._nodes:
                raise ValueError("Document tree already has a root")
        elif not 0 <= parent < index:
            raise ValueError(f"Unknown parent index {parent}")

        self._nodes.append(Node(index=index, kind=kind, payload=payload, parent=parent))
        if parent is not None:
            self._nodes[parent].children.append(index)
        return index

    def node(self, index: int) -> Node:
        """Return the node stored at ``index``."""
        return self._nodes[index]

    def kind(self, index: int) -> NodeKind:
        """Return the kind of the node stored at ``index``."""
        return self._nodes[index].kind

    def children(self, index: int) -> list[int]:
        """Return the child indices of ``index`` in document order."""
        return self._nodes[index].children

    def parent(self, index: int) -> Node | None:
        """Return the parent node of ``index``, or ``None`` for the root."""
        parent = self._nodes[index].parent
        return None if parent is None else self._nodes[parent]

    def walk(self, start: int | None = None) -> Iterator[tuple[int, bool]]:
        """Pre-order walk yielding ``(index, entering)`` events.

        Every node under ``start`` (inclusive) yields exactly one Enter event
        (``entering=True``) before its children and one Exit event after them.

        Args:
            start (int | None): Subtree root; defaults to the tree root.

        Yields:
            tuple[int, bool]: Node index and whether the event is an Enter.
        """
        if start is None:
            start = self.root
        work: list[tuple[int, bool]] = [(start, True)]
        while work:
            index, entering = work.pop()
            yield index, entering
            if entering:
                work.append((index, False))
                # Reversed so the first child is popped first
                work.extend((child, True) for child in reversed(self._nodes[index].children))

    def iter_nodes(self, start: int | None = None) -> Iterator[Node]:
        """Yield every node under ``start`` (inclusive) in pre-order."""
        for index, entering in self.walk(start):
            if entering:
                yield self._nodes[index]

    def subtree(self, index: int) -> Subtree:
        """Return a read-only view of the nodes under ``index`` (inclusive).

        Raises:
            ValueError: If ``index`` is not a node of this tree.
        """
        if not 0 <= index < len(self._nodes):
            raise ValueError(f"Unknown node index {index}")
        return Subtree(tree=self, root=index)


@dataclass(frozen=True, slots=True)
class Subtree:
    """A node of a `DocumentTree` together with all of its descendants.

    Attributes:
        tree (DocumentTree): The owning tree.
        root (int): Index of the subtree root.
    """

    tree: DocumentTree
    root: int

    def __len__(self) -> int:
        return sum(1 for _ in self.tree.iter_nodes(self.root))

    def __contains__(self, index: object) -> bool:
        return any(node.index == index for node in self.tree.iter_nodes(self.root))

    def walk(self) -> Iterator[tuple[int, bool]]:
        """Enter/Exit events of the subtree, as `DocumentTree.walk`."""
        return self.tree.walk(self.root)
