# topmark:header:start
#
#   project      : mdfmt
#   file         : nodes.py
#   file_relpath : src/mdfmt/formatter/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Per-node formatting rules.

Three pure functions, dispatched on `NodeKind`, are driven by the engine
(`mdfmt.formatter.engine.Formatter`):

- `item_prefix`: the prefix a node introduces when entered (list items only).
- `format_node`: the text emitted when a node is entered.
- `resolve_suffix`: the text emitted when a node is exited.

Every function returns ``None`` when a node emits nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdfmt.config.logging import get_logger
from mdfmt.constants import CODE_FENCE, THEMATIC_BREAK
from mdfmt.document.tree import CodeBlock, Heading, HtmlBlock, Link, NodeKind
from mdfmt.formatter.collect import collect_text, decode_literal
from mdfmt.formatter.wrap import wrap_text

if TYPE_CHECKING:
    from mdfmt.config import Config
    from mdfmt.config.logging import MdfmtLogger
    from mdfmt.document.tree import DocumentTree, Node

logger: MdfmtLogger = get_logger(__name__)


def item_prefix(kind: NodeKind, depth: int, config: Config) -> str | None:
    """Return the prefix introduced by entering a node of ``kind`` at ``depth``.

    Only list items introduce a prefix: ``indent_width * (depth // 2 - 1)``
    spaces, then the list marker and a space. Each nesting level adds two to
    the depth (the ``LIST`` wrapper and the ``ITEM``), hence the halving; the
    space count is clamped at zero for shallow depths.

    Args:
        kind (NodeKind): Kind of the entered node.
        depth (int): Traversal depth of the node (1 for the walk's start node).
        config (Config): Formatting configuration.

    Returns:
        str | None: The prefix, or ``None`` when ``kind`` introduces none.
    """
    if kind is not NodeKind.ITEM:
        return None
    level: int = max(0, depth // 2 - 1)
    return " " * (config.indent_width * level) + config.list_delim.symbol + " "


def format_node(
    tree: DocumentTree,
    index: int,
    prefix: str | None,
    config: Config,
) -> str | None:
    """Return the text emitted when entering node ``index``.

    Args:
        tree (DocumentTree): The document tree.
        index (int): Entered node.
        prefix (str | None): Active prefix (top of the prefix stack).
        config (Config): Formatting configuration.

    Returns:
        str | None: Emitted text, or ``None`` for nodes that only format
        through their children.
    """
    node: Node = tree.node(index)
    match node.kind:
        case NodeKind.CODE_BLOCK:
            block = node.data(CodeBlock)
            body: str = decode_literal(block.literal, where=f"code block #{index}")
            # The parser keeps the final newline of the block body
            if body.endswith("\n"):
                body = body[:-1]
            return f"{CODE_FENCE}{block.info}\n{body}\n{CODE_FENCE}"
        case NodeKind.LINK:
            link = node.data(Link)
            return f"[{collect_text(tree, index)}]({link.url})"
        case NodeKind.PARAGRAPH:
            return wrap_text(config.line_width, prefix, collect_text(tree, index))
        case NodeKind.HEADING:
            heading = node.data(Heading)
            return "#" * heading.level + " " + collect_text(tree, index)
        case NodeKind.HTML_BLOCK:
            return decode_literal(node.data(HtmlBlock).literal, where=f"HTML block #{index}")
        case NodeKind.THEMATIC_BREAK:
            return THEMATIC_BREAK
        case NodeKind.ITEM:
            # Contributes its prefix only (see `item_prefix`)
            return None
        case (
            NodeKind.DOCUMENT
            | NodeKind.LIST
            | NodeKind.TEXT
            | NodeKind.CODE
            | NodeKind.SOFT_BREAK
            | NodeKind.LINE_BREAK
            | NodeKind.BLOCK_QUOTE
            | NodeKind.EMPHASIS
            | NodeKind.STRONG
            | NodeKind.STRIKETHROUGH
            | NodeKind.IMAGE
            | NodeKind.HTML_INLINE
            | NodeKind.OTHER
        ):
            return None


def resolve_suffix(tree: DocumentTree, index: int) -> str | None:
    """Return the text emitted when exiting node ``index``.

    - Root (no parent): nothing.
    - Direct child of the document: ``"\\n"`` after a list (its paragraphs
      already end their own lines), ``"\\n\\n"`` after any other block.
    - Deeper nodes: ``"\\n"`` after a paragraph, nothing otherwise.

    Args:
        tree (DocumentTree): The document tree.
        index (int): Exited node.

    Returns:
        str | None: Emitted text, or ``None``.
    """
    parent: Node | None = tree.parent(index)
    if parent is None:
        return None

    kind: NodeKind = tree.kind(index)
    if parent.kind is NodeKind.DOCUMENT:
        return "\n" if kind is NodeKind.LIST else "\n\n"
    if kind is NodeKind.PARAGRAPH:
        return "\n"
    return None
