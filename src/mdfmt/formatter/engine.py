# topmark:header:start
#
#   project      : mdfmt
#   file         : engine.py
#   file_relpath : src/mdfmt/formatter/engine.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Formatting engine: one depth-first walk over a `DocumentTree`.

On each Enter event the engine increments the depth, pushes the prefix the
node introduces (if any), and appends the node's formatted text computed with
the active prefix. On each Exit event it appends the node's suffix, pops the
prefix stack when the top entry was pushed by this node (same kind, same
depth), and decrements the depth.

The prefix stack, depth counter and output buffer are local to one
`Formatter.format` call; a `Formatter` only keeps the (immutable) `Config`,
so one instance may format any number of documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mdfmt.config.logging import get_logger
from mdfmt.formatter.nodes import format_node, item_prefix, resolve_suffix

if TYPE_CHECKING:
    from mdfmt.config import Config
    from mdfmt.config.logging import MdfmtLogger
    from mdfmt.document.tree import DocumentTree, NodeKind, Subtree

logger: MdfmtLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PrefixEntry:
    """An entry of the prefix stack.

    Attributes:
        kind (NodeKind): Kind of the node that pushed the entry.
        prefix (str): Text prepended to the first wrapped line below the node.
        depth (int): Traversal depth at which the entry was pushed.
    """

    kind: NodeKind
    prefix: str
    depth: int


class PrefixStack:
    """LIFO stack of nesting prefixes; only the top prefix is active."""

    def __init__(self) -> None:
        self._entries: list[PrefixEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def active(self) -> str | None:
        """The prefix of the top entry, or ``None`` when the stack is empty."""
        return self._entries[-1].prefix if self._entries else None

    def push(self, entry: PrefixEntry) -> None:
        """Push ``entry``; it becomes the active prefix."""
        self._entries.append(entry)

    def pop_matching(self, kind: NodeKind, depth: int) -> bool:
        """Pop the top entry if it was pushed by a ``kind`` node at ``depth``.

        Returns:
            bool: Whether an entry was popped.
        """
        if self._entries and self._entries[-1].kind is kind and self._entries[-1].depth == depth:
            self._entries.pop()
            return True
        return False


class Formatter:
    """Format a document tree according to a `Config`.

    Args:
        config (Config): Formatting configuration, shared read-only.
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    def format(self, tree: DocumentTree, root: int | None = None) -> str:
        """Format the subtree rooted at ``root``.

        Args:
            tree (DocumentTree): The document tree.
            root (int | None): Subtree root; defaults to the document root.

        Returns:
            str: The formatted text, stripped of leading and trailing whitespace.
        """
        view: Subtree = tree.subtree(tree.root if root is None else root)

        stack = PrefixStack()
        depth = 0
        out: list[str] = []

        logger.debug("[START DOCUMENT] node #%d (%d nodes)", view.root, len(view))
        for index, entering in view.walk():
            kind = tree.kind(index)
            if entering:
                depth += 1
                prefix = item_prefix(kind, depth, self.config)
                if prefix is not None:
                    stack.push(PrefixEntry(kind=kind, prefix=prefix, depth=depth))
                text = format_node(tree, index, stack.active, self.config)
                logger.trace("enter %s #%d depth=%d prefix=%r", kind.value, index, depth, prefix)
            else:
                text = resolve_suffix(tree, index)
                stack.pop_matching(kind, depth)
                logger.trace("exit  %s #%d depth=%d", kind.value, index, depth)
                depth -= 1
            if text is not None:
                out.append(text)
        logger.debug("[END DOCUMENT] %d fragment(s)", len(out))

        return "".join(out).strip()


def format_document(tree: DocumentTree, config: Config) -> str:
    """Format a whole document tree with a one-off `Formatter`."""
    return Formatter(config).format(tree)
