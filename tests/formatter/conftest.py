# topmark:header:start
#
#   project      : mdfmt
#   file         : conftest.py
#   file_relpath : tests/formatter/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Helpers for building document trees by hand in formatter tests.

Hand-built trees keep formatter tests independent of the markdown parser, and
make it possible to feed payloads the parser never produces (for example,
literals that are not valid UTF-8).
"""

from __future__ import annotations

from collections.abc import Sequence

from mdfmt.document.tree import DocumentTree, ListData, Literal, NodeKind


def add_text(tree: DocumentTree, parent: int, text: str | bytes) -> int:
    """Append a ``TEXT`` node holding ``text`` under ``parent``."""
    literal: bytes = text if isinstance(text, bytes) else text.encode("utf-8")
    return tree.add(NodeKind.TEXT, Literal(literal), parent)


def add_paragraph(tree: DocumentTree, parent: int, text: str) -> int:
    """Append a paragraph with a single text run under ``parent``."""
    para = tree.add(NodeKind.PARAGRAPH, parent=parent)
    add_text(tree, para, text)
    return para


def add_list(tree: DocumentTree, parent: int, items: Sequence[str | tuple[str, Sequence[str]]]) -> int:
    """Append a tight bullet list under ``parent``.

    Args:
        tree (DocumentTree): Tree to extend.
        parent (int): Parent index.
        items (Sequence[str | tuple[str, Sequence[str]]]): Item texts; a tuple
            ``(text, children)`` adds a nested list after the item paragraph.

    Returns:
        int: Index of the new ``LIST`` node.
    """
    lst = tree.add(NodeKind.LIST, ListData(delimiter="*", tight=True), parent)
    for entry in items:
        item = tree.add(NodeKind.ITEM, parent=lst)
        if isinstance(entry, tuple):
            text, nested = entry
            add_paragraph(tree, item, text)
            add_list(tree, item, list(nested))
        else:
            add_paragraph(tree, item, entry)
    return lst


def new_document() -> tuple[DocumentTree, int]:
    """Return an empty tree and the index of its ``DOCUMENT`` root."""
    tree = DocumentTree()
    return tree, tree.add(NodeKind.DOCUMENT)
