# topmark:header:start
#
#   project      : mdfmt
#   file         : test_tree.py
#   file_relpath : tests/document/test_tree.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Tests for the arena-backed `DocumentTree`."""

from __future__ import annotations

import pytest

from mdfmt.document.tree import DocumentTree, Heading, Link, Literal, NodeKind


def _sample() -> tuple[DocumentTree, dict[str, int]]:
    tree = DocumentTree()
    ids: dict[str, int] = {}
    ids["doc"] = tree.add(NodeKind.DOCUMENT)
    ids["h"] = tree.add(NodeKind.HEADING, Heading(level=2), ids["doc"])
    ids["h.t"] = tree.add(NodeKind.TEXT, Literal(b"T"), ids["h"])
    ids["p"] = tree.add(NodeKind.PARAGRAPH, parent=ids["doc"])
    ids["p.t"] = tree.add(NodeKind.TEXT, Literal(b"x"), ids["p"])
    ids["p.l"] = tree.add(NodeKind.LINK, Link(url="u"), ids["p"])
    return tree, ids


def test_add_links_parent_and_children() -> None:
    """Children are recorded in insertion order and point back to their parent."""
    tree, ids = _sample()

    assert tree.root == ids["doc"]
    assert tree.children(ids["doc"]) == [ids["h"], ids["p"]]
    assert tree.children(ids["p"]) == [ids["p.t"], ids["p.l"]]
    parent = tree.parent(ids["p.l"])
    assert parent is not None and parent.index == ids["p"]
    assert tree.parent(ids["doc"]) is None
    assert len(tree) == 6


def test_walk_emits_enter_and_exit_in_document_order() -> None:
    """Each node yields Enter before its children and Exit after them."""
    tree, ids = _sample()
    events = [(index, entering) for index, entering in tree.walk()]

    assert events == [
        (ids["doc"], True),
        (ids["h"], True),
        (ids["h.t"], True),
        (ids["h.t"], False),
        (ids["h"], False),
        (ids["p"], True),
        (ids["p.t"], True),
        (ids["p.t"], False),
        (ids["p.l"], True),
        (ids["p.l"], False),
        (ids["p"], False),
        (ids["doc"], False),
    ]


def test_walk_subtree() -> None:
    """Walking from an inner node stays inside its subtree."""
    tree, ids = _sample()
    entered = [index for index, entering in tree.walk(ids["p"]) if entering]
    assert entered == [ids["p"], ids["p.t"], ids["p.l"]]


def test_subtree_view() -> None:
    """`subtree` exposes one node and its descendants, walked like the tree."""
    tree, ids = _sample()
    view = tree.subtree(ids["p"])

    assert view.root == ids["p"]
    assert len(view) == 3
    assert ids["p.l"] in view
    assert ids["h"] not in view
    assert list(view.walk()) == list(tree.walk(ids["p"]))
    assert len(tree.subtree(tree.root)) == len(tree)


def test_subtree_rejects_unknown_index() -> None:
    """Only indices of existing nodes have a subtree."""
    tree, _ = _sample()
    with pytest.raises(ValueError):
        tree.subtree(len(tree))
    with pytest.raises(ValueError):
        tree.subtree(-1)


def test_iter_nodes_is_preorder() -> None:
    """`iter_nodes` yields nodes in pre-order."""
    tree, _ = _sample()
    kinds = [node.kind for node in tree.iter_nodes()]
    assert kinds == [
        NodeKind.DOCUMENT,
        NodeKind.HEADING,
        NodeKind.TEXT,
        NodeKind.PARAGRAPH,
        NodeKind.TEXT,
        NodeKind.LINK,
    ]


def test_payload_access_is_checked() -> None:
    """`Node.data` returns the payload of the expected type, or raises."""
    tree, ids = _sample()
    assert tree.node(ids["h"]).data(Heading).level == 2
    with pytest.raises(TypeError):
        tree.node(ids["h"]).data(Link)
    with pytest.raises(TypeError):
        tree.node(ids["p"]).data(Literal)


def test_single_root() -> None:
    """A second root or an unknown parent is rejected."""
    tree = DocumentTree()
    with pytest.raises(ValueError):
        _ = tree.root
    tree.add(NodeKind.DOCUMENT)
    with pytest.raises(ValueError):
        tree.add(NodeKind.DOCUMENT)
    with pytest.raises(ValueError):
        tree.add(NodeKind.PARAGRAPH, parent=7)
