# topmark:header:start
#
#   project      : mdfmt
#   file         : collect.py
#   file_relpath : src/mdfmt/formatter/collect.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Flatten inline content into plain text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdfmt.config.logging import get_logger
from mdfmt.document.tree import Literal, NodeKind

if TYPE_CHECKING:
    from mdfmt.config.logging import MdfmtLogger
    from mdfmt.document.tree import DocumentTree

logger: MdfmtLogger = get_logger(__name__)


def decode_literal(literal: bytes, *, where: str = "node") -> str:
    """Decode a UTF-8 literal payload.

    Invalid byte sequences do not abort formatting: the fragment is replaced by
    an empty string and a warning is logged.

    Args:
        literal (bytes): Raw payload.
        where (str): Description of the owning node, for the log message.

    Returns:
        str: The decoded text, or ``""`` when ``literal`` is not valid UTF-8.
    """
    try:
        return literal.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("Dropping undecodable text in %s: %s", where, e)
        return ""


def collect_text(tree: DocumentTree, index: int) -> str:
    """Concatenate the inline text below node ``index``.

    Rules:
        - ``TEXT`` and ``CODE`` contribute their literal verbatim.
        - ``SOFT_BREAK`` contributes a single space, ``LINE_BREAK`` a newline.
        - ``LINK`` contributes nothing: its label is rendered by the link
          itself when the formatter enters it.
        - Any other kind contributes the text of its children.

    Args:
        tree (DocumentTree): The document tree.
        index (int): Node whose descendants are collected (the node itself is
            not subject to the rules above, so a link's own label can be
            collected by passing the link's index).

    Returns:
        str: The collected text.
    """
    parts: list[str] = []
    work: list[int] = list(reversed(tree.children(index)))
    while work:
        node = tree.node(work.pop())
        kind = node.kind
        if kind in (NodeKind.TEXT, NodeKind.CODE):
            parts.append(
                decode_literal(node.data(Literal).literal, where=f"{kind.value} #{node.index}")
            )
        elif kind is NodeKind.SOFT_BREAK:
            parts.append(" ")
        elif kind is NodeKind.LINE_BREAK:
            parts.append("\n")
        elif kind is NodeKind.LINK:
            continue
        else:
            work.extend(reversed(node.children))
    return "".join(parts)
