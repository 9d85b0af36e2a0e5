# topmark:header:start
#
#   project      : mdfmt
#   file         : __init__.py
#   file_relpath : src/mdfmt/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Document tree model and the markdown parser adapter that builds it."""

from __future__ import annotations

from mdfmt.document.parser import parse_markdown
from mdfmt.document.tree import (
    CodeBlock,
    DocumentTree,
    Heading,
    HtmlBlock,
    Link,
    ListData,
    Literal,
    Node,
    NodeKind,
    Subtree,
    Unknown,
)

__all__ = [
    "CodeBlock",
    "DocumentTree",
    "Heading",
    "HtmlBlock",
    "Link",
    "ListData",
    "Literal",
    "Node",
    "NodeKind",
    "Subtree",
    "Unknown",
    "parse_markdown",
]
