# topmark:header:start
#
#   project      : mdfmt
#   file         : parser.py
#   file_relpath : src/mdfmt/document/parser.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Parse markdown text into a `DocumentTree`.

Parsing is delegated to ``markdown-it-py`` (CommonMark preset) with smart
punctuation, strikethrough and autolinking (``linkify-it-py``) enabled. The
resulting `markdown_it.tree.SyntaxTreeNode` is converted into the project's
own arena tree, which is the only shape the formatter consumes.

Conversion rules:
    - ``inline`` container nodes are spliced: their children are attached to
      the enclosing block node (paragraph, heading, ...).
    - Node types without a counterpart in `NodeKind` become `NodeKind.OTHER`
      and keep their markdown-it type name in an `Unknown` payload.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Final

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdfmt.config.logging import get_logger
from mdfmt.document.tree import (
    CodeBlock,
    DocumentTree,
    Heading,
    HtmlBlock,
    Link,
    ListData,
    Literal,
    NodeKind,
    Unknown,
)

if TYPE_CHECKING:
    from mdfmt.config.logging import MdfmtLogger
    from mdfmt.document.tree import Payload

logger: MdfmtLogger = get_logger(__name__)

# markdown-it node types that map onto a payload-free NodeKind
_SIMPLE_KINDS: Final[dict[str, NodeKind]] = {
    "root": NodeKind.DOCUMENT,
    "paragraph": NodeKind.PARAGRAPH,
    "hr": NodeKind.THEMATIC_BREAK,
    "list_item": NodeKind.ITEM,
    "softbreak": NodeKind.SOFT_BREAK,
    "hardbreak": NodeKind.LINE_BREAK,
    "blockquote": NodeKind.BLOCK_QUOTE,
    "em": NodeKind.EMPHASIS,
    "strong": NodeKind.STRONG,
    "s": NodeKind.STRIKETHROUGH,
    "image": NodeKind.IMAGE,
}

_ENABLED_RULES: Final[list[str]] = ["strikethrough", "replacements", "smartquotes", "linkify"]


@functools.cache
def get_markdown_parser() -> MarkdownIt:
    """Return the shared, configured `MarkdownIt` instance."""
    md = MarkdownIt("commonmark", {"typographer": True, "linkify": True})
    md.enable(_ENABLED_RULES)
    return md


def parse_markdown(text: str) -> DocumentTree:
    """Parse markdown ``text`` into a `DocumentTree`.

    Args:
        text (str): Markdown source.

    Returns:
        DocumentTree: The converted tree; its root is a `NodeKind.DOCUMENT` node.
    """
    tokens = get_markdown_parser().parse(text)
    syntax_root = SyntaxTreeNode(tokens)
    tree = from_syntax_tree(syntax_root)
    logger.debug("Parsed markdown into %s", tree)
    return tree


def from_syntax_tree(syntax_root: SyntaxTreeNode) -> DocumentTree:
    """Convert a markdown-it syntax tree into a `DocumentTree`."""
    tree = DocumentTree()
    root_kind, root_payload = _convert(syntax_root)
    root = tree.add(root_kind, root_payload)

    # (syntax node, parent index); reversed pushes keep document order
    work: list[tuple[SyntaxTreeNode, int]] = [
        (child, root) for child in reversed(syntax_root.children)
    ]
    while work:
        syntax_node, parent = work.pop()
        if syntax_node.type == "inline":
            work.extend((child, parent) for child in reversed(syntax_node.children))
            continue
        kind, payload = _convert(syntax_node)
        index = tree.add(kind, payload, parent)
        work.extend((child, index) for child in reversed(syntax_node.children))
    return tree


def _encode(text: str) -> bytes:
    return text.encode("utf-8")


def _convert(node: SyntaxTreeNode) -> tuple[NodeKind, Payload | None]:
    """Map one syntax node onto a kind and payload."""
    node_type: str = node.type

    simple = _SIMPLE_KINDS.get(node_type)
    if simple is not None:
        return simple, None

    if node_type == "heading":
        return NodeKind.HEADING, Heading(level=int(node.tag[1:]))
    if node_type in ("fence", "code_block"):
        return NodeKind.CODE_BLOCK, CodeBlock(info=node.info.strip(), literal=_encode(node.content))
    if node_type == "link":
        href = node.attrs.get("href", "")
        title = node.attrs.get("title", "")
        return NodeKind.LINK, Link(url=str(href), title=str(title))
    if node_type == "html_block":
        return NodeKind.HTML_BLOCK, HtmlBlock(literal=_encode(node.content))
    if node_type in ("bullet_list", "ordered_list"):
        return NodeKind.LIST, _list_data(node)
    if node_type == "text":
        return NodeKind.TEXT, Literal(literal=_encode(node.content))
    if node_type == "code_inline":
        return NodeKind.CODE, Literal(literal=_encode(node.content))
    if node_type == "html_inline":
        return NodeKind.HTML_INLINE, Literal(literal=_encode(node.content))

    logger.debug("No dedicated node kind for markdown-it type %r", node_type)
    return NodeKind.OTHER, Unknown(name=node_type)


def _list_data(node: SyntaxTreeNode) -> ListData:
    """Build the list payload from a ``bullet_list``/``ordered_list`` node.

    The delimiter is taken from the first item's markup; a list is tight when
    markdown-it hid its item paragraphs.
    """
    ordered: bool = node.type == "ordered_list"
    items = node.children
    delimiter: str = items[0].markup if items else ("." if ordered else "*")

    tight = True
    for item in items:
        for child in item.children:
            if child.type == "paragraph" and not child.hidden:
                tight = False
                break
        if not tight:
            break

    start: int | None = None
    if ordered:
        raw_start = node.attrs.get("start", 1)
        start = int(raw_start)
    return ListData(delimiter=delimiter, tight=tight, ordered=ordered, start=start)
