# topmark:header:start
#
#   project      : mdfmt
#   file         : __init__.py
#   file_relpath : src/mdfmt/formatter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""The mdfmt formatting engine and its node rules."""

from __future__ import annotations

from mdfmt.formatter.collect import collect_text, decode_literal
from mdfmt.formatter.engine import Formatter, PrefixEntry, PrefixStack, format_document
from mdfmt.formatter.nodes import format_node, item_prefix, resolve_suffix
from mdfmt.formatter.wrap import wrap_text

__all__ = [
    "Formatter",
    "PrefixEntry",
    "PrefixStack",
    "collect_text",
    "decode_literal",
    "format_document",
    "format_node",
    "item_prefix",
    "resolve_suffix",
    "wrap_text",
]
