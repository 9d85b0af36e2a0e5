# topmark:header:start
#
#   project      : mdfmt
#   file         : __init__.py
#   file_relpath : src/mdfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""mdfmt package.

mdfmt is a formatter for CommonMark documents. It parses a markdown file,
walks the resulting document tree and emits canonical text: normalized
headings, wrapped paragraphs, indented list items and fenced code blocks.
It exposes both a CLI and a small typed API (see `mdfmt.api`).
"""

from __future__ import annotations
