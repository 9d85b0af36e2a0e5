# topmark:header:start
#
#   project      : mdfmt
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""End-to-end tests of the public API: markdown text in, formatted text out."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import make_config, mark_integration
from mdfmt.api import format_file, format_text
from mdfmt.config import ListDelimiter

if TYPE_CHECKING:
    from pathlib import Path


@mark_integration
def test_heading_and_wrapped_paragraph() -> None:
    """A heading, a blank line, then the paragraph wrapped at the line width."""
    text = (
        "# Title\n\nThis is a paragraph that is somewhat long and should wrap "
        "once it exceeds the configured width."
    )
    out = format_text(text, make_config(line_width=40))
    lines = out.split("\n")

    assert lines[:2] == ["# Title", ""]
    assert len(lines) > 3
    for line in lines:
        assert len(line) <= 40
        assert line == line.rstrip()
    assert " ".join(lines[2:]) == text.split("\n\n")[1]


@mark_integration
def test_dash_list_with_nested_items() -> None:
    """Top-level items get ``- ``; nested items one indent level more."""
    text = "- one\n- two\n    - inner\n"
    out = format_text(text, make_config(list_delim=ListDelimiter.DASH, indent_width=4))
    assert out == "- one\n- two\n    - inner"


@mark_integration
def test_link_label_and_url() -> None:
    """A link is rendered as ``[label](url)``."""
    assert format_text("[here](example.com)") == "[here](example.com)"


@mark_integration
def test_fenced_code_block() -> None:
    """The info string and body are kept; the block is three lines."""
    out = format_text("```rust\nfn main() {}\n```\n")
    assert out == "```rust\nfn main() {}\n```"


@mark_integration
def test_indented_code_block_becomes_fenced() -> None:
    """Indented code blocks are emitted with fences and no info string."""
    assert format_text("    x = 1\n") == "```\nx = 1\n```"


@mark_integration
def test_blocks_are_separated_by_blank_lines() -> None:
    """Top-level blocks other than lists end with a blank line."""
    text = "Setext\n======\n\n***\n\n<div>raw</div>\n\nend\n"
    assert format_text(text) == "# Setext\n\n---\n\n<div>raw</div>\n\n\nend"


@mark_integration
def test_ordered_list_uses_configured_marker() -> None:
    """Ordered items are rendered with the bullet marker."""
    assert format_text("1. a\n2. b\n") == "* a\n* b"


@mark_integration
def test_soft_breaks_are_rejoined() -> None:
    """Source line breaks inside a paragraph are reflowed."""
    assert format_text("one\ntwo\nthree\n") == "one two three"


@mark_integration
def test_typographic_replacements() -> None:
    """The parser applies typographic replacements."""
    assert format_text("(c) 2025") == "© 2025"


@mark_integration
def test_formatting_is_idempotent() -> None:
    """Formatting formatted output again changes nothing."""
    config = make_config(line_width=30)
    text = "# T\n\nA fairly long paragraph that needs to wrap here.\n\n* x\n* y z\n"
    once = format_text(text, config)
    assert format_text(once, config) == once


@mark_integration
def test_empty_document() -> None:
    """An empty document formats to an empty string."""
    assert format_text("") == ""


@mark_integration
def test_format_file(tmp_path: Path) -> None:
    """`format_file` reads UTF-8 text and formats it."""
    doc = tmp_path / "doc.md"
    doc.write_text("Title\n-----\n\ncafé\n", encoding="utf-8")
    assert format_file(doc) == "## Title\n\ncafé"


@mark_integration
def test_format_file_rejects_invalid_utf8(tmp_path: Path) -> None:
    """Non UTF-8 input propagates the decoding error."""
    doc = tmp_path / "doc.md"
    doc.write_bytes(b"\xff\xfe")
    with pytest.raises(UnicodeDecodeError):
        format_file(doc)


@mark_integration
def test_task_list_markers_stay_literal() -> None:
    """Task list boxes are plain text and keep their checked state."""
    assert format_text("- [x] done\n- [ ] todo\n") == "* [x] done\n* [ ] todo"
