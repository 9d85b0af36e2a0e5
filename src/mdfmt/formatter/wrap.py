# topmark:header:start
#
#   project      : mdfmt
#   file         : wrap.py
#   file_relpath : src/mdfmt/formatter/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Greedy, prefix-aware word wrapping.

Text is split on single spaces into tokens and packed left to right into lines
of at most ``max_width`` characters. The first line starts with ``prefix``;
continuation lines are indented with as many spaces as the prefix is long, so
wrapped list item text lines up under the item's first word.

A token is never split: a token longer than the available room goes on a line
of its own (after the prefix or the continuation indent) and overflows.
"""

from __future__ import annotations

from mdfmt.config.logging import get_logger

logger = get_logger(__name__)


def wrap_text(max_width: int, prefix: str | None, text: str) -> str:
    """Wrap ``text`` to ``max_width`` columns.

    Args:
        max_width (int): Maximum line length.
        prefix (str | None): Text prepended to the first line; continuation
            lines get the same number of spaces.
        text (str): Text to wrap; only single spaces separate tokens.

    Returns:
        str: The wrapped lines joined with ``"\\n"``. No line ends with a
        separating space.
    """
    seed: str = prefix or ""
    indent: str = " " * len(seed)
    tokens: list[str] = text.split(" ")

    lines: list[str] = []
    line: str = seed
    has_token = False
    separated = False

    for i, token in enumerate(tokens):
        remaining = max(0, max_width - len(line))
        if has_token and (not separated or len(token) > remaining):
            lines.append(_flush(line, len(seed)))
            line = indent
        line += token
        has_token = True

        # Separate from the next token only when it still fits on this line
        separated = i + 1 < len(tokens) and len(line) + 1 + len(tokens[i + 1]) <= max_width
        if separated:
            line += " "

    lines.append(_flush(line, len(seed)))
    logger.trace("wrap_text: %d token(s) into %d line(s)", len(tokens), len(lines))
    return "\n".join(lines)


def _flush(line: str, seed_len: int) -> str:
    """Drop separators left after empty tokens; the prefix or indent is kept."""
    return line[:seed_len] + line[seed_len:].rstrip(" ")
