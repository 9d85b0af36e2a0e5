# topmark:header:start
#
#   project      : mdfmt
#   file         : test_wrap_property.py
#   file_relpath : tests/formatter/test_wrap_property.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

# pyright: strict

"""Property tests for `wrap_text`.

For generated word lists, widths and prefixes this suite asserts that:
1) the words come back in order, unsplit, with the prefix (or its indent) in front,
2) a line only overflows when it holds a single word, and
3) the fill is greedy: the next line's first word would not have fit.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from tests.conftest import mark_formatter
from mdfmt.formatter.wrap import wrap_text

s_words = st.lists(
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=15),
    min_size=1,
    max_size=30,
)
s_prefix = st.sampled_from(["", "* ", "- ", "    * ", "        - "])


@mark_formatter
@settings(max_examples=200, deadline=None)
@given(words=s_words, width=st.integers(min_value=1, max_value=60), prefix=s_prefix)
def test_wrap_properties(words: list[str], width: int, prefix: str) -> None:
    """Greedy wrapping keeps every word and respects the width where it can."""
    out: str = wrap_text(width, prefix, " ".join(words))
    lines: list[str] = out.split("\n")
    indent: str = " " * len(prefix)

    assert lines[0].startswith(prefix)
    for line in lines[1:]:
        assert line.startswith(indent)

    per_line: list[list[str]] = [line[len(prefix) :].split(" ") for line in lines]
    assert [w for ws in per_line for w in ws] == words

    for line, ws in zip(lines, per_line):
        assert line == line.rstrip()
        assert len(line) <= width or len(ws) == 1

    for line, following in zip(lines, per_line[1:]):
        assert len(line) + 1 + len(following[0]) > width
