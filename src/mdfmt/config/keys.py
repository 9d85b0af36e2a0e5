# topmark:header:start
#
#   project      : mdfmt
#   file         : keys.py
#   file_relpath : src/mdfmt/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Canonical TOML and argument key names for mdfmt configuration.

TOML keys are the *external configuration API*: renaming or removing one is a
breaking change. Argument keys are the names used in the mapping that the CLI
(or an API caller) passes to `MutableConfig.apply_cli_args`.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used in an mdfmt config file (or ``[tool.mdfmt]``)."""

    KEY_LINE_WIDTH: Final[str] = "line-width"
    KEY_INDENT_WIDTH: Final[str] = "indent-width"
    KEY_LIST_DELIM: Final[str] = "list-delim"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_LINE_WIDTH, KEY_INDENT_WIDTH, KEY_LIST_DELIM})


class ArgKey:
    """Keys of the override mapping accepted by `MutableConfig.apply_cli_args`."""

    LINE_WIDTH: Final[str] = "line_width"
    INDENT_WIDTH: Final[str] = "indent_width"
    LIST_DELIM: Final[str] = "list_delim"
