# topmark:header:start
#
#   project      : mdfmt
#   file         : types.py
#   file_relpath : src/mdfmt/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Value types shared by the configuration layer."""

from __future__ import annotations

from enum import Enum
from typing import Any

# A parsed TOML table, as returned by ``tomlkit.TOMLDocument.unwrap()``.
TomlTable = dict[str, Any]


class ListDelimiter(str, Enum):
    """The symbols that can denote a bullet list item.

    The enum value is the name used in config files and on the command line;
    `symbol` is the marker written to the output.
    """

    ASTERISK = "asterisk"
    DASH = "dash"

    @property
    def symbol(self) -> str:
        """The list marker character for this delimiter."""
        return "*" if self is ListDelimiter.ASTERISK else "-"

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def parse(cls, value: str) -> ListDelimiter:
        """Resolve a config or CLI value into a `ListDelimiter`.

        Accepts the canonical names (``"asterisk"``, ``"dash"``, case-insensitive)
        and the marker symbols themselves (``"*"``, ``"-"``).

        Args:
            value (str): Raw value.

        Returns:
            ListDelimiter: The matching delimiter.

        Raises:
            ValueError: If ``value`` names no known delimiter.
        """
        v = value.strip()
        for member in cls:
            if v.lower() == member.value or v == member.symbol:
                return member
        choices = ", ".join(f"'{m.value}'" for m in cls)
        raise ValueError(f"Invalid list delimiter {value!r} (expected one of {choices}, '*', '-')")
