# topmark:header:start
#
#   project      : mdfmt
#   file         : io.py
#   file_relpath : src/mdfmt/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Load, validate and render TOML configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain `dict` structures. Unlike a lenient loader, any problem with a config
file (unreadable, malformed TOML, wrong value type) is fatal: the helpers raise
a `mdfmt.config.errors.ConfigError` subclass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from mdfmt.config.errors import ConfigFileError, ConfigValidationError
from mdfmt.config.keys import Toml
from mdfmt.config.logging import get_logger
from mdfmt.config.types import ListDelimiter
from mdfmt.constants import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_LINE_WIDTH,
    DEFAULT_LIST_DELIM,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from mdfmt.config.logging import MdfmtLogger
    from mdfmt.config.types import TomlTable

logger: MdfmtLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return mdfmt's runtime defaults as a TOML-compatible dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.KEY_LINE_WIDTH: DEFAULT_LINE_WIDTH,
        Toml.KEY_INDENT_WIDTH: DEFAULT_INDENT_WIDTH,
        Toml.KEY_LIST_DELIM: DEFAULT_LIST_DELIM,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    When the file is a ``pyproject.toml``, the ``[tool.mdfmt]`` table is
    returned instead of the whole document (an empty dict when absent).

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed mdfmt settings.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigFileError(path, str(e)) from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigFileError(path, str(e)) from e

    data: TomlTable = cast("TomlTable", doc.unwrap())

    if path.name == "pyproject.toml":
        tool_section: Any = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
        if not tool_section:
            logger.warning("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
            return {}
        if not isinstance(tool_section, dict):
            raise ConfigFileError(path, f"[tool.{PYPROJECT_TOOL_SECTION}] is not a table")
        data = cast("TomlTable", tool_section)

    unknown: list[str] = sorted(k for k in data if k not in Toml.ALL_KEYS)
    for key in unknown:
        logger.warning("Ignoring unknown config key %r in %s", key, path)

    logger.debug("Loaded TOML config from %s: %s", path, data)
    return data


def to_toml(data: TomlTable) -> str:
    """Render a TOML table as text, omitting ``None`` values (TOML has no null)."""
    cleaned: dict[str, Any] = {k: v for k, v in data.items() if v is not None}
    return tomlkit.dumps(cleaned)


# --- Checked getters (fatal on type errors) ---


def get_positive_int_or_none(table: TomlTable, key: str, *, where: str) -> int | None:
    """Return an optional positive int value from ``table``.

    Notes:
        - Missing key / None -> None
        - ``bool`` is rejected (``bool`` is a subclass of ``int``).

    Raises:
        ConfigValidationError: If the value is present but not a positive int.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigValidationError(
            f"Expected a positive integer for {loc}, got {type(value).__name__}: {value!r}"
        )
    if value <= 0:
        raise ConfigValidationError(f"Expected a positive integer for {loc}, got {value}")
    return value


def get_list_delim_or_none(table: TomlTable, key: str, *, where: str) -> ListDelimiter | None:
    """Return an optional `ListDelimiter` parsed from a string value.

    Raises:
        ConfigValidationError: If the value is present but not a known delimiter name.
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        raise ConfigValidationError(
            f"Expected a string for {loc}, got {type(raw).__name__}: {raw!r}"
        )
    try:
        return ListDelimiter.parse(raw)
    except ValueError as e:
        raise ConfigValidationError(f"{loc}: {e}") from e
