# topmark:header:start
#
#   project      : mdfmt
#   file         : model.py
#   file_relpath : src/mdfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot shared (read-only) by every
      formatter built for one run.
    - `MutableConfig`: a mutable builder used while layering defaults, a
      config file and CLI overrides; it is frozen into `Config` and can be
      thawed back for edits.

Layering precedence (lowest to highest):
    1. runtime defaults (`mdfmt.config.io.load_defaults_dict`)
    2. the config file passed with ``--config``
    3. command-line options

Validation happens in `MutableConfig.freeze`: widths must be positive and
``indent_width`` must be strictly less than ``line_width``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from mdfmt.config.errors import ConfigValidationError
from mdfmt.config.io import (
    get_list_delim_or_none,
    get_positive_int_or_none,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from mdfmt.config.keys import ArgKey, Toml
from mdfmt.config.logging import get_logger
from mdfmt.config.types import ListDelimiter
from mdfmt.constants import DEFAULT_INDENT_WIDTH, DEFAULT_LINE_WIDTH

if TYPE_CHECKING:
    from mdfmt.config.logging import MdfmtLogger
    from mdfmt.config.types import TomlTable

# ArgsLike: generic mapping accepted by `MutableConfig.apply_cli_args` (CLI or API).
ArgsLike = Mapping[str, Any]

logger: MdfmtLogger = get_logger(__name__)

# Marker recorded in `config_files` when CLI overrides are applied
CLI_OVERRIDE_STR = "<CLI overrides>"
DEFAULTS_STR = "<defaults>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for mdfmt.

    Attributes:
        line_width (int): Maximum emitted line length. A single word longer than
            this is never split.
        indent_width (int): Spaces per nesting level of list items; less than
            ``line_width``.
        list_delim (ListDelimiter): Marker used for list items.
        config_files (tuple[Path | str, ...]): Provenance of the merged layers.
    """

    line_width: int = DEFAULT_LINE_WIDTH
    indent_width: int = DEFAULT_INDENT_WIDTH
    list_delim: ListDelimiter = ListDelimiter.ASTERISK
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the config as a TOML-compatible dict (config-file key names)."""
        return {
            Toml.KEY_LINE_WIDTH: self.line_width,
            Toml.KEY_INDENT_WIDTH: self.indent_width,
            Toml.KEY_LIST_DELIM: self.list_delim.value,
        }

    def to_toml(self) -> str:
        """Render the config as TOML text, suitable for a config file."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            line_width=self.line_width,
            indent_width=self.indent_width,
            list_delim=self.list_delim,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while layering config sources.

    ``None`` means "not set by this layer"; `merge_with` only lets set values
    override, and `freeze` falls back to the runtime defaults for anything
    still unset.

    Attributes:
        line_width (int | None): Maximum line width.
        indent_width (int | None): Indent width for nested list items.
        list_delim (ListDelimiter | None): List item marker.
        config_files (list[Path | str]): Provenance of merged layers.
    """

    line_width: int | None = None
    indent_width: int | None = None
    list_delim: ListDelimiter | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable `Config`.

        Raises:
            ConfigValidationError: If a width is not positive or if
                ``indent_width >= line_width``.
        """
        line_width: int = DEFAULT_LINE_WIDTH if self.line_width is None else self.line_width
        indent_width: int = (
            DEFAULT_INDENT_WIDTH if self.indent_width is None else self.indent_width
        )
        list_delim: ListDelimiter = self.list_delim or ListDelimiter.ASTERISK

        if line_width <= 0:
            raise ConfigValidationError(f"line-width must be a positive integer, got {line_width}")
        if indent_width <= 0:
            raise ConfigValidationError(
                f"indent-width must be a positive integer, got {indent_width}"
            )
        if indent_width >= line_width:
            raise ConfigValidationError(
                f"indent-width ({indent_width}) must be less than line-width ({line_width})"
            )

        return Config(
            line_width=line_width,
            indent_width=indent_width,
            list_delim=list_delim,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict(), where="defaults")
        draft.config_files = [DEFAULTS_STR]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, where: str = "config") -> MutableConfig:
        """Build a builder from a parsed TOML table.

        Args:
            data (TomlTable): Parsed table using config-file key names.
            where (str): Location label used in error messages.

        Returns:
            MutableConfig: A builder holding the values found in ``data``.

        Raises:
            ConfigValidationError: If a value has the wrong type.
        """
        return cls(
            line_width=get_positive_int_or_none(data, Toml.KEY_LINE_WIDTH, where=where),
            indent_width=get_positive_int_or_none(data, Toml.KEY_INDENT_WIDTH, where=where),
            list_delim=get_list_delim_or_none(data, Toml.KEY_LIST_DELIM, where=where),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a builder from a TOML config file (``[tool.mdfmt]`` for pyproject.toml).

        Raises:
            ConfigFileError: If the file cannot be read or parsed.
            ConfigValidationError: If a value has the wrong type.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        draft: MutableConfig = cls.from_toml_dict(load_toml_dict(path), where=str(path))
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        overrides: ArgsLike | None = None,
    ) -> MutableConfig:
        """Layer defaults, an optional config file and optional overrides.

        Args:
            config_file (Path | None): Config file to merge over the defaults.
            overrides (ArgsLike | None): CLI/API overrides (see `apply_cli_args`).

        Returns:
            MutableConfig: The merged builder, not yet frozen.
        """
        merged: MutableConfig = cls.from_defaults()
        if config_file is not None:
            merged = merged.merge_with(cls.from_toml_file(config_file))
        if overrides:
            merged.apply_cli_args(overrides)
        return merged

    # ------------------------------ Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Merge ``other`` over this builder; values set in ``other`` win.

        Returns:
            MutableConfig: This builder, updated in place.
        """
        if other.line_width is not None:
            self.line_width = other.line_width
        if other.indent_width is not None:
            self.indent_width = other.indent_width
        if other.list_delim is not None:
            self.list_delim = other.list_delim
        self.config_files.extend(other.config_files)
        return self

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from an arguments mapping (CLI or API).

        Keys are those of `mdfmt.config.keys.ArgKey`; absent keys and ``None``
        values leave the current value untouched. ``list_delim`` may be given
        as a `ListDelimiter` or as a string accepted by `ListDelimiter.parse`.

        Returns:
            MutableConfig: This builder, updated in place.

        Raises:
            ConfigValidationError: If an override value is invalid.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)

        touched = False
        line_width: Any = args.get(ArgKey.LINE_WIDTH)
        if line_width is not None:
            self.line_width = get_positive_int_or_none(
                {Toml.KEY_LINE_WIDTH: line_width}, Toml.KEY_LINE_WIDTH, where="cli"
            )
            touched = True
        indent_width: Any = args.get(ArgKey.INDENT_WIDTH)
        if indent_width is not None:
            self.indent_width = get_positive_int_or_none(
                {Toml.KEY_INDENT_WIDTH: indent_width}, Toml.KEY_INDENT_WIDTH, where="cli"
            )
            touched = True
        list_delim: Any = args.get(ArgKey.LIST_DELIM)
        if list_delim is not None:
            if isinstance(list_delim, ListDelimiter):
                self.list_delim = list_delim
            else:
                self.list_delim = get_list_delim_or_none(
                    {Toml.KEY_LIST_DELIM: list_delim}, Toml.KEY_LIST_DELIM, where="cli"
                )
            touched = True

        if touched:
            self.config_files.append(CLI_OVERRIDE_STR)
        return self
