# topmark:header:start
#
#   project      : mdfmt
#   file         : errors.py
#   file_relpath : src/mdfmt/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Exceptions raised by the configuration layer.

These are plain Python exceptions so that the config layer stays independent of
Click; the CLI translates them into `mdfmt.cli.errors.MdfmtConfigError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(ValueError):
    """Base class for configuration errors (fatal at startup)."""


class ConfigFileError(ConfigError):
    """A config file could not be read or is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load config file {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigValidationError(ConfigError):
    """A config value has the wrong type or violates a constraint."""
