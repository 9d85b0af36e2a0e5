# topmark:header:start
#
#   project      : mdfmt
#   file         : __init__.py
#   file_relpath : src/mdfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Public surface of the mdfmt configuration layer.

Build a `MutableConfig` (from defaults, a TOML file and overrides), then
`freeze()` it into an immutable `Config` for the formatter.
"""

from __future__ import annotations

from mdfmt.config.errors import ConfigError, ConfigFileError, ConfigValidationError
from mdfmt.config.model import Config, MutableConfig
from mdfmt.config.types import ListDelimiter

__all__ = [
    "Config",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "ListDelimiter",
    "MutableConfig",
]
