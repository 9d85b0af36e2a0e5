# topmark:header:start
#
#   project      : mdfmt
#   file         : constants.py
#   file_relpath : src/mdfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""mdfmt Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    MDFMT_VERSION: str = get_version("mdfmt")
except PackageNotFoundError:  # running from a source checkout
    MDFMT_VERSION = "0.0.0"

# Runtime defaults (see `mdfmt.config.io.load_defaults_dict`)
DEFAULT_LINE_WIDTH: Final[int] = 80
DEFAULT_INDENT_WIDTH: Final[int] = 4
DEFAULT_LIST_DELIM: Final[str] = "asterisk"

# Environment variable consulted by `mdfmt.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "MDFMT_LOG_LEVEL"

# Section holding mdfmt settings when the config file is a pyproject.toml
PYPROJECT_TOOL_SECTION: Final[str] = "mdfmt"

CODE_FENCE: Final[str] = "```"
THEMATIC_BREAK: Final[str] = "---"
