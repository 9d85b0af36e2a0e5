# topmark:header:start
#
#   project      : mdfmt
#   file         : validators.py
#   file_relpath : src/mdfmt/cli/validators.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""CLI input validation helpers.

`validate_*` helpers enforce a policy and raise an `MdfmtError` subclass when
the invocation is invalid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdfmt.cli.errors import MdfmtFileNotFoundError
from mdfmt.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from mdfmt.config.logging import MdfmtLogger

logger: MdfmtLogger = get_logger(__name__)


def validate_regular_file(path: Path, *, parameter: str) -> None:
    """Require ``path`` to exist and be a regular file.

    Args:
        path: Path received on the command line.
        parameter: Name of the parameter, reported in the error message.

    Raises:
        MdfmtFileNotFoundError: If ``path`` is missing or not a regular file.
    """
    if not path.is_file():
        logger.debug("Rejecting %s for %s: not a regular file", path, parameter)
        raise MdfmtFileNotFoundError(path, parameter)


def validate_paths(input_file: Path, config_file: Path | None) -> None:
    """Validate the input file and the optional config file."""
    validate_regular_file(input_file, parameter="input_file")
    if config_file is not None:
        validate_regular_file(config_file, parameter="config_file")
