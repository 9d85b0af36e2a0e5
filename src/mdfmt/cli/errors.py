# topmark:header:start
#
#   project      : mdfmt
#   file         : errors.py
#   file_relpath : src/mdfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Exceptions for the mdfmt CLI.

Raise these in the command to signal errors with standardized messages and
exit codes. Exceptions prefer the project console if one is stored in the Click
context (see `MdfmtError.show`); otherwise Click's default styling is used.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from mdfmt.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


class MdfmtError(click.ClickException):
    """Base class for all mdfmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized by `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class MdfmtUsageError(MdfmtError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MdfmtConfigError(MdfmtError):
    """Error for configuration errors (invalid values, malformed config file)."""

    exit_code = ExitCode.CONFIG_ERROR


class MdfmtFileNotFoundError(MdfmtError):
    """Error when an input path does not exist or is not a regular file.

    Args:
        filename (Path): The offending path.
        parameter (str): Name of the parameter that received it.
    """

    exit_code = ExitCode.FILE_NOT_FOUND

    def __init__(self, filename: Path, parameter: str) -> None:
        super().__init__(f"Invalid file: {str(filename)!r} for {parameter}")
        self.filename = filename
        self.parameter = parameter


class MdfmtIOError(MdfmtError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class MdfmtEncodingError(MdfmtError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
