# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/mdfmt/cli/options.py
#   project      : mdfmt
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Reusable CLI options and their resolution logic.

This module centralizes the option decorators (verbosity, color, formatting
overrides) so the command itself can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from mdfmt.cli.errors import MdfmtUsageError
from mdfmt.config.logging import TRACE_LEVEL, get_logger
from mdfmt.config.types import ListDelimiter

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        MdfmtUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level (every node of the walk is logged).
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise MdfmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


#: Click context settings shared by mdfmt commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``--verbose`` and ``--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Repeat up to three times (TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` option to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable colored diagnostics.",
    )(f)
    return f


def formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the per-run formatting overrides.

    Every option defaults to ``None`` so that an option left out on the command
    line does not override the value from the config file.
    """
    f = click.option(
        "--line-width",
        "line_width",
        type=click.IntRange(min=1),
        default=None,
        help="Maximum line width (default: 80).",
    )(f)
    f = click.option(
        "--indent-width",
        "indent_width",
        type=click.IntRange(min=1),
        default=None,
        help="Indent width of nested list items; must be less than the line width (default: 4).",
    )(f)
    f = click.option(
        "--list-delim",
        "list_delim",
        type=click.Choice([d.value for d in ListDelimiter], case_sensitive=False),
        default=None,
        help="Marker for list items: 'asterisk' (*) or 'dash' (-) (default: asterisk).",
    )(f)
    return f
