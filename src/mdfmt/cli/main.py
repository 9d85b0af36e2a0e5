# topmark:header:start
#
#   project      : mdfmt
#   file         : main.py
#   file_relpath : src/mdfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""The ``mdfmt`` command.

Flow:
    1. Initialize shared state (logging level, console) on the Click context.
    2. Validate the input and config paths.
    3. Layer the configuration: defaults, then ``--config``, then CLI options.
    4. Read, parse and format the document.
    5. Print the result, or rewrite the input file with ``--in-place``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from mdfmt.cli.console import ClickConsole
from mdfmt.cli.errors import MdfmtConfigError
from mdfmt.cli.io import read_markdown, write_markdown_atomic
from mdfmt.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    formatting_options,
    resolve_verbosity,
)
from mdfmt.cli.validators import validate_paths
from mdfmt.config import ConfigError, MutableConfig
from mdfmt.config.keys import ArgKey
from mdfmt.config.logging import get_logger, resolve_env_log_level, setup_logging
from mdfmt.constants import MDFMT_VERSION
from mdfmt.document.parser import parse_markdown
from mdfmt.formatter.engine import Formatter

if TYPE_CHECKING:
    from mdfmt.config import Config

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> ClickConsole:
    """Initialize logging and the console on the Click context.

    ``MDFMT_LOG_LEVEL`` takes precedence over ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.

    Returns:
        ClickConsole: The console stored under ``ctx.obj["console"]``.
    """
    ctx.obj = ctx.obj or {}

    env_level: int | None = resolve_env_log_level()
    level: int = resolve_verbosity(verbose, quiet) if env_level is None else env_level
    ctx.obj["log_level"] = level
    setup_logging(level=level, use_color=not no_color)

    console = ClickConsole(enable_color=not no_color)
    ctx.obj["console"] = console
    return console


def build_config(config_file: Path | None, overrides: dict[str, Any]) -> Config:
    """Layer defaults, the config file and CLI overrides into a frozen `Config`.

    Raises:
        MdfmtConfigError: If the config file is malformed or a value is invalid.
    """
    try:
        return MutableConfig.load_merged(config_file=config_file, overrides=overrides).freeze()
    except ConfigError as e:
        raise MdfmtConfigError(str(e)) from e


@click.command(
    name="mdfmt",
    context_settings=CONTEXT_SETTINGS,
    help="Format a markdown file and print the result (or rewrite it with --in-place).",
)
@click.argument(
    "input_file",
    type=click.Path(path_type=Path),
)
@click.option(
    "-i",
    "--in-place",
    "in_place",
    is_flag=True,
    default=False,
    help="Rewrite INPUT_FILE instead of printing to standard output.",
)
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    default=None,
    help="TOML config file. Command-line options override its values.",
)
@formatting_options
@click.option(
    "--show-config",
    "show_config",
    is_flag=True,
    default=False,
    help="Print the effective configuration as TOML and exit.",
)
@common_verbose_options
@common_color_options
@click.version_option(MDFMT_VERSION, "--version", prog_name="mdfmt")
@click.pass_context
def cli(
    ctx: click.Context,
    input_file: Path,
    in_place: bool,
    config_file: Path | None,
    line_width: int | None,
    indent_width: int | None,
    list_delim: str | None,
    show_config: bool,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the mdfmt CLI."""
    console = init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    validate_paths(input_file, config_file)

    overrides: dict[str, Any] = {
        ArgKey.LINE_WIDTH: line_width,
        ArgKey.INDENT_WIDTH: indent_width,
        ArgKey.LIST_DELIM: list_delim,
    }
    config: Config = build_config(config_file, overrides)
    logger.info("Effective config: %s", config)

    if show_config:
        console.print(config.to_toml(), nl=False)
        return

    text: str = read_markdown(input_file)
    formatted: str = Formatter(config).format(parse_markdown(text)) + "\n"

    if in_place:
        written: int = write_markdown_atomic(input_file, formatted)
        logger.info("Rewrote %s (%d bytes)", input_file, written)
    else:
        console.print(formatted, nl=False)


if __name__ == "__main__":
    cli()
