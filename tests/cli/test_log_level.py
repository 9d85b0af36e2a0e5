# topmark:header:start
#
#   project      : mdfmt
#   file         : test_log_level.py
#   file_relpath : tests/cli/test_log_level.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""CLI tests: log level resolution from ``MDFMT_LOG_LEVEL`` and ``-v``/``-q``."""

from __future__ import annotations

import logging

import click
import pytest

from tests.conftest import mark_cli
from mdfmt.cli.main import cli, init_common_state
from mdfmt.config.logging import TRACE_LEVEL, resolve_env_log_level
from mdfmt.constants import LOG_LEVEL_ENV_VAR


def _resolved_level(verbose: int = 0, quiet: int = 0) -> int:
    ctx = click.Context(cli)
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=True)
    return ctx.obj["log_level"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("0", 0), ("10", logging.DEBUG), ("trace", TRACE_LEVEL), (" Warning ", logging.WARNING)],
)
def test_env_log_level_values(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    """Names (any case) and numbers are accepted, including ``0``."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_env_log_level_unset_or_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    """An unset or unknown value yields ``None``."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
    assert resolve_env_log_level() is None


@mark_cli
def test_env_level_zero_is_honored(monkeypatch: pytest.MonkeyPatch) -> None:
    """``MDFMT_LOG_LEVEL=0`` selects NOTSET instead of the flag-derived level."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "0")
    assert _resolved_level(quiet=1) == logging.NOTSET


@mark_cli
def test_env_level_beats_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment takes precedence over ``-v``/``-q``."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
    assert _resolved_level(quiet=1) == logging.DEBUG


@mark_cli
@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_flags_without_env(verbose: int, quiet: int, expected: int) -> None:
    """Without the environment variable the counted flags decide."""
    assert _resolved_level(verbose=verbose, quiet=quiet) == expected
