# topmark:header:start
#
#   project      : mdfmt
#   file         : __main__.py
#   file_relpath : src/mdfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Module entry point for running mdfmt via ``python -m mdfmt``.

It delegates directly to `mdfmt.cli.main.cli`, so the module interface and the
``mdfmt`` console script behave identically.

Examples:
    Format a file and print the result::

        python -m mdfmt README.md
"""

from __future__ import annotations

from mdfmt.cli.main import cli

if __name__ == "__main__":
    cli()
