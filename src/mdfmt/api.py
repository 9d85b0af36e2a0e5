# topmark:header:start
#
#   project      : mdfmt
#   file         : api.py
#   file_relpath : src/mdfmt/api.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Public, typed API for formatting markdown from Python code.

Examples:
    ```python
    from mdfmt.api import format_text
    from mdfmt.config import MutableConfig

    config = MutableConfig(line_width=60).freeze()
    print(format_text("# Title\\n\\nSome   text.", config))
    ```

The API never writes files; the CLI owns output transport.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdfmt.config import Config
from mdfmt.config.logging import get_logger
from mdfmt.document.parser import parse_markdown
from mdfmt.formatter.engine import Formatter

if TYPE_CHECKING:
    from pathlib import Path

    from mdfmt.config.logging import MdfmtLogger

logger: MdfmtLogger = get_logger(__name__)


def format_text(text: str, config: Config | None = None) -> str:
    """Parse and format markdown ``text``.

    Args:
        text (str): Markdown source.
        config (Config | None): Formatting configuration; defaults to `Config()`.

    Returns:
        str: The formatted document, without a trailing newline.
    """
    tree = parse_markdown(text)
    return Formatter(config or Config()).format(tree)


def format_file(path: Path, config: Config | None = None) -> str:
    """Read a UTF-8 markdown file and return its formatted text.

    Args:
        path (Path): File to read.
        config (Config | None): Formatting configuration; defaults to `Config()`.

    Returns:
        str: The formatted document, without a trailing newline.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    logger.debug("Formatting %s", path)
    text: str = path.read_text(encoding="utf-8")
    return format_text(text, config)
