# topmark:header:start
#
#   project      : mdfmt
#   file         : io.py
#   file_relpath : src/mdfmt/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""File input/output for the CLI.

Reading is strict UTF-8. In-place writes go through a temporary file in the
target's directory followed by `os.replace`, so an interrupted run never leaves
a truncated document behind.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from mdfmt.cli.errors import MdfmtEncodingError, MdfmtIOError
from mdfmt.config.logging import get_logger

logger = get_logger(__name__)


def read_markdown(path: Path) -> str:
    """Read ``path`` as UTF-8 text.

    Raises:
        MdfmtEncodingError: If the file is not valid UTF-8.
        MdfmtIOError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MdfmtEncodingError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise MdfmtIOError(f"Cannot read {path}: {e.strerror or e}") from e


def write_markdown_atomic(path: Path, text: str) -> int:
    """Replace the contents of ``path`` with ``text``.

    Returns:
        int: Number of UTF-8 bytes written.

    Raises:
        MdfmtIOError: If the file cannot be written.
    """
    data: bytes = text.encode("utf-8")
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".mdfmt",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
        # Keep the permissions of the file being replaced
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise MdfmtIOError(f"Cannot write {path}: {e.strerror or e}") from e

    logger.debug("Wrote %d bytes to file %s", len(data), path)
    return len(data)
