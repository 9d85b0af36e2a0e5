# topmark:header:start
#
#   project      : mdfmt
#   file         : exit_codes.py
#   file_relpath : src/mdfmt/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Exit codes for the mdfmt CLI.

mdfmt aligns with the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the mdfmt CLI.

    Attributes:
        SUCCESS: The document was formatted (and written, with ``--in-place``).
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid invocation or input path. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: The input file is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input or config path is missing or not a regular file.
            Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid or malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
