# topmark:header:start
#
#   project      : TabPrint
#   file         : exit_codes.py
#   file_relpath : src/tabprint/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for TabPrint CLI.

TabPrint follows the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for TabPrint CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        INPUT_ERROR: Malformed input records (bad JSON/CSV, undecodable text).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        RENDER_ERROR: Internal rendering failure (width invariant violated).
            Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading input or writing output. Mirrors BSD
            ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    INPUT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    RENDER_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
