# topmark:header:start
#
#   project      : SpaceMark
#   file         : exit_codes.py
#   file_relpath : src/spacemark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SpaceMark CLI.

SpaceMark aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SpaceMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        INPUT_ERROR: The input is not a well-formed template tree (bad JSON,
            unknown node type, missing field). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: Internal pipeline failure (step contract violation).
            Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    INPUT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE (internal error)
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
