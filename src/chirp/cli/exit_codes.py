# topmark:header:start
#
#   project      : Chirp
#   file         : exit_codes.py
#   file_relpath : src/chirp/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Chirp CLI.

Chirp aligns with the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Chirp CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (conflicting options).
            Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: The output stream rejected a write or flush. Mirrors BSD
            ``EX_IOERR (74)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR

    UNEXPECTED_ERROR = 255
