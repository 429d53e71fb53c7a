"""Exit codes for the Headstamp CLI, aligned with BSD `sysexits` where practical."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Headstamp CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, e.g. a forced replace that could not be completed.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    FILE_NOT_FOUND = 66
    IO_ERROR = 74
    CONFIG_ERROR = 78
