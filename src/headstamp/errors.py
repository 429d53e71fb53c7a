"""Exceptions raised by the Headstamp library.

An unrecognized document kind is not an error (see `AppendStatus`), and
neither is a failed in-place replace: both are reported through
`AppendResult`. Read and write failures abort the operation for one file
and propagate as `AppendIOError` subclasses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class HeadstampError(Exception):
    """Base class for all Headstamp errors."""


class HeadstampConfigError(HeadstampError):
    """Configuration is missing, malformed, or has values of the wrong type."""


class AppendIOError(HeadstampError):
    """I/O failure while appending a header to a single file.

    Attributes:
        path (Path): The file being processed.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class SourceReadError(AppendIOError):
    """The source file could not be opened, read, or decoded."""


class SinkWriteError(AppendIOError):
    """The sibling output file could not be opened or written."""
