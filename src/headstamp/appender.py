"""Insertion engine: stream a file into a sibling artifact with a header block.

The engine makes a single forward pass over the source lines:

1. The path is classified; unknown kinds return immediately without touching
   the filesystem.
2. The source is opened for reading, then the sibling sink (``path + ".new"``).
3. For ``PREPEND`` kinds the rendered header block is written first.
4. Source lines are copied one by one, each terminated by a single ``\\n``
   whatever its original terminator was.
5. For ``AFTER_MARKER`` kinds the header block follows the first marker line.
   It is inserted at most once.
6. In forced mode the sink then replaces the original file. A failed replace
   is reported and leaves the original untouched.

No attempt is made to detect an existing header: appending twice yields two
headers.
"""

from __future__ import annotations

import os
import sys
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from headstamp.config.logging import get_logger
from headstamp.constants import DEFAULT_ENCODING, NEW_FILE_SUFFIX
from headstamp.errors import AppendIOError, SinkWriteError, SourceReadError
from headstamp.filetypes.formats import (
    DocumentFormat,
    InsertionPolicy,
    get_document_format,
    render_header_block,
)
from headstamp.filetypes.kinds import DocumentKind, classify

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Sequence
    from typing import IO

    from headstamp.config.logging import HeadstampLogger

    HeaderRenderer = Callable[[Path], Sequence[str]]

logger: HeadstampLogger = get_logger(__name__)


class AppendStatus(Enum):
    """Outcome of appending a header to a single file.

    Attributes:
        SKIPPED_UNKNOWN: Unrecognized document kind; nothing was read or written.
        WRITTEN: The transformed content was left in the sibling artifact and
            the original file is untouched.
        REPLACED: Forced mode; the transformed content replaced the original.
        REPLACE_FAILED: Forced mode; the sibling artifact was written but could
            not replace the original, which is unchanged.
    """

    SKIPPED_UNKNOWN = "skipped_unknown"
    WRITTEN = "written"
    REPLACED = "replaced"
    REPLACE_FAILED = "replace_failed"


@dataclass
class AppendResult:
    """Structured result of a single `append` call.

    Attributes:
        path (Path): The processed file.
        kind (DocumentKind): Its classified document kind.
        status (AppendStatus): What happened to the file.
        output_path (Path | None): Where the transformed content lives now, or
            ``None`` when nothing was written.
        inserted (bool): Whether a header block was actually written. This is
            ``False`` for after-marker kinds whose marker never appeared.
        message (str): Human-readable diagnostic for ``REPLACE_FAILED``.
    """

    path: Path
    kind: DocumentKind
    status: AppendStatus
    output_path: Path | None = None
    inserted: bool = False
    message: str = ""


@dataclass
class AppendReport:
    """Aggregated results of a batch run (see `LicenceAppender.append_all`)."""

    results: list[AppendResult] = field(default_factory=list)
    errors: list[AppendIOError] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """True if any file raised a read or write error."""
        return bool(self.errors)

    @property
    def replace_failed(self) -> bool:
        """True if any forced replace could not be completed."""
        return any(r.status == AppendStatus.REPLACE_FAILED for r in self.results)

    def counts(self) -> Counter[AppendStatus]:
        """Return the number of results per status."""
        return Counter(r.status for r in self.results)


def sibling_path(path: Path, suffix: str = NEW_FILE_SUFFIX) -> Path:
    """Return the sibling artifact path for ``path`` (``<path><suffix>``)."""
    return path.with_name(path.name + suffix)


def insert_header(
    lines: Iterable[str],
    fmt: DocumentFormat,
    header_block: Sequence[str],
) -> Iterator[str]:
    """Yield ``lines`` with ``header_block`` inserted according to ``fmt``.

    Lines are yielded without terminators. For ``AFTER_MARKER`` formats the
    block follows the first line accepted by the marker predicate only.

    Args:
        lines (Iterable[str]): Source lines, without terminators.
        fmt (DocumentFormat): Format table row of the document.
        header_block (Sequence[str]): Rendered header block.

    Yields:
        str: Output lines, without terminators.
    """
    pending: bool = True
    if fmt.policy == InsertionPolicy.PREPEND:
        yield from header_block
        pending = False
    for line in lines:
        yield line
        if pending and fmt.is_marker(line):
            logger.debug("Marker found for %s: %r", fmt.kind.value, line)
            yield from header_block
            pending = False


def _read_lines(src: IO[str], path: Path) -> Iterator[str]:
    """Yield lines from ``src`` with their terminator removed."""
    try:
        for raw in src:
            yield raw[:-1] if raw.endswith("\n") else raw
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, f"Cannot read '{path}': {e}") from e


def _copy(
    src: IO[str],
    dst: IO[str],
    path: Path,
    sink: Path,
    fmt: DocumentFormat,
    header_block: Sequence[str],
) -> bool:
    """Stream ``src`` into ``dst`` inserting the header; return True if inserted."""
    read_count: int = 0
    written_count: int = 0

    def _counted(lines: Iterator[str]) -> Iterator[str]:
        nonlocal read_count
        for line in lines:
            read_count += 1
            yield line

    for line in insert_header(_counted(_read_lines(src, path)), fmt, header_block):
        try:
            dst.write(line + "\n")
        except OSError as e:
            raise SinkWriteError(sink, f"Cannot write '{sink}': {e}") from e
        written_count += 1
    logger.trace("Copied %d line(s) from %s into %s", read_count, path, sink)
    return written_count > read_count


def _discard(sink: Path) -> None:
    """Remove a partially written sink, logging (not raising) on failure."""
    try:
        sink.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove partial output '%s': %s", sink, e)


def _replace(path: Path, sink: Path) -> str | None:
    """Move ``sink`` over ``path``; return a diagnostic on failure, else None."""
    try:
        os.replace(sink, path)
    except OSError as e:
        message = (
            f"Failed to rename '{sink}' to '{path}' ({e}); original file remains unchanged."
        )
        logger.error("%s", message)
        print(message, file=sys.stderr)  # noqa: T201 (diagnostic channel for replace failures)
        return message
    return None


def append(
    path: str | os.PathLike[str],
    force: bool = False,
    *,
    render_header: HeaderRenderer,
    encoding: str = DEFAULT_ENCODING,
    suffix: str = NEW_FILE_SUFFIX,
) -> AppendResult:
    """Append a rendered header block to the file at ``path``.

    Args:
        path (str | os.PathLike[str]): File to process. Must exist and be readable
            unless its kind is unknown.
        force (bool): Replace the original with the transformed content. When
            ``False`` the result is left in the sibling artifact only.
        render_header (HeaderRenderer): Returns the raw header content lines for
            the target path.
        encoding (str): Text encoding used to read the source and write the sink.
        suffix (str): Suffix of the sibling artifact.

    Returns:
        AppendResult: What happened to the file.

    Raises:
        SourceReadError: The source could not be opened, read, or decoded
            (an unknown ``encoding`` counts as a decoding failure).
        SinkWriteError: The sibling artifact could not be opened or written.
        ValueError: ``suffix`` is empty, so the sibling would be the source itself.
    """
    file_path = Path(path)
    if not suffix:
        raise ValueError("suffix must not be empty")
    kind: DocumentKind = classify(file_path)
    if kind == DocumentKind.UNKNOWN:
        logger.debug("Skipping %s: unknown document kind", file_path)
        return AppendResult(path=file_path, kind=kind, status=AppendStatus.SKIPPED_UNKNOWN)

    fmt: DocumentFormat = get_document_format(kind)
    header_block: list[str] = render_header_block(kind, render_header(file_path))
    sink: Path = sibling_path(file_path, suffix)

    try:
        src: IO[str] = open(file_path, encoding=encoding, newline=None)  # noqa: SIM115
    except (OSError, LookupError) as e:
        raise SourceReadError(file_path, f"Cannot open '{file_path}': {e}") from e

    with src:
        try:
            dst: IO[str] = open(sink, "w", encoding=encoding, newline="\n")  # noqa: SIM115
        except OSError as e:
            raise SinkWriteError(sink, f"Cannot create '{sink}': {e}") from e
        try:
            with dst:
                inserted: bool = _copy(src, dst, file_path, sink, fmt, header_block)
        except OSError as e:
            # Raised while flushing/closing the sink.
            _discard(sink)
            raise SinkWriteError(sink, f"Cannot write '{sink}': {e}") from e
        except AppendIOError:
            _discard(sink)
            raise

    if not inserted:
        logger.info("No insertion point found in %s (%s)", file_path, kind.value)
    logger.debug("Wrote %s (header inserted: %s)", sink, inserted)

    if not force:
        return AppendResult(
            path=file_path,
            kind=kind,
            status=AppendStatus.WRITTEN,
            output_path=sink,
            inserted=inserted,
        )

    message: str | None = _replace(file_path, sink)
    if message is not None:
        return AppendResult(
            path=file_path,
            kind=kind,
            status=AppendStatus.REPLACE_FAILED,
            output_path=sink,
            inserted=inserted,
            message=message,
        )
    logger.info("Replaced %s", file_path)
    return AppendResult(
        path=file_path,
        kind=kind,
        status=AppendStatus.REPLACED,
        output_path=file_path,
        inserted=inserted,
    )


class LicenceAppender:
    """Append headers from one provider with fixed output settings.

    Args:
        render_header (HeaderRenderer): Provider of the raw header content lines.
        force (bool): Replace originals in place instead of leaving siblings.
        encoding (str): Text encoding for reading and writing.
        suffix (str): Suffix of the sibling artifacts.
    """

    def __init__(
        self,
        render_header: HeaderRenderer,
        *,
        force: bool = False,
        encoding: str = DEFAULT_ENCODING,
        suffix: str = NEW_FILE_SUFFIX,
    ) -> None:
        if not suffix:
            raise ValueError("suffix must not be empty")
        self.render_header = render_header
        self.force = force
        self.encoding = encoding
        self.suffix = suffix

    def append(self, path: str | os.PathLike[str]) -> AppendResult:
        """Append the header to a single file (see module-level `append`)."""
        return append(
            path,
            self.force,
            render_header=self.render_header,
            encoding=self.encoding,
            suffix=self.suffix,
        )

    def append_all(self, paths: Iterable[str | os.PathLike[str]]) -> AppendReport:
        """Append the header to each of ``paths``.

        Read/write failures are logged and collected in the report; they do not
        stop the remaining files from being processed.
        """
        report = AppendReport()
        for path in paths:
            try:
                report.results.append(self.append(path))
            except AppendIOError as e:
                logger.error("%s", e)
                report.errors.append(e)
        return report
