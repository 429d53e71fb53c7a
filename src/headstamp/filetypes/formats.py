"""Format table: comment style and insertion policy per document kind.

Each recognized `DocumentKind` maps to one `DocumentFormat` row describing
how a header block is rendered (`CommentStyle`) and where it goes
(`InsertionPolicy`, plus a marker predicate for after-marker kinds).

Layout example (Java):

    package com.example;
    /*
     * Licensed to ...
     */
    class Foo {}

`DocumentKind.UNKNOWN` has no row and is never rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from headstamp.config.logging import get_logger
from headstamp.filetypes.kinds import DocumentKind, extensions_for

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from headstamp.config.logging import HeadstampLogger

logger: HeadstampLogger = get_logger(__name__)


class InsertionPolicy(Enum):
    """Where the header block is placed within a document.

    Attributes:
        PREPEND: Before the first line of the file.
        AFTER_MARKER: Immediately after the first line accepted by the kind's
            marker predicate. No insertion when no line matches.
    """

    PREPEND = "prepend"
    AFTER_MARKER = "after_marker"


@dataclass(frozen=True)
class CommentStyle:
    """Three-part comment syntax used to render a header block.

    Attributes:
        open_line (str): Line emitted before the content lines (skipped when empty).
        line_prefix (str): Prefix applied to every content line.
        close_line (str): Line emitted after the content lines (skipped when empty).
    """

    open_line: str
    line_prefix: str
    close_line: str

    def render(self, content_lines: Iterable[str]) -> list[str]:
        """Render ``content_lines`` as a comment block without line terminators."""
        block: list[str] = []
        if self.open_line:
            block.append(self.open_line)
        block.extend(f"{self.line_prefix}{line}" for line in content_lines)
        if self.close_line:
            block.append(self.close_line)
        return block


@dataclass(frozen=True)
class DocumentFormat:
    """Row of the format table for one document kind.

    Attributes:
        kind (DocumentKind): The document kind this row describes.
        style (CommentStyle): Comment syntax for the header block.
        policy (InsertionPolicy): Placement rule for the header block.
        marker (Callable[[str], bool] | None): Predicate selecting the line after
            which the header is inserted; only set for ``AFTER_MARKER`` kinds.
        description (str): Human-readable description.
    """

    kind: DocumentKind
    style: CommentStyle
    policy: InsertionPolicy
    marker: Callable[[str], bool] | None
    description: str

    @property
    def extensions(self) -> tuple[str, ...]:
        """Extensions classified as this kind."""
        return extensions_for(self.kind)

    def is_marker(self, line: str) -> bool:
        """Return True if ``line`` is the insertion marker for this format."""
        return self.marker is not None and self.marker(line)


def is_java_package_line(line: str) -> bool:
    """Return True for a Java ``package`` declaration line."""
    return line.startswith("package ")


def is_xml_prolog_line(line: str) -> bool:
    """Return True for an XML prolog line (``<?xml ...?>``)."""
    return line.startswith("<?xml ")


SLASH_STAR_STYLE: Final[CommentStyle] = CommentStyle("/*", " * ", " */")
MARKUP_STYLE: Final[CommentStyle] = CommentStyle("<!--", " ", "-->")
APT_STYLE: Final[CommentStyle] = CommentStyle("~~", "~~ ", "~~")
PROPERTIES_STYLE: Final[CommentStyle] = CommentStyle("# ", "# ", "# ")

MARKERS: Final[dict[DocumentKind, Callable[[str], bool]]] = {
    DocumentKind.JAVA: is_java_package_line,
    DocumentKind.XML: is_xml_prolog_line,
}


def _row(
    kind: DocumentKind,
    style: CommentStyle,
    description: str,
) -> DocumentFormat:
    marker: Callable[[str], bool] | None = MARKERS.get(kind)
    policy = InsertionPolicy.PREPEND if marker is None else InsertionPolicy.AFTER_MARKER
    return DocumentFormat(
        kind=kind,
        style=style,
        policy=policy,
        marker=marker,
        description=description,
    )


FORMAT_TABLE: Final[dict[DocumentKind, DocumentFormat]] = {
    row.kind: row
    for row in (
        _row(DocumentKind.JAVA, SLASH_STAR_STYLE, "Java sources"),
        _row(DocumentKind.XML, MARKUP_STYLE, "XML documents and XSL stylesheets"),
        _row(DocumentKind.HTML, MARKUP_STYLE, "HyperText Markup Language (HTML)"),
        _row(DocumentKind.CSS, SLASH_STAR_STYLE, "Cascading Style Sheets (CSS)"),
        _row(DocumentKind.JAVASCRIPT, SLASH_STAR_STYLE, "JavaScript sources"),
        _row(DocumentKind.APT, APT_STYLE, "Almost Plain Text (APT) documentation"),
        _row(DocumentKind.PROPERTIES, PROPERTIES_STYLE, "Java properties files"),
    )
}


def get_document_format(kind: DocumentKind) -> DocumentFormat:
    """Return the format table row for ``kind``.

    Args:
        kind (DocumentKind): A recognized document kind.

    Returns:
        DocumentFormat: The matching row.

    Raises:
        ValueError: If ``kind`` is ``DocumentKind.UNKNOWN``.
    """
    try:
        return FORMAT_TABLE[kind]
    except KeyError:
        raise ValueError(f"No header format for document kind: {kind.value}") from None


def iter_document_formats() -> Iterator[DocumentFormat]:
    """Iterate over the format table in declaration order."""
    yield from FORMAT_TABLE.values()


def render_header_block(kind: DocumentKind, content_lines: Iterable[str]) -> list[str]:
    """Render header content lines using the comment syntax of ``kind``.

    Produces the open line (if non-empty), every content line with the
    kind's prefix applied, and the close line (if non-empty). Returned lines
    carry no line terminator.

    Args:
        kind (DocumentKind): A recognized document kind.
        content_lines (Iterable[str]): Raw header text, one entry per line.

    Returns:
        list[str]: The rendered header block.

    Raises:
        ValueError: If ``kind`` is ``DocumentKind.UNKNOWN``.
    """
    block: list[str] = get_document_format(kind).style.render(content_lines)
    logger.trace("Rendered %d header line(s) for %s", len(block), kind.value)
    return block
