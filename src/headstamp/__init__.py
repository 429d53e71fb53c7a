"""Headstamp package.

Headstamp appends license headers to source and markup files. The document
kind is inferred from the file extension; it selects both the comment syntax
and where the header goes (top of file, or after a marker line such as a
Java ``package`` declaration or an XML prolog).

Typical use:

    from headstamp import ApacheV2Header, append

    append("src/Foo.java", force=True, render_header=ApacheV2Header())
"""

from __future__ import annotations

from headstamp.appender import (
    AppendReport,
    AppendResult,
    AppendStatus,
    LicenceAppender,
    append,
    insert_header,
    sibling_path,
)
from headstamp.errors import (
    AppendIOError,
    HeadstampConfigError,
    HeadstampError,
    SinkWriteError,
    SourceReadError,
)
from headstamp.filetypes import (
    CommentStyle,
    DocumentFormat,
    DocumentKind,
    InsertionPolicy,
    classify,
    get_document_format,
    iter_document_formats,
    render_header_block,
)
from headstamp.headers import ApacheV2Header, HeaderProvider, TemplateFileHeader

__all__ = [
    "AppendIOError",
    "AppendReport",
    "AppendResult",
    "AppendStatus",
    "ApacheV2Header",
    "CommentStyle",
    "DocumentFormat",
    "DocumentKind",
    "HeaderProvider",
    "HeadstampConfigError",
    "HeadstampError",
    "InsertionPolicy",
    "LicenceAppender",
    "SinkWriteError",
    "SourceReadError",
    "TemplateFileHeader",
    "append",
    "classify",
    "get_document_format",
    "insert_header",
    "iter_document_formats",
    "render_header_block",
    "sibling_path",
]
