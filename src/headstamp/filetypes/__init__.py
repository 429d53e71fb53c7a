"""Document kinds, their comment styles, and insertion policies."""

from __future__ import annotations

from headstamp.filetypes.formats import (
    CommentStyle,
    DocumentFormat,
    InsertionPolicy,
    get_document_format,
    iter_document_formats,
    render_header_block,
)
from headstamp.filetypes.kinds import DocumentKind, classify

__all__ = [
    "CommentStyle",
    "DocumentFormat",
    "DocumentKind",
    "InsertionPolicy",
    "classify",
    "get_document_format",
    "iter_document_formats",
    "render_header_block",
]
