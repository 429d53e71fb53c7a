"""Classification of files into document kinds.

The kind of a file is derived from its path alone: a case-sensitive suffix
match against a fixed extension table. File contents are never read.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING, Final

from headstamp.config.logging import get_logger

if TYPE_CHECKING:
    from headstamp.config.logging import HeadstampLogger

logger: HeadstampLogger = get_logger(__name__)


class DocumentKind(Enum):
    """Closed set of document kinds recognized for header insertion.

    Attributes:
        UNKNOWN: Unrecognized extension; never rendered, never written.
        JAVA: Java sources (``.java``).
        XML: XML documents and stylesheets (``.xml``, ``.xsl``).
        HTML: HTML pages (``.html``, ``.htm``).
        CSS: Cascading Style Sheets (``.css``).
        JAVASCRIPT: JavaScript sources (``.js``).
        APT: Almost Plain Text documentation (``.apt``).
        PROPERTIES: Java properties files (``.properties``).
    """

    UNKNOWN = "unknown"
    JAVA = "java"
    XML = "xml"
    HTML = "html"
    CSS = "css"
    JAVASCRIPT = "javascript"
    APT = "apt"
    PROPERTIES = "properties"


# Ordered: first matching suffix wins.
EXTENSION_TABLE: Final[tuple[tuple[str, DocumentKind], ...]] = (
    (".java", DocumentKind.JAVA),
    (".xml", DocumentKind.XML),
    (".xsl", DocumentKind.XML),
    (".html", DocumentKind.HTML),
    (".htm", DocumentKind.HTML),
    (".css", DocumentKind.CSS),
    (".js", DocumentKind.JAVASCRIPT),
    (".apt", DocumentKind.APT),
    (".properties", DocumentKind.PROPERTIES),
)


def classify(path: str | os.PathLike[str]) -> DocumentKind:
    """Return the document kind of ``path`` based on its extension.

    Args:
        path (str | os.PathLike[str]): Path to classify. It is never opened.

    Returns:
        DocumentKind: The matching kind, or ``DocumentKind.UNKNOWN``.
    """
    name: str = os.fspath(path)
    for suffix, kind in EXTENSION_TABLE:
        if name.endswith(suffix):
            logger.trace("classify(%s) -> %s", name, kind.value)
            return kind
    logger.trace("classify(%s) -> unknown", name)
    return DocumentKind.UNKNOWN


def extensions_for(kind: DocumentKind) -> tuple[str, ...]:
    """Return the extensions that classify as ``kind`` (empty for UNKNOWN)."""
    return tuple(suffix for suffix, k in EXTENSION_TABLE if k is kind)
