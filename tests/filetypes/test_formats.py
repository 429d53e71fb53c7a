"""Tests for the format table and header block rendering."""

from __future__ import annotations

import pytest

from headstamp.filetypes.formats import (
    CommentStyle,
    InsertionPolicy,
    get_document_format,
    is_java_package_line,
    is_xml_prolog_line,
    iter_document_formats,
    render_header_block,
)
from headstamp.filetypes.kinds import DocumentKind
from tests.conftest import parametrize

RECOGNIZED: list[DocumentKind] = [k for k in DocumentKind if k is not DocumentKind.UNKNOWN]


def test_table_covers_every_recognized_kind() -> None:
    """Every kind except UNKNOWN has exactly one row."""
    kinds: list[DocumentKind] = [fmt.kind for fmt in iter_document_formats()]
    assert sorted(k.value for k in kinds) == sorted(k.value for k in RECOGNIZED)


def test_unknown_has_no_format() -> None:
    """UNKNOWN is never rendered."""
    with pytest.raises(ValueError):
        get_document_format(DocumentKind.UNKNOWN)
    with pytest.raises(ValueError):
        render_header_block(DocumentKind.UNKNOWN, ["x"])


@parametrize(
    "kind, style",
    [
        (DocumentKind.JAVA, CommentStyle("/*", " * ", " */")),
        (DocumentKind.CSS, CommentStyle("/*", " * ", " */")),
        (DocumentKind.JAVASCRIPT, CommentStyle("/*", " * ", " */")),
        (DocumentKind.XML, CommentStyle("<!--", " ", "-->")),
        (DocumentKind.HTML, CommentStyle("<!--", " ", "-->")),
        (DocumentKind.APT, CommentStyle("~~", "~~ ", "~~")),
        (DocumentKind.PROPERTIES, CommentStyle("# ", "# ", "# ")),
    ],
)
def test_comment_styles(kind: DocumentKind, style: CommentStyle) -> None:
    """Comment syntax per kind."""
    assert get_document_format(kind).style == style


@parametrize(
    "kind, policy",
    [
        (DocumentKind.JAVA, InsertionPolicy.AFTER_MARKER),
        (DocumentKind.XML, InsertionPolicy.AFTER_MARKER),
        (DocumentKind.HTML, InsertionPolicy.PREPEND),
        (DocumentKind.CSS, InsertionPolicy.PREPEND),
        (DocumentKind.JAVASCRIPT, InsertionPolicy.PREPEND),
        (DocumentKind.APT, InsertionPolicy.PREPEND),
        (DocumentKind.PROPERTIES, InsertionPolicy.PREPEND),
    ],
)
def test_insertion_policies(kind: DocumentKind, policy: InsertionPolicy) -> None:
    """Placement rule per kind; only after-marker kinds carry a marker."""
    fmt = get_document_format(kind)
    assert fmt.policy is policy
    assert (fmt.marker is not None) == (policy is InsertionPolicy.AFTER_MARKER)


def test_marker_predicates() -> None:
    """Markers are plain prefix tests."""
    assert is_java_package_line("package com.example;")
    assert not is_java_package_line("  package com.example;")
    assert not is_java_package_line("packagecom.example;")
    assert not is_java_package_line("import java.io.File;")
    assert is_xml_prolog_line('<?xml version="1.0" encoding="UTF-8"?>')
    assert not is_xml_prolog_line("<?xml-stylesheet href='a.xsl'?>")
    assert not is_xml_prolog_line("<root/>")


def test_java_block() -> None:
    """Java content lines are rendered inside a slash-star block."""
    assert render_header_block(DocumentKind.JAVA, ["Copyright X", "", "Line 3"]) == [
        "/*",
        " * Copyright X",
        " * ",
        " * Line 3",
        " */",
    ]


def test_markup_block() -> None:
    """XML and HTML share the markup comment block."""
    expected: list[str] = ["<!--", " Lic", "-->"]
    assert render_header_block(DocumentKind.XML, ["Lic"]) == expected
    assert render_header_block(DocumentKind.HTML, ["Lic"]) == expected


def test_apt_and_properties_blocks() -> None:
    """Line-comment kinds prefix the open and close lines too."""
    assert render_header_block(DocumentKind.APT, ["Lic"]) == ["~~", "~~ Lic", "~~"]
    assert render_header_block(DocumentKind.PROPERTIES, ["Lic"]) == ["# ", "# Lic", "# "]


def test_empty_content_renders_delimiters_only() -> None:
    """No content lines still yields the open and close lines."""
    assert render_header_block(DocumentKind.CSS, []) == ["/*", " */"]


def test_render_accepts_iterables() -> None:
    """A generator of content lines is consumed in order."""
    block = render_header_block(DocumentKind.JAVASCRIPT, (s for s in ("a", "b")))
    assert block == ["/*", " * a", " * b", " */"]


def test_comment_style_skips_empty_delimiters() -> None:
    """Empty open/close lines are omitted."""
    style = CommentStyle("", "// ", "")
    assert style.render(["a", "b"]) == ["// a", "// b"]


def test_format_extensions() -> None:
    """Rows expose their extensions from the classification table."""
    assert get_document_format(DocumentKind.JAVA).extensions == (".java",)
    assert get_document_format(DocumentKind.PROPERTIES).extensions == (".properties",)
