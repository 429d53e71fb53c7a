"""Tests for header content providers."""

from __future__ import annotations

from pathlib import Path

import pytest

from headstamp.config import MutableConfig
from headstamp.errors import HeadstampConfigError
from headstamp.headers import (
    ASF_LICENSE_LINES,
    APACHE_V2_LICENSE_LINES,
    ApacheV2Header,
    HeaderProvider,
    TemplateFileHeader,
    build_header_provider,
)


def test_asf_notice_without_copyright() -> None:
    """Without a copyright message the ASF contributor notice is used."""
    lines: list[str] = ApacheV2Header()(Path("Foo.java"))
    assert lines == list(ASF_LICENSE_LINES)
    assert lines[0].startswith("Licensed to the Apache Software Foundation")


def test_apache_notice_with_copyright() -> None:
    """A copyright line precedes the plain Apache 2.0 notice."""
    lines: list[str] = ApacheV2Header("Copyright 2025 Example Corp.")(Path("Foo.java"))
    assert lines[:2] == ["Copyright 2025 Example Corp.", ""]
    assert lines[2:] == list(APACHE_V2_LICENSE_LINES)


def test_providers_satisfy_protocol(tmp_path: Path) -> None:
    """Both providers are HeaderProvider callables."""
    assert isinstance(ApacheV2Header(), HeaderProvider)
    assert isinstance(TemplateFileHeader(tmp_path / "h.txt"), HeaderProvider)


def test_template_file_substitutes_filename(tmp_path: Path) -> None:
    """``{filename}`` is replaced with the target's name."""
    template: Path = tmp_path / "HEADER.txt"
    template.write_text("Project X\n\nFile: {filename}\n", encoding="utf-8")

    provider = TemplateFileHeader(template)

    assert provider(Path("src/Foo.java")) == ["Project X", "", "File: Foo.java"]
    assert provider(Path("web/site.css")) == ["Project X", "", "File: site.css"]


def test_template_file_is_read_once(tmp_path: Path) -> None:
    """The template is cached after the first read."""
    template: Path = tmp_path / "HEADER.txt"
    template.write_text("one\n", encoding="utf-8")
    provider = TemplateFileHeader(template)
    provider.load()

    template.write_text("two\n", encoding="utf-8")

    assert provider(Path("a.js")) == ["one"]


def test_missing_template_is_a_config_error(tmp_path: Path) -> None:
    """An unreadable template surfaces as a configuration error."""
    provider = TemplateFileHeader(tmp_path / "nope.txt")
    with pytest.raises(HeadstampConfigError):
        provider(Path("a.js"))


def test_build_header_provider_prefers_header_file(tmp_path: Path) -> None:
    """A configured header file wins over the Apache notice."""
    template: Path = tmp_path / "HEADER.txt"
    config = MutableConfig(header_file=template, copyright="ignored").freeze()

    provider = build_header_provider(config)

    assert isinstance(provider, TemplateFileHeader)
    assert provider.template_path == template


def test_build_header_provider_defaults_to_apache() -> None:
    """Without a header file the Apache notice carries the copyright message."""
    provider = build_header_provider(MutableConfig(copyright="Copyright Me").freeze())

    assert isinstance(provider, ApacheV2Header)
    assert provider.copyright == "Copyright Me"
