"""Header content providers.

A provider is any callable taking the target path and returning the raw
header content lines. Comment syntax is applied later by the formatter, so
providers return plain text only.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from headstamp.config.logging import get_logger
from headstamp.errors import HeadstampConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from headstamp.config.logging import HeadstampLogger
    from headstamp.config.model import Config

logger: HeadstampLogger = get_logger(__name__)


@runtime_checkable
class HeaderProvider(Protocol):
    """Callable returning the header content lines for a target file."""

    def __call__(self, path: Path) -> Sequence[str]:
        """Return the raw header lines for ``path`` (no comment syntax)."""
        ...


ASF_LICENSE_LINES: Final[tuple[str, ...]] = (
    "Licensed to the Apache Software Foundation (ASF) under one",
    "or more contributor license agreements.  See the NOTICE file",
    "distributed with this work for additional information",
    "regarding copyright ownership.  The ASF licenses this file",
    "to you under the Apache License, Version 2.0 (the",
    '"License"); you may not use this file except in compliance',
    "with the License.  You may obtain a copy of the License at",
    "",
    "  http://www.apache.org/licenses/LICENSE-2.0",
    "",
    "Unless required by applicable law or agreed to in writing,",
    "software distributed under the License is distributed on an",
    '"AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY',
    "KIND, either express or implied.  See the License for the",
    "specific language governing permissions and limitations",
    "under the License.",
)

APACHE_V2_LICENSE_LINES: Final[tuple[str, ...]] = (
    'Licensed under the Apache License, Version 2.0 (the "License");',
    "you may not use this file except in compliance with the License.",
    "You may obtain a copy of the License at",
    "",
    "  http://www.apache.org/licenses/LICENSE-2.0",
    "",
    "Unless required by applicable law or agreed to in writing, software",
    'distributed under the License is distributed on an "AS IS" BASIS,',
    "WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.",
    "See the License for the specific language governing permissions and",
    "limitations under the License.",
)


class ApacheV2Header:
    """Apache License 2.0 notice.

    Without a copyright message the ASF contributor notice is produced. With
    one, the copyright line is followed by a blank line and the plain
    Apache License 2.0 notice.

    Args:
        copyright (str | None): Optional copyright message, e.g.
            ``"Copyright 2025 Example Corp."``.
    """

    def __init__(self, copyright: str | None = None) -> None:  # noqa: A002
        self.copyright = copyright

    def __call__(self, path: Path) -> list[str]:
        """Return the notice lines; ``path`` is not used."""
        if self.copyright is None:
            return list(ASF_LICENSE_LINES)
        return [self.copyright, "", *APACHE_V2_LICENSE_LINES]

    def __repr__(self) -> str:
        return f"ApacheV2Header(copyright={self.copyright!r})"


class TemplateFileHeader:
    """Header text read from a UTF-8 template file.

    The placeholder ``{filename}`` is replaced with the target file name. The
    template is read once, on first use.

    Args:
        template_path (Path): The template file.
    """

    PLACEHOLDER: Final[str] = "{filename}"

    def __init__(self, template_path: Path) -> None:
        self.template_path = template_path
        self._lines: list[str] | None = None

    def load(self) -> list[str]:
        """Read and cache the template lines.

        Raises:
            HeadstampConfigError: If the template cannot be read.
        """
        if self._lines is None:
            try:
                text: str = self.template_path.read_text(encoding="utf-8")
            except OSError as e:
                raise HeadstampConfigError(
                    f"Cannot read header template '{self.template_path}': {e}"
                ) from e
            self._lines = text.splitlines()
            logger.debug(
                "Loaded %d header line(s) from %s", len(self._lines), self.template_path
            )
        return self._lines

    def __call__(self, path: Path) -> list[str]:
        """Return the template lines with ``{filename}`` substituted."""
        return [line.replace(self.PLACEHOLDER, path.name) for line in self.load()]

    def __repr__(self) -> str:
        return f"TemplateFileHeader({str(self.template_path)!r})"


def build_header_provider(config: Config) -> HeaderProvider:
    """Select a header provider from configuration.

    A configured ``header_file`` wins; otherwise the Apache License 2.0
    notice is used, with the configured copyright message if any.

    Args:
        config (Config): The effective configuration.

    Returns:
        HeaderProvider: The selected provider.
    """
    if config.header_file is not None:
        if config.copyright is not None:
            logger.warning("Ignoring copyright message: a header file is configured")
        return TemplateFileHeader(config.header_file)
    return ApacheV2Header(config.copyright)
