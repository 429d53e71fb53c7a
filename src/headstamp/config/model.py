"""Configuration model: immutable `Config` and its `MutableConfig` builder.

Values are collected from config files and CLI overrides into a
`MutableConfig`, merged with last-wins precedence, then frozen into a
`Config` snapshot for processing. Use `Config.thaw` to get an editable copy.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from headstamp.config.io import extract_headstamp_table, load_toml_dict
from headstamp.config.logging import get_logger
from headstamp.constants import (
    DEFAULT_ENCODING,
    HEADSTAMP_TOML_NAME,
    NEW_FILE_SUFFIX,
    PYPROJECT_TOML_NAME,
)
from headstamp.errors import HeadstampConfigError

if TYPE_CHECKING:
    from headstamp.config.io import TomlTable
    from headstamp.config.logging import HeadstampLogger

logger: HeadstampLogger = get_logger(__name__)

KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {"force", "encoding", "suffix", "copyright", "header_file", "include", "exclude"}
)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        force (bool): Replace originals in place instead of leaving siblings.
        encoding (str): Text encoding for reading and writing files.
        suffix (str): Suffix of the sibling artifacts.
        copyright (str | None): Copyright message for the Apache 2.0 header.
        header_file (Path | None): Template file providing the header text.
        include_patterns (tuple[str, ...]): Gitignore-style patterns; when set,
            only matching files are processed.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns of files to skip.
        config_files (tuple[Path, ...]): Config files that contributed values.
    """

    force: bool = False
    encoding: str = DEFAULT_ENCODING
    suffix: str = NEW_FILE_SUFFIX
    copyright: str | None = None
    header_file: Path | None = None
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            force=self.force,
            encoding=self.encoding,
            suffix=self.suffix,
            copyright=self.copyright,
            header_file=self.header_file,
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while loading and merging.

    Fields left as ``None`` are "unset" and inherit from the layer below when
    merged; `freeze` fills remaining gaps with defaults.
    """

    force: bool | None = None
    encoding: str | None = None
    suffix: str | None = None
    copyright: str | None = None
    header_file: Path | None = None
    include_patterns: list[str] = field(default_factory=list)
    exclude_patterns: list[str] = field(default_factory=list)
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Raises:
            HeadstampConfigError: If the sibling suffix is empty or the encoding
                is not a known codec.
        """
        suffix: str = self.suffix if self.suffix is not None else NEW_FILE_SUFFIX
        if not suffix:
            raise HeadstampConfigError("'suffix' must not be empty")
        encoding: str = self.encoding or DEFAULT_ENCODING
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise HeadstampConfigError(f"Unknown encoding: '{encoding}'") from e
        return Config(
            force=bool(self.force),
            encoding=encoding,
            suffix=suffix,
            copyright=self.copyright,
            header_file=self.header_file,
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            force=other.force if other.force is not None else self.force,
            encoding=other.encoding if other.encoding is not None else self.encoding,
            suffix=other.suffix if other.suffix is not None else self.suffix,
            copyright=other.copyright if other.copyright is not None else self.copyright,
            header_file=other.header_file if other.header_file is not None else self.header_file,
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            config_files=self.config_files + other.config_files,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, base: Path | None = None) -> MutableConfig:
        """Build a draft from a Headstamp settings table.

        Relative ``header_file`` values are resolved against ``base``
        (the directory of the declaring config file).

        Args:
            data (TomlTable): The ``[headstamp]`` / ``[tool.headstamp]`` table.
            base (Path | None): Directory to resolve relative paths against.

        Returns:
            MutableConfig: The populated draft.

        Raises:
            HeadstampConfigError: If a value has the wrong type.
        """
        for key in data:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown config key: %s", key)

        draft = cls(
            force=_get_typed(data, "force", bool),
            encoding=_get_typed(data, "encoding", str),
            suffix=_get_typed(data, "suffix", str),
            copyright=_get_typed(data, "copyright", str),
            include_patterns=_get_str_list(data, "include"),
            exclude_patterns=_get_str_list(data, "exclude"),
        )
        header_file: str | None = _get_typed(data, "header_file", str)
        if header_file is not None:
            p = Path(header_file)
            if not p.is_absolute() and base is not None:
                p = base / p
            draft.header_file = p
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from a ``headstamp.toml`` or ``pyproject.toml`` file.

        Args:
            path (Path): The config file.

        Returns:
            MutableConfig | None: The draft, or ``None`` if the file has no
                Headstamp table.
        """
        logger.debug("Loading config from %s", path)
        table: TomlTable | None = extract_headstamp_table(path, load_toml_dict(path))
        if table is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(table, base=path.parent.resolve())
        draft.config_files = [path]
        return draft

    @classmethod
    def discover(cls, start: Path) -> MutableConfig:
        """Load the config found in ``start`` (a directory), if any.

        In one directory ``pyproject.toml`` is read first and ``headstamp.toml``
        second, so the latter wins on conflicts.
        """
        draft = cls()
        for name in (PYPROJECT_TOML_NAME, HEADSTAMP_TOML_NAME):
            candidate: Path = start / name
            if not candidate.is_file():
                continue
            found: MutableConfig | None = cls.from_toml_file(candidate)
            if found is not None:
                draft = draft.merge_with(found)
        return draft


def _get_typed(data: TomlTable, key: str, expected: type) -> Any:
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, expected):
        raise HeadstampConfigError(
            f"Config key '{key}' must be of type {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _get_str_list(data: TomlTable, key: str) -> list[str]:
    value: Any = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise HeadstampConfigError(f"Config key '{key}' must be a list of strings")
    return list(value)
