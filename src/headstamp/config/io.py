"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Two sources are supported: a standalone ``headstamp.toml`` whose settings
live under a top-level ``[headstamp]`` table, and the ``[tool.headstamp]``
table of a ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from headstamp.config.logging import get_logger
from headstamp.constants import PYPROJECT_TOML_NAME
from headstamp.errors import HeadstampConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from headstamp.config.logging import HeadstampLogger

TomlTable = dict[str, Any]

logger: HeadstampLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): The TOML file.

    Returns:
        TomlTable: The parsed document, unwrapped to built-in types.

    Raises:
        HeadstampConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise HeadstampConfigError(f"Cannot read config file '{path}': {e}") from e
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise HeadstampConfigError(f"Invalid TOML in '{path}': {e}") from e
    data: TomlTable = doc.unwrap()
    logger.trace("Parsed TOML from %s: %s", path, data)
    return data


def extract_headstamp_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Headstamp settings table of a parsed config document.

    Args:
        path (Path): Where ``data`` was read from; selects the table layout.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable | None: ``[tool.headstamp]`` for ``pyproject.toml``, else
            ``[headstamp]``; ``None`` when the table is absent.

    Raises:
        HeadstampConfigError: If the table exists but is not a table.
    """
    if path.name == PYPROJECT_TOML_NAME:
        table: Any = data.get("tool", {}).get("headstamp")
        label = "[tool.headstamp]"
    else:
        table = data.get("headstamp")
        label = "[headstamp]"
    if table is None:
        logger.debug("%s section missing in %s", label, path)
        return None
    if not isinstance(table, dict):
        raise HeadstampConfigError(f"{label} in '{path}' must be a table")
    return table
