"""Headstamp Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

HEADSTAMP_VERSION: str = get_version("headstamp")

# Suffix of the sibling artifact written next to each processed file.
NEW_FILE_SUFFIX: str = ".new"

DEFAULT_ENCODING: str = "utf-8"

# Standalone config file (top-level [headstamp] table) and pyproject.toml table.
HEADSTAMP_TOML_NAME: str = "headstamp.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
