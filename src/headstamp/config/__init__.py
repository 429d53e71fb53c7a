"""Configuration for Headstamp: immutable `Config` and mutable builder."""

from __future__ import annotations

from headstamp.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
