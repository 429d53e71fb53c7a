"""Pytest configuration for the Headstamp test suite.

Sets up typed marker helpers, keeps the environment from forcing a log
level, and provides small file helpers shared across test modules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from headstamp.config import logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_headstamp_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures come with full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_lines(path: Path, lines: Sequence[str], newline: str = "\n") -> Path:
    """Write ``lines`` to ``path``, each terminated by ``newline``; return ``path``."""
    path.write_bytes("".join(f"{line}{newline}" for line in lines).encode("utf-8"))
    return path


def read_lines(path: Path) -> list[str]:
    """Read ``path`` and return its lines, asserting every line ends with ``\\n``."""
    text: str = path.read_bytes().decode("utf-8")
    assert "\r" not in text
    if not text:
        return []
    assert text.endswith("\n")
    return text[:-1].split("\n")


def fixed_header(*lines: str) -> Callable[[Path], list[str]]:
    """Return a header provider yielding ``lines`` for every path."""

    def _render(path: Path) -> list[str]:
        return list(lines)

    return _render
