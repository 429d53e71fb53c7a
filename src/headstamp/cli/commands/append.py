"""Headstamp `append` command.

Resolves the files to process, then appends the configured license header
to each of them. Without ``--force`` every file gets a ``.new`` sibling and
originals are untouched; with ``--force`` originals are replaced.

Configuration layering (last wins): ``pyproject.toml`` ``[tool.headstamp]``
and ``headstamp.toml`` in the working directory, an explicit ``--config``
file, then CLI flags.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from headstamp.appender import AppendStatus, LicenceAppender
from headstamp.cli.errors import (
    HeadstampCliConfigError,
    HeadstampCliError,
    HeadstampFileNotFoundError,
    HeadstampIOError,
)
from headstamp.cli.options import common_filtering_options
from headstamp.config import MutableConfig
from headstamp.config.logging import get_logger
from headstamp.errors import HeadstampConfigError
from headstamp.file_resolver import resolve_file_list
from headstamp.headers import TemplateFileHeader, build_header_provider

if TYPE_CHECKING:
    from headstamp.appender import AppendReport, AppendResult
    from headstamp.cli.console import ClickConsole
    from headstamp.config import Config
    from headstamp.config.logging import HeadstampLogger
    from headstamp.headers import HeaderProvider

logger: HeadstampLogger = get_logger(__name__)

_STATUS_LABELS: dict[AppendStatus, str] = {
    AppendStatus.WRITTEN: "written",
    AppendStatus.REPLACED: "replaced",
    AppendStatus.REPLACE_FAILED: "replace failed",
    AppendStatus.SKIPPED_UNKNOWN: "skipped",
}


def build_config(
    *,
    config_file: Path | None,
    force: bool,
    copyright_message: str | None,
    header_file: Path | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
) -> Config:
    """Merge discovered config, an explicit config file, and CLI overrides.

    Raises:
        HeadstampCliConfigError: If a config source is invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.discover(Path.cwd())
        if config_file is not None:
            explicit: MutableConfig | None = MutableConfig.from_toml_file(config_file)
            if explicit is None:
                raise HeadstampCliConfigError(f"No Headstamp settings found in '{config_file}'")
            draft = draft.merge_with(explicit)
        overrides = MutableConfig(
            force=True if force else None,
            copyright=copyright_message,
            header_file=header_file,
            include_patterns=list(include_patterns),
            exclude_patterns=list(exclude_patterns),
        )
        return draft.merge_with(overrides).freeze()
    except HeadstampConfigError as e:
        raise HeadstampCliConfigError(str(e)) from e


def _report_file(console: ClickConsole, result: AppendResult) -> None:
    label: str = _STATUS_LABELS[result.status]
    if not result.inserted:
        label += " (no insertion point)"
    console.print(f"{result.path}: {label}")


@click.command(
    name="append",
    help=(
        "Append a license header to each file in PATHS (files, directories, or globs). "
        "Without --force, results are written to '<file>.new' siblings."
    ),
)
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Replace the original files instead of writing '.new' siblings.",
)
@click.option(
    "--copyright",
    "copyright_message",
    type=str,
    default=None,
    help="Copyright message placed above the Apache License 2.0 notice.",
)
@click.option(
    "--header-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the header text from this file instead of the Apache notice.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Additional TOML config file (headstamp.toml or pyproject.toml).",
)
@common_filtering_options
@click.pass_context
def append_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    force: bool,
    copyright_message: str | None,
    header_file: Path | None,
    config_file: Path | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
) -> None:
    """Append license headers to the selected files."""
    console: ClickConsole = ctx.obj["console"]

    if not paths:
        console.warn("No paths given; nothing to do.")
        return

    config: Config = build_config(
        config_file=config_file,
        force=force,
        copyright_message=copyright_message,
        header_file=header_file,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )
    logger.debug("Effective config: %s", config)

    provider: HeaderProvider = build_header_provider(config)
    if isinstance(provider, TemplateFileHeader):
        try:
            provider.load()
        except HeadstampConfigError as e:
            raise HeadstampCliConfigError(str(e)) from e

    files: list[Path] = resolve_file_list(paths, config)
    if not files:
        if not any(Path(p).exists() or "*" in p for p in paths):
            raise HeadstampFileNotFoundError(f"No such file or directory: {', '.join(paths)}")
        console.warn("No supported files found.")
        return

    appender = LicenceAppender(
        provider,
        force=config.force,
        encoding=config.encoding,
        suffix=config.suffix,
    )
    report: AppendReport = appender.append_all(files)

    if console.verbosity > 0:
        for result in report.results:
            _report_file(console, result)
    for error in report.errors:
        console.error(str(error))

    counts = report.counts()
    console.print(
        f"Processed {len(files)} file(s): "
        f"{counts[AppendStatus.WRITTEN]} written, "
        f"{counts[AppendStatus.REPLACED]} replaced, "
        f"{counts[AppendStatus.REPLACE_FAILED]} replace failed, "
        f"{len(report.errors)} error(s)."
    )

    if report.failed:
        raise HeadstampIOError(f"{len(report.errors)} file(s) could not be processed.")
    if report.replace_failed:
        raise HeadstampCliError("Some files could not be replaced; see '.new' siblings.")
