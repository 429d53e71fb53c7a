"""Exceptions for the Headstamp CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Click prints the message and exits with ``exit_code``.
"""

from __future__ import annotations

import click

from headstamp.cli.exit_codes import ExitCode


class HeadstampCliError(click.ClickException):
    """Base class for all Headstamp CLI errors."""

    exit_code = ExitCode.FAILURE


class HeadstampUsageError(HeadstampCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class HeadstampCliConfigError(HeadstampCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class HeadstampFileNotFoundError(HeadstampCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class HeadstampIOError(HeadstampCliError):
    """Error when one or more files could not be read or written."""

    exit_code = ExitCode.IO_ERROR
