"""Headstamp `version` command.

Prints the current Headstamp version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from headstamp.constants import HEADSTAMP_VERSION


@click.command(
    name="version",
    help="Show the current version of Headstamp.",
)
def version_command() -> None:
    """Show the current version of Headstamp."""
    click.echo(HEADSTAMP_VERSION)
