"""Headstamp `filetypes` command.

Lists the recognized document kinds with their extensions, comment syntax,
and insertion policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from headstamp.filetypes.formats import InsertionPolicy, iter_document_formats

if TYPE_CHECKING:
    from headstamp.cli.console import ClickConsole


@click.command(
    name="filetypes",
    help="List supported document kinds and how headers are inserted.",
)
@click.pass_context
def filetypes_command(ctx: click.Context) -> None:
    """List supported document kinds."""
    console: ClickConsole = ctx.obj["console"]
    for fmt in iter_document_formats():
        where: str = (
            "top of file"
            if fmt.policy == InsertionPolicy.PREPEND
            else "after marker line"
        )
        console.print(
            f"{console.styled(f'{fmt.kind.value:<12}', bold=True)} "
            f"{', '.join(fmt.extensions):<18} {where}"
        )
        if console.verbosity > 0:
            console.print(f"    {fmt.description}")
            style = fmt.style
            console.print(
                f"    open={style.open_line!r} prefix={style.line_prefix!r} "
                f"close={style.close_line!r}"
            )
