"""Command: edit the configuration document in $EDITOR and import it."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import click

from rangectl.commands._base import RangeCommand
from rangectl.output.formatters import format_result

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangectl edit
  EDITOR=nano rangectl edit""",
)
@click.pass_obj
def edit(app: AppContext) -> None:
    """Open the current document in an editor and import the result.

    On a validation error the error is shown and the editor can be
    re-opened on the edited text.
    """
    from rangectl.services.editor import ImportEditor

    if app.settings.no_interact:
        raise click.UsageError("'edit' opens an editor and cannot run with --no-interact.")

    editor = ImportEditor(app.state)
    draft = editor.text
    try:
        while True:
            edited = click.edit(draft, extension=".json")
            if edited is None:
                click.echo("No changes made.", err=True)
                return

            result = editor.edit(edited)
            if result.ok:
                result = asyncio.run(editor.submit())
                if result.ok:
                    app.emit(result)
                    return

            click.echo(format_result(result, settings=app.output_settings), err=True)
            if not click.confirm("Re-open the editor?", default=True, err=True):
                raise SystemExit(1)
            draft = edited
    finally:
        editor.close()
