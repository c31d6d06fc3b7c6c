"""Command: print or write the current configuration document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from rangectl.commands._base import RangeCommand

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangectl export
  rangectl export --output session.json
  rangectl --json export""",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the document to a file instead of stdout.",
)
@click.pass_obj
def export(app: AppContext, output_file: str | None) -> None:
    """Export ranges and tree settings as an editable JSON document."""
    from rangectl.services.export import ExportService
    from rangectl.services.result import ErrorCode, ServiceResult

    result = ExportService(app.state).export_document()
    if output_file is None:
        app.emit(result)
        return

    try:
        Path(output_file).write_text(result.data["text"] + "\n", encoding="utf-8")
    except OSError as exc:
        app.emit(
            ServiceResult.failure(
                "export_file",
                ErrorCode.IO_ERROR,
                f"Cannot write {output_file}: {exc.strerror or exc}",
                path=output_file,
            )
        )
        return
    app.emit(ServiceResult.success("export_file", output_file=output_file))
