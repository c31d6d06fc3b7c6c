"""Commands: validate and import an edited configuration document."""

from __future__ import annotations

import asyncio
from typing import IO, TYPE_CHECKING

import click

from rangectl.commands._base import RangeCommand

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangectl validate session.json
  rangectl export | rangectl validate -""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def validate(app: AppContext, source: IO[str]) -> None:
    """Check a document without applying it. SOURCE may be '-' for stdin."""
    from rangectl.services.importer import ImportService

    app.emit(ImportService(app.state).validate_only(source.read()))


@click.command(
    "import",
    cls=RangeCommand,
    examples="""\
  rangectl import session.json
  rangectl -v import session.json
  cat session.json | rangectl --json import -""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def import_cmd(app: AppContext, source: IO[str]) -> None:
    """Validate a document and apply it to the session. SOURCE may be '-' for stdin."""
    from rangectl.services.importer import ImportService

    text = source.read()
    app.emit(asyncio.run(ImportService(app.state).import_text(text)))
