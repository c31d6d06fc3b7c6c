"""Subcommand modules for rangectl.

Provides register_commands() which uses deferred imports to keep
``rangectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rangectl.commands.edit import edit
    from rangectl.commands.export import export
    from rangectl.commands.transfer import import_cmd, validate

    cli.add_command(export)
    cli.add_command(validate)
    cli.add_command(import_cmd)
    cli.add_command(edit)
