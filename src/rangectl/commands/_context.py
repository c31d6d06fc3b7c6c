"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the session's AppState (created lazily so
``--help`` and ``--version`` never build it) and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rangectl.config.settings import RangeSettings
    from rangectl.infrastructure.app_state import AppState
    from rangectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RangeSettings) -> None:
        self.settings = settings
        self._state: AppState | None = None

        from rangectl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

    @property
    def state(self) -> AppState:
        """The session state (seeded from settings on first access)."""
        if self._state is None:
            from rangectl.infrastructure.app_state import AppState

            self._state = AppState.from_settings(self.settings)
            self._state.plugins.discover_and_load()
        return self._state

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
