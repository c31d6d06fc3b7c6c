"""Pluggy hook specifications for rangectl state events.

Subscribers (editor views, exporters, plugins installed via entry points)
implement ``state_changed`` to react to mutations of the live session state.
Hooks are dispatched synchronously on the caller's thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from rangectl.infrastructure.app_state import AppState

hookspec = pluggy.HookspecMarker("rangectl")
hookimpl = pluggy.HookimplMarker("rangectl")


class RangectlHookSpec:
    """Hook specifications for the rangectl plugin system."""

    @hookspec
    def state_changed(self, state: AppState, fields: list[str]) -> None:
        """Called after the live state was mutated.

        *fields* names what changed: ``"config"``, ``"oopRange"`` or
        ``"ipRange"``.
        """
