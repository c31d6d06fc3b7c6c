"""AppState — the live configuration and ranges of one analysis session.

AppState is the single dependency injected into every service, the way a
session owns it: created once from settings, passed by reference, never
global. Mutation goes through two doors only:

- :meth:`replace_config` swaps the whole frozen :class:`TreeConfig` at once.
- :meth:`set_range` decodes and stores one seat's range.

Both fire the ``state_changed`` hook so subscribers (the editor view) can
regenerate what they display.

INVARIANT: Subscriber failures are logged, never raised into the mutator.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rangectl.domain.ranges import Range, format_range, parse_range
from rangectl.domain.schema import RANGE_KEYS, expected_board_length
from rangectl.domain.state import TreeConfig
from rangectl.domain.types import Seat
from rangectl.plugins.manager import PluginManager

if TYPE_CHECKING:
    from rangectl.config.settings import RangeSettings

logger = logging.getLogger(__name__)


class AppState:
    """Process-wide session state, passed explicitly to the engine.

    Parameters:
        config: Initial tree configuration. ``expected_board_length`` is
            recomputed from the board and the line counters.
        ranges: Initial range per seat; missing seats start empty.
        added_lines: Count of lines added to the game tree by hand.
        removed_lines: Count of lines removed from the game tree by hand.
        plugins: Hook dispatcher; a fresh one is created when omitted.
    """

    def __init__(
        self,
        config: TreeConfig | None = None,
        *,
        ranges: dict[Seat, Range] | None = None,
        added_lines: int = 0,
        removed_lines: int = 0,
        plugins: PluginManager | None = None,
    ) -> None:
        self._added_lines = added_lines
        self._removed_lines = removed_lines
        base = config or TreeConfig()
        self._config = base.model_copy(
            update={
                "expected_board_length": expected_board_length(
                    len(base.board), added_lines, removed_lines
                )
            }
        )
        self._ranges: dict[Seat, Range] = {seat: Range() for seat in Seat}
        if ranges:
            self._ranges.update(ranges)
        self._plugins = plugins or PluginManager()

    @classmethod
    def from_settings(cls, settings: RangeSettings) -> AppState:
        """Seed a session from the ``[tree]``, ``[ranges]`` and ``[lines]`` sections."""
        return cls(
            settings.tree,
            ranges={
                Seat.OOP: parse_range(settings.ranges.oop),
                Seat.IP: parse_range(settings.ranges.ip),
            },
            added_lines=settings.lines.added,
            removed_lines=settings.lines.removed,
        )

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def added_lines(self) -> int:
        return self._added_lines

    @property
    def removed_lines(self) -> int:
        return self._removed_lines

    @property
    def plugins(self) -> PluginManager:
        return self._plugins

    def get_range(self, seat: Seat) -> Range:
        return self._ranges[seat]

    def range_text(self, seat: Seat) -> str:
        """The range of *seat* in its canonical string form."""
        return format_range(self._ranges[seat])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def replace_config(self, config: TreeConfig) -> None:
        """Swap the live configuration in one step."""
        self._config = config
        self._notify(["config"])

    async def set_range(self, seat: Seat, text: str) -> None:
        """Decode *text* and store it as the range of *seat*.

        Raises:
            RangeParseError: if *text* is not a valid range; the stored
                range is left unchanged.
        """
        self._ranges[seat] = parse_range(text)
        self._notify([RANGE_KEYS[seat]])

    def set_line_counts(self, *, added: int, removed: int) -> None:
        """Record manual tree edits and re-derive ``expected_board_length``."""
        self._added_lines = added
        self._removed_lines = removed
        length = expected_board_length(len(self._config.board), added, removed)
        self.replace_config(self._config.model_copy(update={"expected_board_length": length}))

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, subscriber: object) -> None:
        """Register an object implementing ``state_changed``."""
        self._plugins.register_plugin(subscriber)

    def unsubscribe(self, subscriber: object) -> None:
        self._plugins.unregister(subscriber)

    def _notify(self, fields: list[str]) -> None:
        try:
            self._plugins.hook.state_changed(state=self, fields=fields)
        except Exception:
            logger.warning("state_changed subscriber failed for %s", fields, exc_info=True)
