"""ImportService — validate an edited document and merge it into AppState.

Checks run in a fixed order and stop at the first failure:

1. JSON parse (text entry points only)
2. ``config`` kinds against the static schema
3. ``config.board`` shape and cards (only when a board is supplied)
4. ``oopRange``
5. ``ipRange``

INVARIANT: AppState is untouched until all checks pass. The commit then
replaces the config in one step and applies the OOP range before the IP
range. If applying the IP range fails, the OOP range stays applied; there
is no rollback.
"""

from __future__ import annotations

import logging
from typing import Any

from rangectl.domain.ranges import RangeParseError
from rangectl.domain.schema import (
    BOARD_KEY,
    CONFIG_KEY,
    EXPECTED_BOARD_LENGTH_KEY,
    RANGE_KEYS,
    expected_board_length,
    kind_of,
)
from rangectl.domain.state import TreeConfig
from rangectl.domain.types import Seat
from rangectl.services.base import BaseService
from rangectl.services.export import ExportService
from rangectl.services.result import ErrorCode, ServiceResult
from rangectl.services.validation import (
    MISSING,
    parse_document,
    validate_board,
    validate_config,
    validate_range,
)

logger = logging.getLogger(__name__)

SEAT_ORDER: tuple[Seat, ...] = (Seat.OOP, Seat.IP)


def _relabel(op: str, failed: ServiceResult) -> ServiceResult:
    """Re-issue a validator failure under the calling operation's name."""
    return ServiceResult(ok=False, op=op, error=failed.error)


class ImportService(BaseService):
    """Validation-and-merge engine over a session's AppState."""

    def validate_document(self, document: Any) -> ServiceResult:
        """Run every check on a decoded document. Never mutates state.

        On success ``data`` holds ``config`` (the validated config object),
        ``cards`` (decoded board, or None when the import has no board) and
        ``ranges`` (range string per seat).
        """
        op = "validate_document"
        if not isinstance(document, dict):
            actual = kind_of(document)
            return ServiceResult.failure(
                op,
                ErrorCode.SCHEMA_TOP_LEVEL,
                f"Expected document to be object, got {actual}",
                expected="object",
                actual=str(actual),
            )

        checked = validate_config(document.get(CONFIG_KEY, MISSING))
        if not checked.ok:
            return _relabel(op, checked)
        config: dict[str, Any] = checked.data["config"]

        cards: list[int] | None = None
        if BOARD_KEY in config:
            board = validate_board(config[BOARD_KEY])
            if not board.ok:
                return _relabel(op, board)
            cards = board.data["cards"]

        ranges: dict[str, str] = {}
        for seat in SEAT_ORDER:
            checked_range = validate_range(document.get(RANGE_KEYS[seat], MISSING), seat)
            if not checked_range.ok:
                return _relabel(op, checked_range)
            ranges[seat] = checked_range.data["range"]

        return ServiceResult.success(op, config=config, cards=cards, ranges=ranges)

    def validate_only(self, text: str) -> ServiceResult:
        """Parse and validate *text* without touching AppState."""
        op = "validate_document"
        parsed = parse_document(text)
        if not parsed.ok:
            return _relabel(op, parsed)
        result = self.validate_document(parsed.data["document"])
        if not result.ok:
            logger.debug("Validation failed: %s", result.error.message if result.error else "")
        return result

    async def import_text(self, text: str) -> ServiceResult:
        """Validate *text* and, only if every check passes, commit it."""
        op = "import_document"
        validated = self.validate_only(text)
        if not validated.ok:
            return _relabel(op, validated)
        return await self._commit(validated.data)

    async def import_document(self, document: Any) -> ServiceResult:
        """Validate an already-decoded document and commit it."""
        op = "import_document"
        validated = self.validate_document(document)
        if not validated.ok:
            return _relabel(op, validated)
        return await self._commit(validated.data)

    async def _commit(self, validated: dict[str, Any]) -> ServiceResult:
        op = "import_document"
        state = self._state

        updates = dict(validated["config"])
        cards: list[int] | None = validated["cards"]
        if cards is not None:
            updates[BOARD_KEY] = cards
        board_size = len(cards) if cards is not None else len(state.config.board)
        updates[EXPECTED_BOARD_LENGTH_KEY] = expected_board_length(
            board_size, state.added_lines, state.removed_lines
        )
        state.replace_config(TreeConfig.model_validate({**state.config.to_document(), **updates}))

        for seat in SEAT_ORDER:
            try:
                await state.set_range(seat, validated["ranges"][seat])
            except RangeParseError as exc:
                logger.warning("Failed to apply %s range after commit began: %s", seat, exc)
                return ServiceResult.failure(
                    op, ErrorCode.RANGE_ERROR, f"Invalid {seat} range: {exc}", seat=str(seat)
                )

        logger.info("Imported configuration (%d config keys)", len(validated["config"]))
        exported = ExportService(state).export_document()
        return ServiceResult.success(
            op,
            message="Configuration imported",
            document=exported.data["document"],
            text=exported.data["text"],
        )
