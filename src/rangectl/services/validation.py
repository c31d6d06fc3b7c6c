"""Import validators — parser, schema, board and range checks.

Each validator takes an untyped value from a decoded document and returns a
:class:`ServiceResult`. They never mutate state and never raise for bad
input; the first failing check produces the single error of an attempt.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from rangectl.domain.cards import CardParseError, parse_card
from rangectl.domain.ranges import RangeParseError, parse_range
from rangectl.domain.schema import (
    BOARD_KEY,
    CONFIG_SCHEMA,
    EDITABLE_KEYS,
    MAX_BOARD_CARDS,
    kind_of,
)
from rangectl.domain.types import Seat
from rangectl.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class _Missing:
    """Marks a document field that is absent, as opposed to ``null``."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

INVALID_BOARD_MESSAGE = (
    'Invalid board: every card must be a two-character token such as "Ah" or "Td". '
    "Please correct the board manually."
)
BOARD_TOO_LONG_MESSAGE = f"Board cannot have more than {MAX_BOARD_CARDS} cards"


def _describe(value: Any) -> str:
    return "missing" if value is MISSING else str(kind_of(value))


def _reject_constant(name: str) -> Any:
    msg = f"Unexpected constant {name!r}"
    raise ValueError(msg)


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        msg = f"Number {literal} is out of range"
        raise ValueError(msg)
    return value


def parse_document(text: str) -> ServiceResult:
    """Decode *text* as JSON. No semantic checks.

    ``NaN`` and ``Infinity`` are not JSON and are rejected, as are number
    literals too large for a float (``1e400``), which would otherwise
    export back as ``Infinity``.
    """
    op = "parse_document"
    try:
        tree = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        logger.debug("Document is not valid JSON: %s", exc)
        return ServiceResult.failure(op, ErrorCode.PARSE_ERROR, f"Invalid JSON: {exc}")
    return ServiceResult.success(op, document=tree)


def validate_config(config: Any) -> ServiceResult:
    """Check each config value's kind against :data:`CONFIG_SCHEMA`.

    Visits the editable keys first, in schema order, then any remaining
    input keys in document order. A key absent from *config* is skipped,
    meaning "keep the current value". Fails on the first offending key.
    """
    op = "validate_config"
    if not isinstance(config, dict):
        actual = _describe(config)
        return ServiceResult.failure(
            op,
            ErrorCode.SCHEMA_TOP_LEVEL,
            f"Expected config to be object, got {actual}",
            expected="object",
            actual=actual,
        )

    for key in dict.fromkeys([*EDITABLE_KEYS, *config]):
        expected = CONFIG_SCHEMA.get(key)
        if expected is None:
            return ServiceResult.failure(
                op, ErrorCode.UNKNOWN_KEY, f"Unknown config key: {key}", key=key
            )
        if key not in config:
            continue
        value = config[key]
        actual = kind_of(value)
        if actual == expected:
            if isinstance(value, float) and not math.isfinite(value):
                return ServiceResult.failure(
                    op,
                    ErrorCode.TYPE_MISMATCH,
                    f"Expected config.{key} to be a finite number, got {value}",
                    key=key,
                    expected=str(expected),
                    actual=str(actual),
                )
            continue
        if key == BOARD_KEY:
            return ServiceResult.failure(op, ErrorCode.INVALID_BOARD, INVALID_BOARD_MESSAGE)
        return ServiceResult.failure(
            op,
            ErrorCode.TYPE_MISMATCH,
            f"Expected config.{key} to be {expected}, got {actual}",
            key=key,
            expected=str(expected),
            actual=str(actual),
        )
    return ServiceResult.success(op, config=config)


def validate_board(board: Any) -> ServiceResult:
    """Check board shape and decode every card, preserving order.

    On success ``data["cards"]`` holds the decoded card ids.
    """
    op = "validate_board"
    if not isinstance(board, list):
        return ServiceResult.failure(op, ErrorCode.INVALID_BOARD, INVALID_BOARD_MESSAGE)

    cards: list[int] = []
    for token in board:
        if not isinstance(token, str):
            return ServiceResult.failure(op, ErrorCode.INVALID_BOARD, INVALID_BOARD_MESSAGE)
        try:
            cards.append(parse_card(token))
        except CardParseError:
            logger.debug("Undecodable board card: %r", token)
            return ServiceResult.failure(op, ErrorCode.INVALID_BOARD, INVALID_BOARD_MESSAGE)

    if len(cards) > MAX_BOARD_CARDS:
        return ServiceResult.failure(
            op, ErrorCode.BOARD_TOO_LONG, BOARD_TOO_LONG_MESSAGE, length=len(cards)
        )
    return ServiceResult.success(op, cards=cards)


def validate_range(raw: Any, seat: Seat) -> ServiceResult:
    """Check that *raw* is a range string the range codec accepts."""
    op = "validate_range"
    if not isinstance(raw, str):
        return ServiceResult.failure(
            op,
            ErrorCode.RANGE_ERROR,
            f"Invalid {seat} range: expected string, got {_describe(raw)}",
            seat=str(seat),
        )
    try:
        parse_range(raw)
    except RangeParseError as exc:
        return ServiceResult.failure(
            op, ErrorCode.RANGE_ERROR, f"Invalid {seat} range: {exc}", seat=str(seat)
        )
    return ServiceResult.success(op, seat=str(seat), range=raw)
