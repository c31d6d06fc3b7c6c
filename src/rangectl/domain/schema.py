"""Static shape of the exported configuration document.

CONFIG_SCHEMA maps every key of the live tree configuration to the JSON kind
its value must have. Import validation compares against this table instead
of inspecting the live values.

INVARIANT: CONFIG_SCHEMA keys are exactly the camelCase field names of
:class:`rangectl.domain.state.TreeConfig`, in field order.
"""

from __future__ import annotations

from typing import Any

from rangectl.domain.types import Seat, ValueKind

CONFIG_KEY = "config"
RANGE_KEYS: dict[Seat, str] = {Seat.OOP: "oopRange", Seat.IP: "ipRange"}

BOARD_KEY = "board"
EXPECTED_BOARD_LENGTH_KEY = "expectedBoardLength"
MAX_BOARD_CARDS = 5

CONFIG_SCHEMA: dict[str, ValueKind] = {
    BOARD_KEY: ValueKind.ARRAY,
    "startingPot": ValueKind.NUMBER,
    "effectiveStack": ValueKind.NUMBER,
    "rakePercent": ValueKind.NUMBER,
    "rakeCap": ValueKind.NUMBER,
    "donkOption": ValueKind.BOOLEAN,
    "oopFlopBet": ValueKind.STRING,
    "oopFlopRaise": ValueKind.STRING,
    "oopTurnBet": ValueKind.STRING,
    "oopTurnRaise": ValueKind.STRING,
    "oopTurnDonk": ValueKind.STRING,
    "oopRiverBet": ValueKind.STRING,
    "oopRiverRaise": ValueKind.STRING,
    "oopRiverDonk": ValueKind.STRING,
    "ipFlopBet": ValueKind.STRING,
    "ipFlopRaise": ValueKind.STRING,
    "ipTurnBet": ValueKind.STRING,
    "ipTurnRaise": ValueKind.STRING,
    "ipRiverBet": ValueKind.STRING,
    "ipRiverRaise": ValueKind.STRING,
    "addAllInThreshold": ValueKind.NUMBER,
    "forceAllInThreshold": ValueKind.NUMBER,
    "mergingThreshold": ValueKind.NUMBER,
    EXPECTED_BOARD_LENGTH_KEY: ValueKind.NUMBER,
}

# Computed on commit, never taken from an import.
DERIVED_KEYS: frozenset[str] = frozenset({EXPECTED_BOARD_LENGTH_KEY})

EDITABLE_KEYS: tuple[str, ...] = tuple(k for k in CONFIG_SCHEMA if k not in DERIVED_KEYS)


def kind_of(value: Any) -> ValueKind:
    """Classify a decoded JSON value.

    Booleans are checked before numbers since ``bool`` subclasses ``int``.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    return ValueKind.OBJECT


def expected_board_length(board_size: int, added_lines: int, removed_lines: int) -> int:
    """Derive ``expectedBoardLength``.

    Manual tree edits are only valid for the board length they were made on,
    so the length is pinned while either edit counter is non-zero; ``0``
    means unconstrained.
    """
    if added_lines or removed_lines:
        return board_size
    return 0
