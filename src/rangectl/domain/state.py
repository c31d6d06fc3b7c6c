"""TreeConfig — the live tree-building configuration.

Field names are snake_case in Python and camelCase in the exported
document (``starting_pot`` <-> ``startingPot``). The board is held as
integer card ids; string tokens are accepted on input so TOML defaults can
spell the board the same way the document does.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from rangectl.domain.cards import parse_card
from rangectl.domain.schema import MAX_BOARD_CARDS

Number = int | float


class TreeConfig(BaseModel):
    """Scalar and board settings for one analysis session."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    board: tuple[int, ...] = Field(default=(), max_length=MAX_BOARD_CARDS)
    starting_pot: Number = 20
    effective_stack: Number = 100
    rake_percent: Number = 0
    rake_cap: Number = 0
    donk_option: bool = False
    oop_flop_bet: str = "50%"
    oop_flop_raise: str = "60%"
    oop_turn_bet: str = "50%"
    oop_turn_raise: str = "60%"
    oop_turn_donk: str = ""
    oop_river_bet: str = "50%"
    oop_river_raise: str = "60%"
    oop_river_donk: str = ""
    ip_flop_bet: str = "50%"
    ip_flop_raise: str = "60%"
    ip_turn_bet: str = "50%"
    ip_turn_raise: str = "60%"
    ip_river_bet: str = "50%"
    ip_river_raise: str = "60%"
    add_all_in_threshold: Number = 150
    force_all_in_threshold: Number = 20
    merging_threshold: Number = 10
    expected_board_length: int = 0

    @field_validator("board", mode="before")
    @classmethod
    def _decode_tokens(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(parse_card(v) if isinstance(v, str) else v for v in value)
        return value

    def to_document(self) -> dict[str, Any]:
        """Dump with camelCase keys; the board stays as card ids."""
        data = self.model_dump(by_alias=True)
        data["board"] = list(self.board)
        return data
