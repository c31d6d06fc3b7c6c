"""Tests for the card codec."""

import pytest

from rangectl.domain.cards import (
    DECK_SIZE,
    CardParseError,
    card_text,
    cards_text,
    parse_card,
    parse_cards,
)


class TestParseCard:
    @pytest.mark.parametrize(
        "token,expected",
        [("2c", 0), ("2s", 3), ("Td", 33), ("Ah", 50), ("As", 51)],
    )
    def test_known_ids(self, token: str, expected: int) -> None:
        assert parse_card(token) == expected

    def test_rank_is_case_insensitive(self) -> None:
        assert parse_card("td") == parse_card("Td")
        assert parse_card("ah") == parse_card("Ah")

    @pytest.mark.parametrize("token", ["Zz", "AH", "1c", "A", "", "Ahh", "hA"])
    def test_rejects_malformed(self, token: str) -> None:
        with pytest.raises(CardParseError):
            parse_card(token)

    def test_parse_error_is_value_error(self) -> None:
        assert issubclass(CardParseError, ValueError)


class TestCardText:
    def test_every_id_has_a_unique_token(self) -> None:
        tokens = {card_text(c) for c in range(DECK_SIZE)}
        assert len(tokens) == DECK_SIZE

    def test_canonical_form(self) -> None:
        assert card_text(parse_card("td")) == "Td"

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            card_text(DECK_SIZE)


def test_sequences_preserve_order() -> None:
    tokens = ["Ks", "2d", "Ah"]
    assert cards_text(parse_cards(tokens)) == tokens
