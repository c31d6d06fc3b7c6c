"""Card codec — two-character tokens to integer card ids and back.

A card id is ``rank * 4 + suit`` with ranks ordered ``23456789TJQKA`` and
suits ordered ``cdhs``, so ids run from 0 (``2c``) to 51 (``As``).

Tokens are a rank character followed by a suit character. The rank is
case-insensitive; the suit must be lowercase (``Ah``, ``td`` and ``Td`` are
valid, ``AH`` is not). Encoding always yields the canonical form (``Td``).
"""

from __future__ import annotations

from collections.abc import Iterable

RANKS = "23456789TJQKA"
SUITS = "cdhs"
DECK_SIZE = len(RANKS) * len(SUITS)


class CardParseError(ValueError):
    """Raised when a token is not a valid two-character card."""


def parse_card(token: str) -> int:
    """Decode a card token into its integer id.

    Raises:
        CardParseError: if *token* is not a rank character followed by a
            suit character.
    """
    if len(token) != 2:
        msg = f"Card token must be two characters: {token!r}"
        raise CardParseError(msg)
    rank = RANKS.find(token[0].upper())
    suit = SUITS.find(token[1])
    if rank < 0 or suit < 0:
        msg = f"Unrecognized card token: {token!r}"
        raise CardParseError(msg)
    return rank * 4 + suit


def card_text(card: int) -> str:
    """Encode a card id as its canonical two-character token."""
    if not 0 <= card < DECK_SIZE:
        msg = f"Card id out of range: {card}"
        raise ValueError(msg)
    return RANKS[card // 4] + SUITS[card % 4]


def parse_cards(tokens: Iterable[str]) -> list[int]:
    """Decode a sequence of tokens, preserving order."""
    return [parse_card(t) for t in tokens]


def cards_text(cards: Iterable[int]) -> list[str]:
    """Encode a sequence of card ids, preserving order."""
    return [card_text(c) for c in cards]
