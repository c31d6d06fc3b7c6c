"""Range codec — weighted starting-hand ranges and their string form.

A range assigns a weight in ``(0, 1]`` to any of the 169 starting-hand
classes (``AA``, ``AKs``, ``AKo``, ...). The string form is a comma-separated
list of tokens, each optionally followed by ``:weight``:

- ``QQ`` / ``AKs`` / ``AKo`` — a single class.
- ``AK`` — both the suited and the offsuit class.
- ``TT+`` — pairs from ``TT`` up to ``AA``.
- ``A5s+`` — same high card, kicker from ``5`` up to one below the high card.
- ``QQ-99`` / ``K9o-K6o`` — an inclusive span.

Later tokens override earlier ones; a weight of ``0`` removes the class.
:func:`format_range` emits one token per class in canonical order, so
``parse_range(format_range(r)) == r`` for every range.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rangectl.domain.cards import RANKS


class RangeParseError(ValueError):
    """Raised when a range string cannot be decoded."""


def _build_hand_classes() -> tuple[str, ...]:
    classes: list[str] = []
    for hi in reversed(range(len(RANKS))):
        classes.append(RANKS[hi] * 2)
        for lo in reversed(range(hi)):
            classes.append(f"{RANKS[hi]}{RANKS[lo]}s")
            classes.append(f"{RANKS[hi]}{RANKS[lo]}o")
    return tuple(classes)


HAND_CLASSES: tuple[str, ...] = _build_hand_classes()

_RANK = "[2-9TJQKA]"
_HAND = rf"({_RANK})({_RANK})([so])?"
_SINGLE_RE = re.compile(rf"^{_HAND}(\+)?$")
_SPAN_RE = re.compile(rf"^{_HAND}-{_HAND}$")


@dataclass
class Range:
    """Weighted set of starting-hand classes."""

    weights: dict[str, float] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.weights)

    def is_empty(self) -> bool:
        return not self.weights


def _rank_index(char: str) -> int:
    return RANKS.index(char)


def _classes(hi: int, lo: int, suitedness: str | None) -> list[str]:
    if hi == lo:
        if suitedness:
            msg = f"Pairs cannot be suited or offsuit: {RANKS[hi] * 2}{suitedness}"
            raise RangeParseError(msg)
        return [RANKS[hi] * 2]
    if hi < lo:
        hi, lo = lo, hi
    base = f"{RANKS[hi]}{RANKS[lo]}"
    if suitedness:
        return [base + suitedness]
    return [base + "s", base + "o"]


def _expand_single(match: re.Match[str]) -> list[str]:
    first, second, suitedness, plus = match.groups()
    hi, lo = _rank_index(first), _rank_index(second)
    if not plus:
        return _classes(hi, lo, suitedness)
    if hi == lo:
        if suitedness:
            return _classes(hi, lo, suitedness)
        return [RANKS[r] * 2 for r in range(hi, len(RANKS))]
    if hi < lo:
        hi, lo = lo, hi
    hands: list[str] = []
    for kicker in range(lo, hi):
        hands.extend(_classes(hi, kicker, suitedness))
    return hands


def _expand_span(match: re.Match[str]) -> list[str]:
    a1, a2, a_suit, b1, b2, b_suit = match.groups()
    if a_suit != b_suit:
        msg = f"Span endpoints must share suitedness: {match.group(0)}"
        raise RangeParseError(msg)
    a_hi, a_lo = _rank_index(a1), _rank_index(a2)
    b_hi, b_lo = _rank_index(b1), _rank_index(b2)
    if a_hi == a_lo and b_hi == b_lo:
        if a_suit:
            msg = f"Pairs cannot be suited or offsuit: {match.group(0)}"
            raise RangeParseError(msg)
        low, high = sorted((a_hi, b_hi))
        return [RANKS[r] * 2 for r in range(low, high + 1)]
    a_hi, a_lo = max(a_hi, a_lo), min(a_hi, a_lo)
    b_hi, b_lo = max(b_hi, b_lo), min(b_hi, b_lo)
    if a_hi != b_hi or a_hi in (a_lo, b_lo):
        msg = f"Span endpoints must share the high card: {match.group(0)}"
        raise RangeParseError(msg)
    low, high = sorted((a_lo, b_lo))
    hands: list[str] = []
    for kicker in range(low, high + 1):
        hands.extend(_classes(a_hi, kicker, a_suit))
    return hands


def _expand(token: str) -> list[str]:
    normalized = token[:2].upper() + token[2:]
    if "-" in normalized:
        left, _, right = normalized.partition("-")
        normalized = f"{left}-{right[:2].upper()}{right[2:]}"
    match = _SINGLE_RE.match(normalized)
    if match:
        return _expand_single(match)
    match = _SPAN_RE.match(normalized)
    if match:
        return _expand_span(match)
    msg = f"Unrecognized token: {token!r}"
    raise RangeParseError(msg)


def _parse_weight(raw: str, token: str) -> float:
    try:
        weight = float(raw)
    except ValueError as exc:
        msg = f"Invalid weight in {token!r}"
        raise RangeParseError(msg) from exc
    if not 0.0 <= weight <= 1.0:
        msg = f"Weight must be between 0 and 1 in {token!r}"
        raise RangeParseError(msg)
    return weight


def parse_range(text: str) -> Range:
    """Decode a range string.

    Raises:
        RangeParseError: on any unrecognized token or out-of-bounds weight.
    """
    weights: dict[str, float] = {}
    for raw in text.split(","):
        token = raw.strip()
        if not token:
            continue
        hand_part, sep, weight_part = token.partition(":")
        weight = _parse_weight(weight_part.strip(), token) if sep else 1.0
        for hand in _expand(hand_part.strip()):
            weights[hand] = weight
    return Range({hand: w for hand, w in weights.items() if w > 0.0})


def format_range(rng: Range) -> str:
    """Encode a range as its canonical string."""
    tokens: list[str] = []
    for hand in HAND_CLASSES:
        weight = rng.weights.get(hand)
        if weight is None:
            continue
        tokens.append(hand if weight == 1.0 else f"{hand}:{weight}")
    return ",".join(tokens)
