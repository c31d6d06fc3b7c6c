"""Tests for the range codec."""

import pytest

from rangectl.domain.ranges import (
    HAND_CLASSES,
    Range,
    RangeParseError,
    format_range,
    parse_range,
)


def _hands(text: str) -> set[str]:
    return set(parse_range(text).weights)


class TestHandClasses:
    def test_count(self) -> None:
        assert len(HAND_CLASSES) == 169
        assert len(set(HAND_CLASSES)) == 169

    def test_canonical_order_starts_with_aces(self) -> None:
        assert HAND_CLASSES[:3] == ("AA", "AKs", "AKo")
        assert HAND_CLASSES[-1] == "22"


class TestParseRange:
    def test_empty(self) -> None:
        assert parse_range("").is_empty()
        assert parse_range("  ,  ").is_empty()

    def test_single_classes(self) -> None:
        assert _hands("AA,AKs,QJo") == {"AA", "AKs", "QJo"}

    def test_unsuited_token_expands_to_both(self) -> None:
        assert _hands("AK") == {"AKs", "AKo"}

    def test_reversed_ranks_normalize(self) -> None:
        assert _hands("KAs") == {"AKs"}

    def test_lowercase_ranks(self) -> None:
        assert _hands("ak") == {"AKs", "AKo"}

    def test_pair_plus(self) -> None:
        assert _hands("TT+") == {"TT", "JJ", "QQ", "KK", "AA"}

    def test_kicker_plus(self) -> None:
        assert _hands("A5s+") == {f"A{r}s" for r in "56789TJQK"}

    def test_pair_span_either_direction(self) -> None:
        assert _hands("QQ-99") == {"QQ", "JJ", "TT", "99"}
        assert _hands("99-QQ") == _hands("QQ-99")

    def test_kicker_span(self) -> None:
        assert _hands("K9o-K6o") == {"K9o", "K8o", "K7o", "K6o"}

    def test_weights(self) -> None:
        rng = parse_range("AA:0.5, KK")
        assert rng.weights == {"AA": 0.5, "KK": 1.0}

    def test_later_tokens_override(self) -> None:
        assert parse_range("AA,AA:0.25").weights == {"AA": 0.25}
        assert parse_range("AA,AA:0").is_empty()

    @pytest.mark.parametrize(
        "text",
        ["XY", "AAs", "AA:1.5", "AA:-0.1", "AA:abc", "AKs-QJs", "AKs-AQo", "KK-K9", "A"],
    )
    def test_rejects(self, text: str) -> None:
        with pytest.raises(RangeParseError):
            parse_range(text)

    def test_error_names_the_token(self) -> None:
        with pytest.raises(RangeParseError, match="XY"):
            parse_range("AA,XY")


class TestFormatRange:
    def test_canonical_order(self) -> None:
        assert format_range(parse_range("AQs:0.5,AA")) == "AA,AQs:0.5"

    def test_empty(self) -> None:
        assert format_range(Range()) == ""

    @pytest.mark.parametrize(
        "text",
        ["22+,A2s+,KTs+,ATo+", "QQ+,AKs,AQs:0.5", "99-77,KQs,AJo:0.25", "T9s:0.333"],
    )
    def test_reparse_is_identity(self, text: str) -> None:
        rng = parse_range(text)
        assert parse_range(format_range(rng)) == rng
