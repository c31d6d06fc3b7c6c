"""Tests for the static config schema."""

import pytest

from rangectl.domain.schema import (
    CONFIG_SCHEMA,
    DERIVED_KEYS,
    EDITABLE_KEYS,
    EXPECTED_BOARD_LENGTH_KEY,
    expected_board_length,
    kind_of,
)
from rangectl.domain.state import TreeConfig
from rangectl.domain.types import ValueKind


class TestConfigSchema:
    def test_matches_tree_config_fields(self) -> None:
        assert list(CONFIG_SCHEMA) == list(TreeConfig().model_dump(by_alias=True))

    def test_editable_keys_exclude_derived(self) -> None:
        assert EXPECTED_BOARD_LENGTH_KEY in DERIVED_KEYS
        assert EXPECTED_BOARD_LENGTH_KEY not in EDITABLE_KEYS
        assert set(EDITABLE_KEYS) | DERIVED_KEYS == set(CONFIG_SCHEMA)

    def test_board_is_array(self) -> None:
        assert CONFIG_SCHEMA["board"] is ValueKind.ARRAY

    def test_only_document_kinds(self) -> None:
        allowed = {ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING, ValueKind.ARRAY}
        assert set(CONFIG_SCHEMA.values()) <= allowed


@pytest.mark.parametrize(
    "value,kind",
    [
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (0, ValueKind.NUMBER),
        (2.5, ValueKind.NUMBER),
        ("20", ValueKind.STRING),
        ([], ValueKind.ARRAY),
        ({}, ValueKind.OBJECT),
        (None, ValueKind.NULL),
    ],
)
def test_kind_of(value: object, kind: ValueKind) -> None:
    assert kind_of(value) is kind


class TestExpectedBoardLength:
    def test_unconstrained_without_tree_edits(self) -> None:
        assert expected_board_length(3, 0, 0) == 0

    def test_pinned_by_added_lines(self) -> None:
        assert expected_board_length(3, 1, 0) == 3

    def test_pinned_by_removed_lines(self) -> None:
        assert expected_board_length(4, 0, 2) == 4
