"""Shared pytest fixtures and test helpers for rangectl tests."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from rangectl.domain.cards import parse_cards
from rangectl.domain.ranges import parse_range
from rangectl.domain.state import TreeConfig
from rangectl.domain.types import Seat
from rangectl.infrastructure.app_state import AppState
from rangectl.services.export import ExportService
from rangectl.services.importer import ImportService
from rangectl.services.result import ServiceResult

OOP_RANGE = "QQ+,AKs,AQs:0.5"
IP_RANGE = "99-77,KQs,AJo:0.25"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def state() -> AppState:
    """Session state with a flop, non-default scalars, and both ranges set."""
    config = TreeConfig(
        board=tuple(parse_cards(["Qs", "Jh", "2h"])),
        starting_pot=180,
        effective_stack=910,
        rake_percent=2.5,
        donk_option=True,
        oop_flop_bet="33%, 75%",
    )
    return AppState(
        config,
        ranges={Seat.OOP: parse_range(OOP_RANGE), Seat.IP: parse_range(IP_RANGE)},
    )


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no rangectl env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so settings
    discovery never picks up a stray ``rangectl.toml``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RANGECTL_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def export_document(state: AppState) -> dict[str, Any]:
    """Export the live state, asserting success."""
    result = ExportService(state).export_document()
    assert result.ok, result.error
    return result.data["document"]


def import_document(state: AppState, document: Any) -> ServiceResult:
    """Run an import of a decoded document to completion."""
    return asyncio.run(ImportService(state).import_document(document))


def import_text(state: AppState, text: str) -> ServiceResult:
    """Run an import of raw text to completion."""
    return asyncio.run(ImportService(state).import_text(text))


def snapshot(state: AppState) -> str:
    """Observable live state as a comparable string."""
    return json.dumps(
        {
            "config": state.config.to_document(),
            "oop": state.range_text(Seat.OOP),
            "ip": state.range_text(Seat.IP),
        },
        sort_keys=True,
    )
