"""Tests for the export CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from rangectl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestExportCommand:
    def test_prints_document(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export"])
        assert result.exit_code == 0, result.output
        doc = json.loads(result.output)
        assert set(doc) == {"oopRange", "ipRange", "config"}
        assert doc["config"]["board"] == []

    def test_json_envelope(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "export"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "export_document"
        assert "text" in data["data"]

    def test_output_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "session.json"
        result = cli_runner.invoke(cli, ["export", "--output", str(target)])
        assert result.exit_code == 0
        assert "export_file" in result.output
        assert json.loads(target.read_text(encoding="utf-8"))["config"]["startingPot"] == 20

    def test_unwritable_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "missing-dir" / "session.json"
        result = cli_runner.invoke(cli, ["--json", "export", "--output", str(target)])
        assert result.exit_code == 1
        assert "IO_ERROR" in result.output

    def test_seeded_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text(
            '[tree]\nboard = ["Td", "9d", "6h"]\n\n[ranges]\noop = "AA"\n', encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["export"])
        doc = json.loads(result.output)
        assert doc["config"]["board"] == ["Td", "9d", "6h"]
        assert doc["oopRange"] == "AA"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "--examples"])
        assert result.exit_code == 0
        assert "rangectl export --output" in result.output
