"""Tests for format_result and the Rich renderers."""

from __future__ import annotations

import json

from rangectl.output.formatters import OutputSettings, format_result
from rangectl.services.result import ErrorCode, ServiceResult


def _err(msg: str = "Unknown config key: bogus") -> ServiceResult:
    return ServiceResult.failure("import_document", ErrorCode.UNKNOWN_KEY, msg, key="bogus")


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_success(self) -> None:
        result = ServiceResult.success("export_document", text="{}", document={})
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["op"] == "export_document"
        assert data["data"]["document"] == {}

    def test_json_error(self) -> None:
        data = json.loads(format_result(_err(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "UNKNOWN_KEY"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_err(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["ok"] is False


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        result = ServiceResult.success("validate_document")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: validate_document"

    def test_quiet_error(self) -> None:
        output = format_result(_err(), settings=OutputSettings(quiet=True))
        assert output == "ERROR: import_document — Unknown config key: bogus"


class TestRichRendering:
    def test_export_prints_document_only(self) -> None:
        text = '{\n  "oopRange": "AA"\n}'
        result = ServiceResult.success("export_document", text=text, document={})
        assert format_result(result) == text

    def test_validate(self) -> None:
        output = format_result(ServiceResult.success("validate_document", config={}, cards=None))
        assert "OK" in output
        assert "Document is valid" in output

    def test_validate_verbose(self) -> None:
        result = ServiceResult.success("validate_document", config={"startingPot": 1}, cards=[1])
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert "startingPot" in output
        assert "board cards: 1" in output

    def test_import(self) -> None:
        result = ServiceResult.success(
            "import_document", message="Configuration imported", text="{}", document={}
        )
        assert "Configuration imported" in format_result(result)

    def test_error_message_verbatim(self) -> None:
        output = format_result(_err())
        assert "ERROR" in output
        assert "Unknown config key: bogus" in output

    def test_error_verbose_shows_code_and_detail(self) -> None:
        output = format_result(_err(), settings=OutputSettings(verbose=True))
        assert "code: UNKNOWN_KEY" in output
        assert "key: bogus" in output

    def test_generic_op(self) -> None:
        output = format_result(ServiceResult.success("export_file", output_file="out.json"))
        assert "export_file" in output
        assert "output_file: out.json" in output
