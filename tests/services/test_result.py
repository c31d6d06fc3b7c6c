"""Tests for ServiceResult, ServiceError and ErrorCode."""

import json

import pytest
from pydantic import ValidationError

from rangectl.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult.success("validate_board", cards=[50, 33])
        assert result.ok is True
        assert result.op == "validate_board"
        assert result.data == {"cards": [50, 33]}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_construction(self) -> None:
        result = ServiceResult.failure(
            "validate_config", ErrorCode.UNKNOWN_KEY, "Unknown config key: bogus", key="bogus"
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == ErrorCode.UNKNOWN_KEY
        assert result.error.code == "UNKNOWN_KEY"
        assert result.error.detail == {"key": "bogus"}

    def test_json_serialization(self) -> None:
        result = ServiceResult.failure("parse_document", ErrorCode.PARSE_ERROR, "Invalid JSON")
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "PARSE_ERROR"
        assert parsed["error"]["message"] == "Invalid JSON"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
