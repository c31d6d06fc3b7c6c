"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: Validators and service operations return ServiceResult; they do
not raise for bad input. The CLI and the editor view consume this type.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Failure taxonomy of the import engine. One is surfaced per attempt."""

    PARSE_ERROR = "PARSE_ERROR"
    SCHEMA_TOP_LEVEL = "SCHEMA_TOP_LEVEL"
    UNKNOWN_KEY = "UNKNOWN_KEY"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    INVALID_BOARD = "INVALID_BOARD"
    BOARD_TOO_LONG = "BOARD_TOO_LONG"
    RANGE_ERROR = "RANGE_ERROR"
    IO_ERROR = "IO_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for validators and service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"validate_board"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
