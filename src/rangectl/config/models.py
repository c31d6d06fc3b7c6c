"""Pydantic config models for rangectl.toml sections.

All models are frozen. Sparse TOML files only override the fields they
mention; the rest keeps the code defaults. The ``[tree]`` section reuses
:class:`rangectl.domain.state.TreeConfig` directly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from rangectl.domain.ranges import parse_range


class RangesConfig(BaseModel):
    """[ranges] section — starting range per seat, in range-string form."""

    model_config = {"frozen": True}

    oop: str = "22+,A2s+,K9s+,Q9s+,J9s+,T9s,98s,87s,ATo+,KJo+,QJo"
    ip: str = "22+,A2s+,K2s+,Q5s+,J7s+,T7s+,97s+,86s+,75s+,64s+,54s,A2o+,K9o+,Q9o+,J9o+,T9o"

    @field_validator("oop", "ip")
    @classmethod
    def _must_decode(cls, value: str) -> str:
        # RangeParseError is a ValueError, so pydantic reports it per field.
        parse_range(value)
        return value


class LinesConfig(BaseModel):
    """[lines] section — manual game-tree edit counters."""

    model_config = {"frozen": True}

    added: int = Field(default=0, ge=0)
    removed: int = Field(default=0, ge=0)
