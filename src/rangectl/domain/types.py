"""Seat and value-kind enums shared by the codecs and the import engine."""

from __future__ import annotations

from enum import StrEnum


class Seat(StrEnum):
    """The two player positions."""

    OOP = "OOP"
    IP = "IP"


class ValueKind(StrEnum):
    """Primitive kinds a configuration value can take in the JSON document."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"
