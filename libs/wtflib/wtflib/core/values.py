"""Configuration values for Whiley test files."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass

# Bounds of a signed 64-bit integer value.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class Value(ABC):
    """Base type for configuration values. All concrete subclasses are frozen dataclasses."""


@dataclass(frozen=True)
class IntValue(Value):
    """Integer value: 1, -20, 9223372036854775807."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolValue(Value):
    """Boolean value: true, false."""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class StringValue(Value):
    """String value: "...". Never contains a double quote."""

    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'
