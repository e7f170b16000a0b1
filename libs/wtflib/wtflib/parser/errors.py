"""Parse error types for the test file parser."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Every way in which parsing a test file can fail."""

    UNEXPECTED_EOF = "UnexpectedEof"
    INVALID_CONFIG_OPTION = "InvalidConfigOption"
    INVALID_CONFIG_VALUE = "InvalidConfigValue"
    INVALID_INT_VALUE = "InvalidIntValue"
    INVALID_STRING_VALUE = "InvalidStringValue"
    INVALID_ACTION = "InvalidAction"
    INVALID_RANGE = "InvalidRange"
    INVALID_MARKER = "InvalidMarker"
    INVALID_ERROR_CODE = "InvalidErrorCode"
    INVALID_COORDINATE = "InvalidCoordinate"

    def __str__(self) -> str:
        return self.value


class ParseError(Exception):
    """Raised on the first malformed line; parsing does not recover."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        super().__init__(f"{kind}: {message}" if message else str(kind))
        self.kind = kind
