"""Scalar grammars shared by the config, action and marker parsers.

Each function takes an already-isolated token and either returns the parsed
value or raises :class:`ParseError` with the appropriate :class:`ErrorKind`.
"""

from __future__ import annotations

import re

from wtflib.core.values import INT_MAX, INT_MIN, BoolValue, IntValue, StringValue, Value
from wtflib.diagnostics.location import Coordinate, Range
from wtflib.parser.errors import ErrorKind, ParseError

_SIGNED = re.compile(r"-?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")
_INT_START = frozenset("0123456789-")

# Upper bounds (inclusive) for unsigned quantities.
USIZE_MAX = 2**64 - 1
U16_MAX = 2**16 - 1


def parse_unsigned(token: str, limit: int = USIZE_MAX) -> int | None:
    """Parse an unsigned decimal integer no greater than *limit*, or return None."""
    if not _UNSIGNED.fullmatch(token):
        return None
    value = int(token)
    if value > limit:
        return None
    return value


def parse_value(token: str) -> Value:
    """Parse a trimmed config value: an integer, a quoted string or a boolean."""
    if token[:1] in _INT_START:
        return _parse_int(token)
    if token.startswith('"'):
        return _parse_string(token)
    if token == "true":
        return BoolValue(True)
    if token == "false":
        return BoolValue(False)
    raise ParseError(ErrorKind.INVALID_CONFIG_VALUE, f"unrecognised value {token!r}")


def _parse_int(token: str) -> IntValue:
    if _SIGNED.fullmatch(token):
        value = int(token)
        if INT_MIN <= value <= INT_MAX:
            return IntValue(value)
    raise ParseError(ErrorKind.INVALID_INT_VALUE, f"invalid integer {token!r}")


def _parse_string(token: str) -> StringValue:
    interior = token[1:-1]
    if len(token) < 2 or not token.endswith('"') or '"' in interior:
        raise ParseError(ErrorKind.INVALID_STRING_VALUE, f"invalid string {token!r}")
    return StringValue(interior)


def parse_range(token: str) -> Range:
    """Parse ``N`` or ``N:M`` into a :class:`Range`."""
    parts = token.split(":")
    bounds = [parse_unsigned(p) for p in parts]
    if len(parts) > 2 or None in bounds:
        raise ParseError(ErrorKind.INVALID_RANGE, f"invalid range {token!r}")
    if len(bounds) == 1:
        return Range(bounds[0], bounds[0])
    return Range(bounds[0], bounds[1])


def parse_coordinate(token: str) -> Coordinate:
    """Parse ``LINE,RANGE`` into a :class:`Coordinate`."""
    parts = token.split(",")
    if len(parts) != 2:
        raise ParseError(ErrorKind.INVALID_COORDINATE, f"invalid coordinate {token!r}")
    line = parse_unsigned(parts[0])
    if line is None:
        raise ParseError(ErrorKind.INVALID_COORDINATE, f"invalid line number {parts[0]!r}")
    return Coordinate(line, parse_range(parts[1]))


def parse_error_code(token: str) -> int:
    """Parse a marker code such as ``E303``; the leading sigil is ignored."""
    errno = parse_unsigned(token[1:], U16_MAX)
    if errno is None:
        raise ParseError(ErrorKind.INVALID_ERROR_CODE, f"invalid error code {token!r}")
    return errno
