"""wtflib — parser and data model for Whiley test files."""

from wtflib.core import (
    Action,
    BoolValue,
    Create,
    Frame,
    Insert,
    IntValue,
    Remove,
    StringValue,
    Value,
    WhileyTestFile,
)
from wtflib.diagnostics import Coordinate, DiagnosticSeverity, Marker, Range
from wtflib.parser import ErrorKind, ParseError, parse

__all__ = [
    "WhileyTestFile",
    "Frame",
    "Action",
    "Create",
    "Remove",
    "Insert",
    "Marker",
    "Coordinate",
    "Range",
    "DiagnosticSeverity",
    "Value",
    "IntValue",
    "BoolValue",
    "StringValue",
    "ErrorKind",
    "ParseError",
    "parse",
]
