"""Parser subpackage (Layer 2 — depends on core, diagnostics)."""

from wtflib.parser.errors import ErrorKind, ParseError
from wtflib.parser.grammar import parse_coordinate, parse_range, parse_value
from wtflib.parser.lines import LineCursor, split_lines
from wtflib.parser.parser import Parser, parse
from wtflib.parser.tokens import LineKind

__all__ = [
    "LineKind",
    "LineCursor",
    "split_lines",
    "parse_value",
    "parse_range",
    "parse_coordinate",
    "Parser",
    "parse",
    "ErrorKind",
    "ParseError",
]
