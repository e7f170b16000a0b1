"""Line-oriented parser for Whiley test files.

A test file is a configuration section followed by frames::

    js.execute.ignore = true
    ====
    >>> main.whiley
    type nat is (int x) where x >= 0
    ---
    E303 main.whiley 1,5:7

Handles:
- ``key = value`` options up to the first frame (blank lines skipped)
- ``===`` frame delimiters (rest of the line ignored)
- ``>>> FILE`` (create) and ``>>> FILE RANGE`` (insert) with verbatim content
- ``<<< FILE`` (remove)
- ``---`` followed by ``CODE FILE LINE,RANGE`` markers

Headers and markers are split on single spaces.  Parsing stops at the first
malformed line by raising :class:`ParseError`; no partial result is returned.
"""

from __future__ import annotations

from wtflib.core.actions import Action, Create, Insert, Remove
from wtflib.core.frames import Frame
from wtflib.core.testfile import WhileyTestFile
from wtflib.core.values import Value
from wtflib.diagnostics.marker import Marker
from wtflib.parser.errors import ErrorKind, ParseError
from wtflib.parser.grammar import parse_coordinate, parse_error_code, parse_range, parse_value
from wtflib.parser.lines import LineCursor
from wtflib.parser.tokens import (
    LineKind,
    is_action_start,
    is_frame_start,
    is_marker_start,
    is_stop_token,
)


class Parser:
    """Single-pass parser over the lines of one test file."""

    def __init__(self, source: str) -> None:
        self._cursor = LineCursor.from_source(source)

    # ------------------------------------------------------------------
    # Top-level test file parsing
    # ------------------------------------------------------------------

    def parse_test_file(self) -> WhileyTestFile:
        """Parse a complete test file."""
        config = self._parse_config()
        frames: list[Frame] = []
        while not self._cursor.eof() and is_frame_start(self._cursor.peek()):
            frames.append(self._parse_frame())
        return WhileyTestFile(config, tuple(frames))

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _parse_config(self) -> dict[str, Value]:
        """Parse ``key = value`` lines up to (not including) the first frame."""
        config: dict[str, Value] = {}
        while not self._cursor.eof() and not is_frame_start(self._cursor.peek()):
            line = self._cursor.advance().strip()
            if not line:
                continue
            key, sep, value = line.partition("=")
            if not sep:
                raise ParseError(ErrorKind.INVALID_CONFIG_OPTION, f"expected 'key = value', got {line!r}")
            # Later options overwrite earlier ones.
            config[key.strip()] = parse_value(value.strip())
        return config

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------

    def _parse_frame(self) -> Frame:
        self._cursor.advance()  # consume '===' line
        actions: list[Action] = []
        while not self._cursor.eof() and is_action_start(self._cursor.peek()):
            actions.append(self._parse_action())
        markers: list[Marker] = []
        if not self._cursor.eof() and is_marker_start(self._cursor.peek()):
            self._cursor.advance()  # consume '---' line
            while not self._cursor.eof() and not is_stop_token(self._cursor.peek()):
                markers.append(self._parse_marker())
        # A frame ends at the next '===' or at end of input.
        if not self._cursor.eof() and not is_frame_start(self._cursor.peek()):
            self._reject_trailing(self._cursor.peek())
        return Frame(tuple(actions), tuple(markers))

    def _reject_trailing(self, line: str) -> None:
        """Raise for a line which can neither continue the frame nor start the next."""
        if is_action_start(line):
            raise ParseError(ErrorKind.INVALID_ACTION, f"action after marker block: {line!r}")
        if is_marker_start(line):
            raise ParseError(ErrorKind.INVALID_MARKER, f"second marker block: {line!r}")
        raise ParseError(ErrorKind.INVALID_ACTION, f"expected '>>>', '<<<' or '---', got {line!r}")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _parse_action(self) -> Action:
        """Parse an action header and the content lines which follow it."""
        header = self._cursor.advance().strip()
        fields = header.split(" ")
        kind = LineKind.of(header)
        if kind is LineKind.REMOVE:
            if len(fields) != 2:
                raise ParseError(ErrorKind.INVALID_ACTION, f"expected '<<< FILE', got {header!r}")
            # Remove carries no content; any lines given are dropped.
            self._parse_content()
            return Remove(fields[1])
        if len(fields) == 2:
            return Create(fields[1], self._parse_content())
        if len(fields) == 3:
            range_ = parse_range(fields[2])
            return Insert(fields[1], range_, self._parse_content())
        raise ParseError(ErrorKind.INVALID_ACTION, f"expected '>>> FILE [RANGE]', got {header!r}")

    def _parse_content(self) -> tuple[str, ...]:
        """Collect verbatim lines up to the next delimiter or end of input."""
        lines: list[str] = []
        while not self._cursor.eof() and not is_stop_token(self._cursor.peek()):
            lines.append(self._cursor.advance())
        return tuple(lines)

    # ------------------------------------------------------------------
    # Markers
    # ------------------------------------------------------------------

    def _parse_marker(self) -> Marker:
        """Parse a ``CODE FILE LINE,RANGE`` line."""
        line = self._cursor.advance().strip()
        fields = line.split(" ")
        if len(fields) != 3:
            raise ParseError(ErrorKind.INVALID_MARKER, f"expected 'CODE FILE LINE,RANGE', got {line!r}")
        errno = parse_error_code(fields[0])
        return Marker(errno, fields[1], parse_coordinate(fields[2]))


def parse(source: str) -> WhileyTestFile:
    """Convenience: parse *source* into a :class:`WhileyTestFile`.

    Raises:
        ParseError: If *source* is not a well-formed test file.
    """
    return Parser(source).parse_test_file()
