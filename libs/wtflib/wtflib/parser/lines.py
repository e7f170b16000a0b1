"""Forward-only cursor over the lines of a test file."""

from __future__ import annotations

import re

# Universal newline boundaries: \r\n, \r or \n.
_NEWLINE = re.compile(r"\r\n|\r|\n")


def split_lines(source: str) -> list[str]:
    """Split *source* into lines without terminators.

    A terminator at the very end of the input does not start a further
    (empty) line, so ``"a\\n"`` and ``"a"`` both yield ``["a"]``.
    """
    lines = _NEWLINE.split(source)
    if lines[-1] == "":
        lines.pop()
    return lines


class LineCursor:
    """Read-only view over a list of lines with a single position of lookahead.

    ``peek`` and ``advance`` must not be called once ``eof`` is True; doing
    so is a programming error and raises ``IndexError``.
    """

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._pos = 0

    @classmethod
    def from_source(cls, source: str) -> LineCursor:
        return cls(split_lines(source))

    def eof(self) -> bool:
        return self._pos >= len(self._lines)

    def peek(self) -> str:
        """Return the current line without consuming it."""
        if self.eof():
            raise IndexError("peek past end of input")
        return self._lines[self._pos]

    def advance(self) -> str:
        """Consume and return the current line."""
        line = self.peek()
        self._pos += 1
        return line

    @property
    def position(self) -> int:
        """Index of the current line (0-based)."""
        return self._pos
