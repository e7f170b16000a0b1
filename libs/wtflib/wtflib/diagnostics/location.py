"""Source coordinates used by actions and expected diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    """An interval, e.g. of characters within a line.

    Ordering of ``start`` and ``end`` is not checked; ``Range(i, i)`` is the
    degenerate single-position form.
    """

    start: int
    end: int

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}:{self.end}"


@dataclass(frozen=True)
class Coordinate:
    """A character span on one line of a source file."""

    line: int
    range: Range

    def __str__(self) -> str:
        return f"{self.line},{self.range}"
