"""Expected-diagnostic markers."""

from __future__ import annotations

from dataclasses import dataclass

from wtflib.diagnostics.location import Coordinate


@dataclass(frozen=True)
class Marker:
    """Identifies an expected error at a location in a given source file."""

    errno: int
    filename: str
    location: Coordinate

    def __str__(self) -> str:
        return f"{self.filename}:{self.location}: #{self.errno}"
