"""Actions which modify the files of a test workspace.

Each frame of a test file carries zero or more actions, applied in the order
they appear.  Actions are a closed sum type: consumers discriminate on the
concrete class rather than querying fields which only some variants have.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass

from wtflib.diagnostics.location import Range


class Action(ABC):
    """Base type for actions. All concrete subclasses are frozen dataclasses."""

    filename: str


@dataclass(frozen=True)
class Create(Action):
    """Create a file which did not previously exist, with the given contents."""

    filename: str
    lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class Remove(Action):
    """Remove an existing file."""

    filename: str


@dataclass(frozen=True)
class Insert(Action):
    """Insert ``lines`` into an existing file, replacing the lines in ``range``."""

    filename: str
    range: Range
    lines: tuple[str, ...] = ()
