"""Frames of a Whiley test file."""

from __future__ import annotations

from dataclasses import dataclass

from wtflib.core.actions import Action
from wtflib.diagnostics.marker import Marker


@dataclass(frozen=True)
class Frame:
    """A set of actions on the workspace plus the diagnostics they should produce.

    Actions are applied in order of appearance, though they are not expected
    to overlap.  An empty ``markers`` tuple means the workspace is expected
    to compile cleanly after the actions are applied.
    """

    actions: tuple[Action, ...] = ()
    markers: tuple[Marker, ...] = ()
