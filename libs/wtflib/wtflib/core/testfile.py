"""The parsed form of a complete Whiley test file."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from wtflib.core.frames import Frame
from wtflib.core.values import BoolValue, IntValue, StringValue, Value


class WhileyTestFile:
    """A test file: leading configuration options followed by a sequence of frames.

    Instances are immutable and are normally obtained through
    :meth:`from_str` or :meth:`from_file`.
    """

    def __init__(self, config: Mapping[str, Value], frames: tuple[Frame, ...]) -> None:
        self._config = MappingProxyType(dict(config))
        self._frames = tuple(frames)

    @classmethod
    def from_str(cls, source: str) -> WhileyTestFile:
        """Parse a test file from its text.

        Raises:
            ParseError: On the first malformed line.
        """
        # Imported here: wtflib.parser imports this module.
        from wtflib.parser.parser import parse

        return parse(source)

    @classmethod
    def from_file(cls, path: str | Path) -> WhileyTestFile:
        """Read and parse the UTF-8 test file at *path*."""
        return cls.from_str(Path(path).read_text(encoding="utf-8"))

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> Mapping[str, Value]:
        """Read-only view of all configuration options."""
        return self._config

    def get(self, key: str) -> Value | None:
        """Get configuration option associated with the given key."""
        return self._config.get(key)

    def get_int(self, key: str) -> int | None:
        """Get an integer option, or None if missing or not an integer."""
        value = self._config.get(key)
        if isinstance(value, IntValue):
            return value.value
        return None

    def get_bool(self, key: str) -> bool | None:
        """Get a boolean option, or None if missing or not a boolean."""
        value = self._config.get(key)
        if isinstance(value, BoolValue):
            return value.value
        return None

    def get_str(self, key: str) -> str | None:
        """Get a string option, or None if missing or not a string."""
        value = self._config.get(key)
        if isinstance(value, StringValue):
            return value.value
        return None

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self._frames

    def frame(self, index: int) -> Frame:
        """Return the frame at position *index*."""
        return self._frames[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WhileyTestFile):
            return NotImplemented
        return dict(self._config) == dict(other._config) and self._frames == other._frames

    def __hash__(self) -> int:
        return hash((frozenset(self._config.items()), self._frames))

    def __repr__(self) -> str:
        return f"WhileyTestFile(config={dict(self._config)!r}, frames={self._frames!r})"
