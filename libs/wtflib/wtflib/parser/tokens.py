"""Line prefixes recognised by the test file parser."""

from __future__ import annotations

from enum import Enum


class LineKind(Enum):
    """Classification of a raw input line by its leading delimiter."""

    FRAME = "==="  # start of a new frame
    INSERT = ">>>"  # create or insert action header
    REMOVE = "<<<"  # remove action header
    MARKERS = "---"  # start of the frame's expected diagnostics
    TEXT = ""  # anything else

    @classmethod
    def of(cls, line: str) -> LineKind:
        """Classify *line*.  Leading whitespace is significant."""
        for kind in _DELIMITERS:
            if line.startswith(kind.value):
                return kind
        return cls.TEXT


_DELIMITERS: tuple[LineKind, ...] = (
    LineKind.FRAME,
    LineKind.INSERT,
    LineKind.REMOVE,
    LineKind.MARKERS,
)


def is_frame_start(line: str) -> bool:
    return line.startswith(LineKind.FRAME.value)


def is_action_start(line: str) -> bool:
    return LineKind.of(line) in (LineKind.INSERT, LineKind.REMOVE)


def is_marker_start(line: str) -> bool:
    return line.startswith(LineKind.MARKERS.value)


def is_stop_token(line: str) -> bool:
    """Return True if *line* ends a run of content or marker lines."""
    return LineKind.of(line) is not LineKind.TEXT
