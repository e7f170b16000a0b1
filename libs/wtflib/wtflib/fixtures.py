"""Discovery of test files on disk."""

from __future__ import annotations

from pathlib import Path

TEST_FILE_SUFFIX = ".test"


def iter_test_files(directory: str | Path, suffix: str = TEST_FILE_SUFFIX) -> list[Path]:
    """Return the test files directly inside *directory*, sorted by name."""
    return sorted(p for p in Path(directory).iterdir() if p.is_file() and p.suffix == suffix)
