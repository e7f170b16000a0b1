"""
Conformance: Reference test files - every file under tests/reference parses
Format reference: Document
"""
from pathlib import Path

import pytest

from wtflib import ParseError, WhileyTestFile
from wtflib.fixtures import iter_test_files

REPO_ROOT = Path(__file__).resolve().parents[3]
REFERENCE_DIR = REPO_ROOT / "tests" / "reference"
REFERENCE_FILES = iter_test_files(REFERENCE_DIR)


def test_reference_files_present():
    """The reference directory is not empty."""
    assert REFERENCE_FILES, f"No .test files found in {REFERENCE_DIR}"


@pytest.mark.parametrize("path", REFERENCE_FILES, ids=[p.stem for p in REFERENCE_FILES])
def test_reference_file_parses(path):
    """Reference test files are well formed."""
    try:
        test_file = WhileyTestFile.from_file(path)
    except ParseError as e:
        pytest.fail(f"{path.name}: {e}")
    assert len(test_file.frames) > 0, f"{path.name}: no frames"


@pytest.mark.parametrize("path", REFERENCE_FILES, ids=[p.stem for p in REFERENCE_FILES])
def test_frame_count_matches_delimiters(path):
    """One frame per '===' line."""
    text = path.read_text(encoding="utf-8")
    delimiters = sum(1 for line in text.splitlines() if line.startswith("==="))
    assert len(WhileyTestFile.from_file(path).frames) == delimiters
