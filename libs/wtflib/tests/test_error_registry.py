"""Tests for the diagnostic code registry."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wtflib import DiagnosticSeverity, WhileyTestFile
from wtflib.registry import ErrorCode, ErrorRegistry, RegistryError

REPO_ROOT = Path(__file__).resolve().parents[3]
REGISTRY_PATH = REPO_ROOT / "spec" / "registry" / "errors.yaml"
SCHEMA_PATH = REPO_ROOT / "spec" / "registry" / "schema.json"

REGISTRY_YAML = """\
version: "1.0"
codes:
  303:
    name: subtype_error
    severity: error
    description: not a subtype
  402:
    name: unused_variable
    severity: warning
"""


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    path = tmp_path / "errors.yaml"
    path.write_text(REGISTRY_YAML, encoding="utf-8")
    return path


@pytest.fixture
def schema() -> dict:
    with open(SCHEMA_PATH) as f:
        return json.load(f)


class TestLoad:
    def test_load(self, registry_file: Path) -> None:
        registry = ErrorRegistry.load(registry_file, SCHEMA_PATH)
        assert registry.version == "1.0"
        assert len(registry) == 2
        assert 303 in registry
        assert 404 not in registry

    def test_lookup(self, registry_file: Path) -> None:
        registry = ErrorRegistry.load(registry_file)
        assert registry.lookup(303) == ErrorCode(303, "subtype_error", DiagnosticSeverity.ERROR, "not a subtype")
        assert registry.lookup(402).severity is DiagnosticSeverity.WARNING
        assert registry.lookup(1) is None

    def test_iteration_sorted(self, registry_file: Path) -> None:
        registry = ErrorRegistry.load(registry_file)
        assert [c.errno for c in registry] == [303, 402]

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "errors.yaml"
        path.write_text("codes: [unterminated", encoding="utf-8")
        with pytest.raises(RegistryError, match="Invalid YAML"):
            ErrorRegistry.load(path)

    def test_schema_violation(self, schema: dict) -> None:
        data = {"version": "1.0", "codes": {303: {"name": "x", "severity": "fatal"}}}
        with pytest.raises(RegistryError, match="Schema validation error"):
            ErrorRegistry.from_dict(data, schema)

    def test_missing_codes(self) -> None:
        with pytest.raises(RegistryError):
            ErrorRegistry.from_dict({"version": "1.0"})

    def test_bad_severity_without_schema(self) -> None:
        with pytest.raises(RegistryError, match="Malformed entry"):
            ErrorRegistry.from_dict({"codes": {1: {"name": "x", "severity": "fatal"}}})

    def test_repository_registry(self) -> None:
        registry = ErrorRegistry.load(REGISTRY_PATH, SCHEMA_PATH)
        assert 303 in registry


class TestUnknownMarkers:
    def test_unknown_markers(self, registry_file: Path) -> None:
        registry = ErrorRegistry.load(registry_file)
        wtf = WhileyTestFile.from_str(
            "===\n>>> a\nx\n---\nE303 a 1,1\nE999 a 1,2\n===\n---\nW402 a 2,2\nE1 a 3,3"
        )
        assert [m.errno for m in registry.unknown_markers(wtf)] == [999, 1]

    def test_no_markers(self, registry_file: Path) -> None:
        registry = ErrorRegistry.load(registry_file)
        assert registry.unknown_markers(WhileyTestFile.from_str("===\n>>> a")) == []
