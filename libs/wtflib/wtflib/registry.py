"""Registry of the diagnostic codes which test files may expect.

The registry is a YAML document, optionally validated against a JSON Schema::

    version: "1.0"
    codes:
      303:
        name: expected_subtype
        severity: error
        description: Expression is not a subtype of the expected type

Resolving marker codes is deliberately kept out of the parser; this module
is used by tooling which cross-checks parsed test files.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import jsonschema
import yaml

from wtflib.core.testfile import WhileyTestFile
from wtflib.diagnostics.marker import Marker
from wtflib.diagnostics.severity import DiagnosticSeverity


class RegistryError(Exception):
    """Raised when a registry file cannot be loaded or is malformed."""


@dataclass(frozen=True)
class ErrorCode:
    """A single registered diagnostic code."""

    errno: int
    name: str
    severity: DiagnosticSeverity
    description: str = ""


class ErrorRegistry:
    """Lookup table from numeric code to :class:`ErrorCode`."""

    def __init__(self, codes: dict[int, ErrorCode], version: str | None = None) -> None:
        self._codes = dict(codes)
        self.version = version

    @classmethod
    def from_dict(cls, data: dict, schema: dict | None = None) -> ErrorRegistry:
        """Build a registry from already-loaded YAML data."""
        if schema is not None:
            try:
                jsonschema.validate(instance=data, schema=schema)
            except jsonschema.ValidationError as e:
                where = " -> ".join(str(p) for p in e.path)
                raise RegistryError(f"Schema validation error: {e.message}" + (f" at {where}" if where else "")) from e
            except jsonschema.SchemaError as e:
                raise RegistryError(f"Invalid schema: {e.message}") from e
        if not isinstance(data, dict) or not isinstance(data.get("codes"), dict):
            raise RegistryError("Registry must be a mapping with a 'codes' mapping")

        codes: dict[int, ErrorCode] = {}
        for key, defn in data["codes"].items():
            try:
                errno = int(key)
                severity = DiagnosticSeverity(defn.get("severity", "error"))
            except (TypeError, ValueError, AttributeError) as e:
                raise RegistryError(f"Malformed entry for code {key!r}: {e}") from e
            codes[errno] = ErrorCode(
                errno=errno,
                name=defn.get("name", ""),
                severity=severity,
                description=defn.get("description", ""),
            )
        return cls(codes, version=data.get("version"))

    @classmethod
    def load(cls, path: str | Path, schema_path: str | Path | None = None) -> ErrorRegistry:
        """Load a registry from a YAML file, validating it when *schema_path* is given."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RegistryError(f"Invalid YAML in {path}: {e}") from e
        schema = None
        if schema_path is not None:
            try:
                with open(schema_path, encoding="utf-8") as f:
                    schema = json.load(f)
            except json.JSONDecodeError as e:
                raise RegistryError(f"Invalid JSON in {schema_path}: {e}") from e
        return cls.from_dict(data, schema)

    def lookup(self, errno: int) -> ErrorCode | None:
        return self._codes.get(errno)

    def __contains__(self, errno: object) -> bool:
        return errno in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[ErrorCode]:
        return iter(sorted(self._codes.values(), key=lambda c: c.errno))

    def unknown_markers(self, test_file: WhileyTestFile) -> list[Marker]:
        """Return every marker of *test_file* whose code is not registered."""
        return [
            marker
            for frame in test_file.frames
            for marker in frame.markers
            if marker.errno not in self._codes
        ]
