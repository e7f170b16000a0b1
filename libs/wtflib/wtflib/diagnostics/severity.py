"""Diagnostic severity levels for Whiley test files."""

from __future__ import annotations

from enum import Enum


class DiagnosticSeverity(Enum):
    """Severity level of an expected diagnostic."""

    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value
