"""Diagnostics subpackage (Layer 0 — zero internal dependencies)."""

from wtflib.diagnostics.location import Coordinate, Range
from wtflib.diagnostics.marker import Marker
from wtflib.diagnostics.severity import DiagnosticSeverity

__all__ = ["Range", "Coordinate", "Marker", "DiagnosticSeverity"]
