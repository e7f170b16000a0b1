"""Core subpackage (Layer 1 — depends only on diagnostics)."""

from wtflib.core.actions import Action, Create, Insert, Remove
from wtflib.core.frames import Frame
from wtflib.core.testfile import WhileyTestFile
from wtflib.core.values import BoolValue, IntValue, StringValue, Value

__all__ = [
    "Value",
    "IntValue",
    "BoolValue",
    "StringValue",
    "Action",
    "Create",
    "Remove",
    "Insert",
    "Frame",
    "WhileyTestFile",
]
