"""Parse SVG path data into drawing instructions."""

from __future__ import annotations

from .constants import ARITY, PathInstructionKind
from .errors import (
    InstructionArityError,
    MalformedPathError,
    PathDataError,
    UnsupportedPathError,
)
from .instructions import PathInstruction
from .parser import PathDataParser, parse

__all__ = [
    "ARITY",
    "InstructionArityError",
    "MalformedPathError",
    "PathDataError",
    "PathDataParser",
    "PathInstruction",
    "PathInstructionKind",
    "UnsupportedPathError",
    "parse",
]
