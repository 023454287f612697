"""Constants for the SVG path data parser."""

from __future__ import annotations

import os
from enum import Enum


class PathInstructionKind(Enum):
    """The kind of a drawing instruction."""

    MOVE = "M"
    CLOSE_PATH = "Z"
    LINE = "L"
    HORIZONTAL_LINE = "H"
    VERTICAL_LINE = "V"
    CUBIC_CURVE = "C"
    SMOOTH_CUBIC_CURVE = "S"
    QUADRATIC_CURVE = "Q"
    SMOOTH_QUADRATIC_CURVE = "T"
    ELLIPTICAL_ARC = "A"
    INVALID = ""


COMMANDS = r"MZLHVCSQTAmzlhvcsqta"
"""A string containing all the valid SVG path commands."""

COMMAND_KINDS: dict[str, PathInstructionKind] = {
    kind.value: kind for kind in PathInstructionKind if kind.value
}
"""Maps an upper case command letter to its instruction kind."""

ARITY: dict[PathInstructionKind, int] = {
    PathInstructionKind.MOVE: 2,
    PathInstructionKind.CLOSE_PATH: 0,
    PathInstructionKind.LINE: 2,
    PathInstructionKind.HORIZONTAL_LINE: 1,
    PathInstructionKind.VERTICAL_LINE: 1,
    PathInstructionKind.CUBIC_CURVE: 6,
    PathInstructionKind.SMOOTH_CUBIC_CURVE: 4,
    PathInstructionKind.QUADRATIC_CURVE: 4,
    PathInstructionKind.SMOOTH_QUADRATIC_CURVE: 2,
    PathInstructionKind.ELLIPTICAL_ARC: 7,
}
"""The number of operands in one repetition of each instruction kind."""

OPERAND_NAMES: dict[PathInstructionKind, tuple[str, ...]] = {
    PathInstructionKind.MOVE: ("x", "y"),
    PathInstructionKind.CLOSE_PATH: (),
    PathInstructionKind.LINE: ("x", "y"),
    PathInstructionKind.HORIZONTAL_LINE: ("x",),
    PathInstructionKind.VERTICAL_LINE: ("y",),
    PathInstructionKind.CUBIC_CURVE: ("x1", "y1", "x2", "y2", "x", "y"),
    PathInstructionKind.SMOOTH_CUBIC_CURVE: ("x2", "y2", "x", "y"),
    PathInstructionKind.QUADRATIC_CURVE: ("x1", "y1", "x", "y"),
    PathInstructionKind.SMOOTH_QUADRATIC_CURVE: ("x", "y"),
    PathInstructionKind.ELLIPTICAL_ARC: (
        "rx",
        "ry",
        "x-axis-rotation",
        "large-arc-flag",
        "sweep-flag",
        "x",
        "y",
    ),
}
"""Operand names of one repetition, used for debug output."""

WHITESPACE = frozenset("\t \n\f\r")
"""The whitespace characters recognized by the path data grammar."""

DIGITS = "0123456789"
COMMA = ","
SIGNS = "+-"
EXPONENT = "eE"
FLAGS = "01"

DEBUG_ENV = "SVG_PATH_DATA_DEBUG"
"""Set to ``1`` to log every parsed instruction at debug level."""

TRACE_INSTRUCTIONS = os.environ.get(DEBUG_ENV, "0") == "1"
