"""Recursive descent parser for SVG path data.

The grammar follows https://www.w3.org/TR/SVG11/paths.html#PathDataBNF with
two deliberate restrictions: numbers in scientific notation are rejected as
unsupported, and arc flags must be the single characters ``0`` or ``1``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import constants
from .constants import (
    COMMA,
    COMMAND_KINDS,
    COMMANDS,
    DIGITS,
    EXPONENT,
    FLAGS,
    SIGNS,
    WHITESPACE,
    PathInstructionKind,
)
from .errors import MalformedPathError, UnsupportedPathError
from .instructions import PathInstruction

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

Operands = list[float]


class PathDataParser:
    """Parse the value of a path's ``d`` attribute into instructions.

    A parser reads its source once. Create a new parser for every string.

    Examples:
        >>> [str(x) for x in PathDataParser("M0,0 L1,1 2,2").parse()]
        ['M 0 0', 'L 1 1', 'L 2 2']
    """

    def __init__(self, source: str) -> None:
        """Initialize the parser.

        Args:
            source: The path data to parse.
        """
        self.source = source
        self.position = 0
        self._instructions: list[PathInstruction] = []
        self._parsed = False
        self._repeated: dict[PathInstructionKind, Callable[[], Operands]] = {
            PathInstructionKind.CUBIC_CURVE: self.parse_coordinate_pair_triplet,
            PathInstructionKind.SMOOTH_CUBIC_CURVE: self.parse_coordinate_pair_double,
            PathInstructionKind.QUADRATIC_CURVE: self.parse_coordinate_pair_double,
            PathInstructionKind.SMOOTH_QUADRATIC_CURVE: self.parse_coordinate_pair,
            PathInstructionKind.ELLIPTICAL_ARC: self.parse_elliptical_arc_argument,
        }

    def parse(self) -> list[PathInstruction]:
        """Parse the whole source.

        Raises:
            MalformedPathError: If the source does not follow the grammar.
            UnsupportedPathError: If the source uses scientific notation.
            RuntimeError: If the parser was used before.
        """
        if self._parsed:
            raise RuntimeError("PathDataParser instances can only parse once")
        self._parsed = True

        self.parse_whitespace()
        while not self.done():
            self.parse_drawto()
            self.parse_whitespace()

        instructions = self._instructions
        if instructions and instructions[0].kind is not PathInstructionKind.MOVE:
            raise MalformedPathError(
                "Path data must begin with a move command", self.source, 0
            )

        logger.debug(
            "Parsed %d instructions from %d characters",
            len(instructions),
            len(self.source),
        )
        if constants.TRACE_INSTRUCTIONS:
            for instruction in instructions:
                logger.debug("%s", instruction.describe())

        return instructions

    def error(self, message: str, position: int | None = None) -> MalformedPathError:
        """Build an error for ``position``, the current position by default."""
        if position is None:
            position = self.position
        return MalformedPathError(message, self.source, position)

    # scanner

    def done(self) -> bool:
        """If the whole source was consumed."""
        return self.position >= len(self.source)

    def ch(self) -> str:
        """The current character, empty at the end of the source."""
        return self.source[self.position : self.position + 1]

    def consume(self) -> str:
        """Return the current character and advance past it."""
        c = self.ch()
        self.position += 1
        return c

    def match(self, chars: str) -> bool:
        """If the current character is one of ``chars``."""
        return not self.done() and self.ch() in chars

    def match_whitespace(self) -> bool:
        return not self.done() and self.ch() in WHITESPACE

    def match_comma_whitespace(self) -> bool:
        return self.match_whitespace() or self.match(COMMA)

    def match_number(self) -> bool:
        """If a number starts at the current position."""
        return self.match(DIGITS) or self.match(SIGNS)

    # productions

    def parse_drawto(self) -> None:
        """Parse one command letter and all its operands."""
        if not self.match(COMMANDS):
            raise self.error(f"Expected a path command, got {self.ch()!r}")

        letter = self.consume()
        kind = COMMAND_KINDS[letter.upper()]
        absolute = letter.isupper()

        if kind is PathInstructionKind.CLOSE_PATH:
            self._instructions.append(PathInstruction(kind, absolute))
            return

        self.parse_whitespace()

        if kind in (PathInstructionKind.MOVE, PathInstructionKind.LINE):
            for pair in self.parse_coordinate_pair_sequence():
                self._instructions.append(PathInstruction(kind, absolute, pair))

        elif kind in (
            PathInstructionKind.HORIZONTAL_LINE,
            PathInstructionKind.VERTICAL_LINE,
        ):
            sequence = self.parse_coordinate_sequence()
            self._instructions.append(PathInstruction(kind, absolute, sequence))

        else:
            parse_operands = self._repeated[kind]
            while True:
                operands = parse_operands()
                self._instructions.append(PathInstruction(kind, absolute, operands))
                if not self.parse_repetition_separator():
                    break

    def parse_repetition_separator(self) -> bool:
        """Consume the separator after a repetition.

        Returns:
            If another repetition follows.
        """
        self.parse_comma_whitespace()
        return self.match_number()

    def parse_coordinate_sequence(self) -> Operands:
        sequence = [self.parse_number()]
        while self.parse_repetition_separator():
            sequence.append(self.parse_number())
        return sequence

    def parse_coordinate_pair_sequence(self) -> list[Operands]:
        sequence = [self.parse_coordinate_pair()]
        while self.parse_repetition_separator():
            sequence.append(self.parse_coordinate_pair())
        return sequence

    def parse_coordinate_pair(self) -> Operands:
        x = self.parse_number()
        self.parse_comma_whitespace()
        y = self.parse_number()
        return [x, y]

    def parse_coordinate_pair_double(self) -> Operands:
        first = self.parse_coordinate_pair()
        self.parse_comma_whitespace()
        return first + self.parse_coordinate_pair()

    def parse_coordinate_pair_triplet(self) -> Operands:
        first = self.parse_coordinate_pair_double()
        self.parse_comma_whitespace()
        return first + self.parse_coordinate_pair()

    def parse_elliptical_arc_argument(self) -> Operands:
        """Parse ``rx ry x-axis-rotation large-arc-flag sweep-flag x y``."""
        numbers: Operands = []
        for _ in range(3):
            numbers.append(self.parse_number())
            self.parse_comma_whitespace()
        numbers.append(self.parse_flag())
        self.parse_comma_whitespace()
        numbers.append(self.parse_flag())
        self.parse_comma_whitespace()
        numbers.extend(self.parse_coordinate_pair())
        return numbers

    def parse_whitespace(self) -> None:
        while self.match_whitespace():
            self.position += 1

    def parse_comma_whitespace(self) -> None:
        """Consume optional whitespace, an optional comma and whitespace."""
        if not self.match_comma_whitespace():
            return

        self.parse_whitespace()
        if self.match(COMMA):
            self.position += 1
            self.parse_whitespace()

    def parse_number(self) -> float:
        """Parse a signed decimal number.

        Raises:
            MalformedPathError: If no digits are found.
            UnsupportedPathError: If the number has an exponent.
        """
        start = self.position
        if self.match(SIGNS):
            self.position += 1

        digits = self.parse_digits()
        if self.match("."):
            self.position += 1
            digits += self.parse_digits()

        if not digits:
            raise self.error("Expected a number", start)

        if self.match(EXPONENT):
            raise UnsupportedPathError(
                "Scientific notation is not supported", self.source, self.position
            )

        return float(self.source[start : self.position])

    def parse_digits(self) -> int:
        """Consume consecutive digits and return how many there were."""
        start = self.position
        while self.match(DIGITS):
            self.position += 1
        return self.position - start

    def parse_flag(self) -> float:
        """Parse an arc flag, the single character ``0`` or ``1``."""
        if not self.match(FLAGS):
            raise self.error(f"Expected a flag (0 or 1), got {self.ch()!r}")
        return float(self.consume())


def parse(source: str) -> list[PathInstruction]:
    """Parse SVG path data into drawing instructions.

    Args:
        source: The path data, e.g. the ``d`` attribute of a ``<path>``.

    Returns:
        The instructions in source order, empty for empty path data.

    Raises:
        TypeError: If ``source`` is not a string.
        MalformedPathError: If the source does not follow the grammar.
        UnsupportedPathError: If the source uses scientific notation.

    Examples:
        >>> [str(x) for x in parse("M0,0 H1 2 3")]
        ['M 0 0', 'H 1 2 3']
        >>> parse("")
        []
    """
    if not isinstance(source, str):
        raise TypeError(f"Path data must be a string, got {type(source).__name__}")

    return PathDataParser(source).parse()
