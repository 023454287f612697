"""Drawing instructions produced by the path data parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from typing_extensions import Self, override

from .constants import ARITY, COMMAND_KINDS, OPERAND_NAMES, PathInstructionKind
from .errors import InstructionArityError

if TYPE_CHECKING:
    from collections.abc import Iterable

    import numpy.typing as npt


def format_number(value: float) -> str:
    """Format a number as path data without scientific notation.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(-0.25)
        '-0.25'
        >>> format_number(1e-7)
        '0.0000001'
    """
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True)
class PathInstruction:
    """A single drawing instruction.

    The operands of one repetition are laid out as named in
    ``OPERAND_NAMES``; ``operands`` holds one or more repetitions back to back.
    Relative operands are kept as parsed, resolving them against the current
    point is left to the consumer.

    Examples:
        >>> PathInstruction(PathInstructionKind.LINE, True, (1, 2))
        PathInstruction(kind=<PathInstructionKind.LINE: 'L'>, is_absolute=True, operands=(1.0, 2.0))
        >>> str(PathInstruction.from_command("h", [1, 2, 3]))
        'h 1 2 3'
    """  # noqa: E501

    kind: PathInstructionKind
    is_absolute: bool
    operands: tuple[float, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.kind is PathInstructionKind.INVALID:
            raise InstructionArityError("Invalid instructions cannot be built")

        operands = tuple(float(x) for x in self.operands)
        object.__setattr__(self, "operands", operands)

        arity = ARITY[self.kind]
        if arity == 0:
            if operands:
                raise InstructionArityError(
                    f"{self.kind.name} takes no operands, got {len(operands)}"
                )
            return

        if not operands or len(operands) % arity:
            raise InstructionArityError(
                f"{self.kind.name} takes a multiple of {arity} operands, "
                f"got {len(operands)}"
            )

    @classmethod
    def from_command(cls, command: str, operands: Iterable[float] = ()) -> Self:
        """Build an instruction from its one-letter command.

        Raises:
            ValueError: If the letter is not a path command.
        """
        kind = COMMAND_KINDS.get(command.upper())
        if kind is None or len(command) != 1:
            raise ValueError(f"Invalid path command: {command!r}")

        return cls(kind, command.isupper(), tuple(operands))

    @property
    def command(self) -> str:
        """The command letter, upper case if absolute."""
        letter = self.kind.value
        return letter if self.is_absolute else letter.lower()

    @property
    def arity(self) -> int:
        """The number of operands in one repetition."""
        return ARITY[self.kind]

    @property
    def repetitions(self) -> int:
        """The number of operand groups held by the instruction."""
        if not self.arity:
            return 0
        return len(self.operands) // self.arity

    def as_array(self) -> npt.NDArray[np.float64]:
        """The operands as an array of shape (repetitions, arity)."""
        if not self.arity:
            return np.empty((0, 0), dtype=np.float64)

        return np.asarray(self.operands, dtype=np.float64).reshape(
            self.repetitions, self.arity
        )

    def describe(self) -> str:
        """Describe the instruction with one line per repetition."""
        title = self.kind.name.replace("_", " ").title().replace(" ", "")
        lines = [f"{title} (absolute={self.is_absolute})"]
        names = OPERAND_NAMES[self.kind]
        for row in self.as_array():
            values = ", ".join(
                f"{name}={format_number(value)}"
                for name, value in zip(names, row, strict=True)
            )
            lines.append(f"    {values}")
        return "\n".join(lines)

    @override
    def __str__(self) -> str:
        if not self.operands:
            return self.command
        values = " ".join(format_number(x) for x in self.operands)
        return f"{self.command} {values}"
