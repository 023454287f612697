"""Errors raised while parsing SVG path data."""

from __future__ import annotations

from typing_extensions import Self, override

EXCERPT_LENGTH = 20


class PathDataError(Exception):
    """Base class for all path data errors."""


class _PositionedError(PathDataError):
    """An error at a known offset of the source text."""

    def __init__(self, message: str, source: str, position: int) -> None:
        """Initialize the error.

        Args:
            message: What went wrong.
            source: The complete path data.
            position: The offset at which parsing stopped.
        """
        self.message = message
        self.source = source
        self.position = position
        super().__init__(f"{message} at offset {position}: {self.excerpt!r}")

    @override
    def __reduce__(self) -> tuple[type[Self], tuple[str, str, int]]:
        return (self.__class__, (self.message, self.source, self.position))

    @property
    def remaining(self) -> str:
        """The unparsed rest of the source."""
        return self.source[self.position :]

    @property
    def excerpt(self) -> str:
        """The start of the remaining input, clipped for messages."""
        remaining = self.remaining
        if len(remaining) > EXCERPT_LENGTH:
            return remaining[:EXCERPT_LENGTH] + "..."
        return remaining


class MalformedPathError(_PositionedError, ValueError):
    """The path data does not conform to the grammar."""


class UnsupportedPathError(_PositionedError, NotImplementedError):
    """The path data uses a part of the grammar that is not implemented."""


class InstructionArityError(PathDataError, ValueError):
    """An instruction was built with operands not matching its kind."""
