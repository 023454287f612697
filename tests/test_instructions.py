"""Tests the drawing instruction type."""

from __future__ import annotations

import numpy as np
import pytest

from svg_path_data import (
    ARITY,
    InstructionArityError,
    PathInstruction,
    PathInstructionKind,
    parse,
)

K = PathInstructionKind


@pytest.mark.parametrize(
    ("kind", "operands"),
    [
        (K.MOVE, ()),
        (K.MOVE, (1,)),
        (K.LINE, (1, 2, 3)),
        (K.CUBIC_CURVE, (1, 2, 3, 4)),
        (K.ELLIPTICAL_ARC, tuple(range(8))),
        (K.HORIZONTAL_LINE, ()),
        (K.CLOSE_PATH, (1,)),
    ],
)
def test_arity(kind: PathInstructionKind, operands: tuple[float, ...]) -> None:
    with pytest.raises(InstructionArityError):
        PathInstruction(kind, True, operands)


def test_invalid_kind() -> None:
    with pytest.raises(InstructionArityError, match="Invalid"):
        PathInstruction(K.INVALID, True)


def test_operands_are_floats() -> None:
    instruction = PathInstruction(K.LINE, False, [1, np.float32(2.5)])

    assert instruction.operands == (1.0, 2.5)
    assert all(type(x) is float for x in instruction.operands)


def test_value_semantics() -> None:
    a = PathInstruction(K.LINE, True, (1, 2))
    b = PathInstruction(K.LINE, True, [1.0, 2.0])

    assert a == b
    assert hash(a) == hash(b)
    assert a != PathInstruction(K.LINE, False, (1, 2))

    with pytest.raises(AttributeError):
        a.operands = (3, 4)  # type: ignore[misc]


@pytest.mark.parametrize(
    ("command", "kind", "absolute"),
    [
        ("M", K.MOVE, True),
        ("z", K.CLOSE_PATH, False),
        ("t", K.SMOOTH_QUADRATIC_CURVE, False),
        ("S", K.SMOOTH_CUBIC_CURVE, True),
    ],
)
def test_from_command(command: str, kind: PathInstructionKind, absolute: bool) -> None:
    operands = [0.0] * ARITY[kind]
    instruction = PathInstruction.from_command(command, operands)

    assert instruction.kind is kind
    assert instruction.is_absolute is absolute
    assert instruction.command == command


@pytest.mark.parametrize("command", ["X", "", "ML", "e"])
def test_from_invalid_command(command: str) -> None:
    with pytest.raises(ValueError, match="Invalid path command"):
        PathInstruction.from_command(command)


def test_as_array() -> None:
    instruction = PathInstruction.from_command("C", range(12))

    array = instruction.as_array()

    assert instruction.repetitions == 2
    assert array.dtype == np.float64
    np.testing.assert_array_equal(array, np.arange(12, dtype=np.float64).reshape(2, 6))


def test_as_array_horizontal() -> None:
    (_, horizontal) = parse("M0 0 H1 2 3")

    np.testing.assert_array_equal(horizontal.as_array(), [[1.0], [2.0], [3.0]])


def test_as_array_close_path() -> None:
    instruction = PathInstruction.from_command("Z")

    assert instruction.repetitions == 0
    assert instruction.as_array().shape == (0, 0)


def test_describe_arc() -> None:
    instruction = PathInstruction.from_command("a", [15, 15, 0, 1, 0, 30, -0.5])

    assert instruction.describe() == (
        "EllipticalArc (absolute=False)\n"
        "    rx=15, ry=15, x-axis-rotation=0, large-arc-flag=1, sweep-flag=0,"
        " x=30, y=-0.5"
    )


def test_describe_close_path() -> None:
    assert PathInstruction.from_command("Z").describe() == "ClosePath (absolute=True)"


@pytest.mark.parametrize(
    ("instruction", "text"),
    [
        (PathInstruction.from_command("M", [1, 2]), "M 1 2"),
        (PathInstruction.from_command("z"), "z"),
        (PathInstruction.from_command("v", [0.1, -2]), "v 0.1 -2"),
        (PathInstruction.from_command("L", [1e-7, 1e20]), "L 0.0000001 100000000000000000000"),  # noqa: E501
    ],
)
def test_str(instruction: PathInstruction, text: str) -> None:
    assert str(instruction) == text


def test_str_reparses() -> None:
    line = PathInstruction.from_command("L", [1e-7, 1e20])

    assert parse(f"M0 0 {line}")[1] == line
