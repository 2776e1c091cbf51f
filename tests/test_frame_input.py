from __future__ import annotations

import pytest

from orbit.frame_input import FrameInput


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (False, False, 0),
        (True, False, -1),
        (False, True, 1),
        (True, True, 0),
    ],
)
def test_roll_direction(left: bool, right: bool, expected: int) -> None:
    assert FrameInput(roll_left=left, roll_right=right).roll_direction() == expected


def test_defaults_are_neutral() -> None:
    frame_input = FrameInput()

    assert (frame_input.dx, frame_input.dy, frame_input.elapsed_seconds) == (0.0, 0.0, 0.0)
    assert frame_input.roll_direction() == 0


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"dx": float("nan")}, "dx"),
        ({"dy": float("-inf")}, "dy"),
        ({"elapsed_seconds": float("inf")}, "elapsed_seconds"),
        ({"elapsed_seconds": -0.01}, ">= 0"),
    ],
)
def test_invalid_input_rejected(kwargs, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        FrameInput(**kwargs)
