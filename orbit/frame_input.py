"""
Orbit Camera Controller
October 19th 2026

Frame Input Module
------------------
One tick worth of user input for the orbit controller. Pointer motion is the
total displacement since the previous tick; the roll flags are the state of
the two roll buttons at sampling time; elapsed_seconds is the tick duration.
"""

# Imports
from dataclasses import dataclass
from math import isfinite


@dataclass(frozen=True)
class FrameInput:
    """
    Input snapshot for a single update tick.

    Attributes:
        dx (float): horizontal pointer motion since the last tick (drives yaw)
        dy (float): vertical pointer motion since the last tick (drives pitch)
        roll_left (bool): whether the roll-left input is held
        roll_right (bool): whether the roll-right input is held
        elapsed_seconds (float): duration of this tick, >= 0
    """

    dx: float = 0.0
    dy: float = 0.0
    roll_left: bool = False
    roll_right: bool = False
    elapsed_seconds: float = 0.0

    def __post_init__(self):
        for name in ("dx", "dy", "elapsed_seconds"):
            value = getattr(self, name)
            if not isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")

        if self.elapsed_seconds < 0:
            raise ValueError(f"elapsed_seconds must be >= 0, got {self.elapsed_seconds!r}")

    def roll_direction(self) -> int:
        """
        Rate selector for roll: -1 for left, +1 for right, 0 when both or neither are held.
        """

        direction = 0
        if self.roll_left:
            direction -= 1
        if self.roll_right:
            direction += 1
        return direction
