"""
Orbit Camera Controller
October 19th 2026

Input Sampler Module
--------------------
This module provides the bridge between window input events and the orbit
controller. Window callbacks push pointer motion and button presses into an
InputSampler as they arrive; once per frame the render loop asks it for a
FrameInput covering everything that happened since the previous frame.

Pointer motion is accumulated and cleared on every sample. Button state is
level-triggered and persists until the button is released.
"""

# Imports
from orbit.frame_input import FrameInput

# Button identifiers, matching moderngl-window's mouse button numbering
LEFT = 1
RIGHT = 2


class InputSampler:
    """
    A shared input container filled by window events and drained by the frame loop.

    The left button rolls the camera left and the right button rolls it right.

    Attributes:
        motion_x (float): horizontal pointer motion accumulated since the last sample
        motion_y (float): vertical pointer motion accumulated since the last sample
        pressed (set): buttons currently held down
    """

    def __init__(self):
        """
        Initializes the sampler with no motion and no buttons held.
        """

        self.motion_x = 0.0
        self.motion_y = 0.0
        self.pressed = set()

    def add_motion(self, dx: float, dy: float) -> None:
        """
        Adds one pointer motion event to the accumulator.

        Args:
            dx (float): horizontal motion reported by the event
            dy (float): vertical motion reported by the event
        """

        self.motion_x += dx
        self.motion_y += dy

    def press(self, button: int) -> None:
        self.pressed.add(button)

    def release(self, button: int) -> None:
        self.pressed.discard(button)

    def sample(self, elapsed_seconds: float) -> FrameInput:
        """
        Builds this tick's input and clears the motion accumulator.

        Args:
            elapsed_seconds (float): time since the previous tick

        Returns:
            FrameInput: the input snapshot for the controller
        """

        frame_input = FrameInput(
            dx=self.motion_x,
            dy=self.motion_y,
            roll_left=LEFT in self.pressed,
            roll_right=RIGHT in self.pressed,
            elapsed_seconds=elapsed_seconds,
        )

        # Motion is "since last frame", so start the next frame from zero
        self.motion_x = 0.0
        self.motion_y = 0.0

        return frame_input

    def reset(self):
        """
        Clears accumulated motion and held buttons, e.g. when the window loses focus.
        """

        self.motion_x = 0.0
        self.motion_y = 0.0
        self.pressed.clear()
