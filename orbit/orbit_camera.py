"""
Orbit Camera Controller
October 19th 2026

OrbitCamera Module
-----------------
This module provides a camera controller that orbits around a target position.
Pointer motion pitches and yaws the camera, two held buttons roll it, and after
every update the camera is placed at a fixed distance from the target looking
straight at it.

The update itself is the pure function orbit(): it takes the current pose, one
tick of input, the settings and the target, and returns the next pose. The
OrbitController class wraps it with the bits of state a frame loop needs to
carry around (settings, target and current pose).
"""

# Imports
import logging
from pyrr import Vector3
import numpy as np
from orbit.camera_pose import CameraPose
from orbit.camera_settings import CameraSettings
from orbit.euler import quaternion_from_yxz, yxz_from_quaternion
from orbit.frame_input import FrameInput

logger = logging.getLogger(__name__)


def clamp(val: float, min_val: float, max_val: float) -> float:
    """
    Clamps an input value to a min/max range.

    Args:
        val (float): the value to clamp
        min_val (float): min allowable value
        max_val (float): max allowable value

    Returns:
        float: the clamped value in range [min_val, max_val]
    """

    return max(min_val, min(max_val, val))


def orbit(pose: CameraPose, frame_input: FrameInput, settings: CameraSettings, target) -> CameraPose:
    """
    Computes the camera pose for the next tick.

    Pointer deltas are applied as-is: they already hold the full motion since the
    previous tick, so scaling them by the tick duration would make the camera
    slower at low frame rates. Roll is a held input and is integrated over time.

    Args:
        pose (CameraPose): the current pose, left untouched
        frame_input (FrameInput): this tick's input
        settings (CameraSettings): speeds, orbit distance and pitch clamp
        target (Vector3): the point the camera orbits and looks at

    Returns:
        CameraPose: the new pose
    """

    delta_pitch = frame_input.dy * settings.pitch_speed
    delta_yaw = frame_input.dx * settings.yaw_speed
    delta_roll = frame_input.roll_direction() * settings.roll_speed * frame_input.elapsed_seconds

    # Obtain the existing yaw, pitch and roll from the orientation
    yaw, pitch, roll = yxz_from_quaternion(pose.orientation)

    # Pitch is truncated at the limits every tick, yaw and roll are unbounded
    pitch = clamp(pitch + delta_pitch, settings.pitch_min, settings.pitch_max)
    yaw = yaw + delta_yaw
    roll = roll + delta_roll
    orientation = quaternion_from_yxz(yaw, pitch, roll)

    # Step back from the target along the new forward axis
    new_pose = CameraPose(pose.position, orientation)
    new_pose.position = Vector3(np.array(target, dtype=np.float64)) - new_pose.forward() * settings.orbit_distance

    return new_pose


class OrbitController:
    """
    Frame-loop facing wrapper around orbit().

    Attributes:
        settings (CameraSettings): the active configuration
        target (Vector3): the point orbited around, may be reassigned between ticks
        pose (CameraPose): the pose produced by the last update
    """

    def __init__(self, pose: CameraPose = None, settings: CameraSettings = None, target=None):
        """
        Initializes the controller.

        Args:
            pose (CameraPose, optional): starting pose. Defaults to the identity pose at the origin.
            settings (CameraSettings, optional): configuration. Defaults to CameraSettings().
            target (Vector3, optional): orbit target. Defaults to the world origin.
        """

        self.settings = settings if settings is not None else CameraSettings()
        self.pose = pose.copy() if pose is not None else CameraPose()
        self._target = Vector3([0.0, 0.0, 0.0])
        if target is not None:
            self.target = target

    @property
    def target(self) -> Vector3:
        return self._target

    @target.setter
    def target(self, value) -> None:
        value = Vector3(np.array(value, dtype=np.float64))
        if not np.all(np.isfinite(value)):
            raise ValueError(f"orbit target must be finite, got {list(value)}")

        logger.debug("Orbit target moved to %s", list(value))
        self._target = value

    def update(self, frame_input: FrameInput) -> CameraPose:
        """
        Applies one tick of input and stores the resulting pose.

        Args:
            frame_input (FrameInput): this tick's input

        Raises:
            ValueError: if the current pose holds non-finite values or a non-unit orientation

        Returns:
            CameraPose: the new pose
        """

        self.pose.validate()

        if logger.isEnabledFor(logging.DEBUG):
            _, pitch, _ = yxz_from_quaternion(self.pose.orientation)
            wanted = pitch + frame_input.dy * self.settings.pitch_speed
            if not self.settings.pitch_min <= wanted <= self.settings.pitch_max:
                logger.debug("Pitch %.4f clamped to range %s", wanted, self.settings.pitch_range)

        self.pose = orbit(self.pose, frame_input, self.settings, self._target)
        return self.pose

    def snap(self) -> CameraPose:
        """
        Re-applies the orbit constraints to the current pose without any input.

        Useful right after construction, when the starting pose was placed by hand.

        Returns:
            CameraPose: the constrained pose
        """

        return self.update(FrameInput())
