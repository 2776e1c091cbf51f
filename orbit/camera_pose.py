"""
Orbit Camera Controller
October 19th 2026

Camera Pose Module
------------------
This module provides the camera transform shared between the orbit controller
and whatever renders the scene: a world-space position and a unit quaternion
orientation. The camera looks down its local -Z axis with +Y as its local up,
so forward, up and right are the canonical axes rotated by the orientation.

The pose also knows how to produce the look-at view matrix consumed by an
OpenGL style render loop.
"""

# Imports
from math import asin, atan2
import numpy as np
from pyrr import Matrix44, Quaternion, Vector3, quaternion
from orbit.euler import quaternion_from_yxz

FORWARD = Vector3([0.0, 0.0, -1.0])
UP = Vector3([0.0, 1.0, 0.0])
RIGHT = Vector3([1.0, 0.0, 0.0])


class CameraPose:
    """
    Position and orientation of the camera.

    Attributes:
        position (Vector3): world-space position of the camera
        orientation (Quaternion): unit quaternion rotating camera space into world space
    """

    def __init__(self, position=None, orientation=None):
        """
        Initializes a pose. Defaults to the origin with the identity orientation.

        Args:
            position (Vector3, optional): camera position. Defaults to (0, 0, 0).
            orientation (Quaternion, optional): camera orientation. Defaults to identity.
        """

        if position is None:
            position = [0.0, 0.0, 0.0]
        if orientation is None:
            orientation = Quaternion()

        # Copy into float64 arrays so the pose never aliases the caller's data
        self.position = Vector3(np.array(position, dtype=np.float64))
        self.orientation = Quaternion(np.array(orientation, dtype=np.float64))

    def __repr__(self):
        return f"CameraPose(position={list(self.position)}, orientation={list(self.orientation)})"

    @classmethod
    def looking_at(cls, eye, target) -> "CameraPose":
        """
        Builds a pose at eye whose forward axis points at target, with no roll.

        Args:
            eye (Vector3): camera position
            target (Vector3): point to look at

        Raises:
            ValueError: if eye and target coincide

        Returns:
            CameraPose: the new pose
        """

        eye = Vector3(np.array(eye, dtype=np.float64))
        direction = Vector3(np.array(target, dtype=np.float64)) - eye
        if direction.length == 0:
            raise ValueError("cannot look at a target located at the eye position")
        direction = direction.normalized

        # forward(yaw, pitch) = (-sin(yaw)cos(pitch), sin(pitch), -cos(yaw)cos(pitch))
        pitch = asin(max(-1.0, min(1.0, float(direction.y))))
        yaw = atan2(-float(direction.x), -float(direction.z))

        return cls(eye, quaternion_from_yxz(yaw, pitch, 0.0))

    def _rotate(self, axis: Vector3) -> Vector3:
        return Vector3(quaternion.apply_to_vector(self.orientation, axis))

    def forward(self) -> Vector3:
        """Unit vector the camera is looking along."""
        return self._rotate(FORWARD)

    def up(self) -> Vector3:
        return self._rotate(UP)

    def right(self) -> Vector3:
        return self._rotate(RIGHT)

    def view_matrix(self) -> Matrix44:
        """
        Gets the 4x4 view matrix for rendering from this pose.

        The camera's own up vector is used, so roll shows up in the rendered image.

        Returns:
            Matrix44: A 4x4 view matrix
        """

        return Matrix44.look_at(
            self.position,                   # Camera position
            self.position + self.forward(),  # A point straight ahead
            self.up(),                       # Rolled up direction
            dtype='f4'                       # Float32 type for GPU compatibility
        )

    def validate(self, tolerance: float = 1e-6) -> None:
        """
        Checks the pose before it is handed to the controller.

        Raises:
            ValueError: if any component is non-finite or the orientation is not unit length
        """

        if not np.all(np.isfinite(self.position)):
            raise ValueError(f"camera position must be finite, got {list(self.position)}")
        if not np.all(np.isfinite(self.orientation)):
            raise ValueError(f"camera orientation must be finite, got {list(self.orientation)}")

        norm = float(np.linalg.norm(self.orientation))
        if abs(norm - 1.0) > tolerance:
            raise ValueError(f"camera orientation must be a unit quaternion, norm is {norm}")

    def copy(self) -> "CameraPose":
        return CameraPose(self.position.copy(), self.orientation.copy())
