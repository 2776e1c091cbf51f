"""
Orbit Camera Controller
October 19th 2026

Euler Module
------------
Conversions between unit quaternions and yaw/pitch/roll angles.

Every conversion here uses the intrinsic Y-X-Z order: yaw about the world up
axis, then pitch about the local right axis, then roll about the local forward
axis. Extraction and recomposition must agree on this order, otherwise the
orientation drifts a little every frame.
"""

# Imports
from math import asin, atan2
from pyrr import Quaternion, quaternion

EULER_ORDER = "YXZ"


def quaternion_from_yxz(yaw: float, pitch: float, roll: float) -> Quaternion:
    """
    Builds a unit quaternion from yaw, pitch and roll (radians), Y-X-Z order.

    Args:
        yaw (float): rotation about +Y
        pitch (float): rotation about the local +X
        roll (float): rotation about the local +Z

    Returns:
        Quaternion: q = Ry(yaw) * Rx(pitch) * Rz(roll)
    """

    q_yaw = Quaternion.from_y_rotation(yaw)
    q_pitch = Quaternion.from_x_rotation(pitch)
    q_roll = Quaternion.from_z_rotation(roll)

    # Hamilton product, right-most rotation is applied first
    q = quaternion.cross(quaternion.cross(q_yaw, q_pitch), q_roll)
    return Quaternion(quaternion.normalize(q))


def yxz_from_quaternion(q) -> tuple:
    """
    Decomposes a unit quaternion into (yaw, pitch, roll), Y-X-Z order.

    Yaw and roll come back in [-pi, pi] and pitch in [-pi/2, pi/2]. The result
    recomposes to the same rotation as long as pitch stays off the poles.

    Args:
        q (Quaternion): unit quaternion laid out as (x, y, z, w)

    Returns:
        tuple: (yaw, pitch, roll) in radians
    """

    x, y, z, w = (float(c) for c in q)

    # Rotation matrix terms: R12 = -sin(pitch), R02/R22 give yaw, R10/R11 give roll
    sin_pitch = 2.0 * (w * x - y * z)
    pitch = asin(max(-1.0, min(1.0, sin_pitch)))
    yaw = atan2(2.0 * (x * z + w * y), 1.0 - 2.0 * (x * x + y * y))
    roll = atan2(2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z))

    return yaw, pitch, roll
