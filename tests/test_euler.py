from __future__ import annotations

from math import pi, sqrt

import numpy as np
import pytest
from pyrr import Vector3, quaternion

from orbit.euler import EULER_ORDER, quaternion_from_yxz, yxz_from_quaternion


def _rotate(q, v) -> np.ndarray:
    return np.asarray(quaternion.apply_to_vector(q, Vector3(v)))


def test_order_constant() -> None:
    assert EULER_ORDER == "YXZ"


def test_zero_angles_give_identity() -> None:
    q = quaternion_from_yxz(0.0, 0.0, 0.0)

    assert np.allclose(np.asarray(q), [0.0, 0.0, 0.0, 1.0])


def test_yaw_turns_forward_about_world_up() -> None:
    q = quaternion_from_yxz(pi / 2, 0.0, 0.0)

    assert np.allclose(_rotate(q, [0.0, 0.0, -1.0]), [-1.0, 0.0, 0.0], atol=1e-12)


def test_positive_pitch_looks_up() -> None:
    q = quaternion_from_yxz(0.0, pi / 4, 0.0)

    assert np.allclose(_rotate(q, [0.0, 0.0, -1.0]), [0.0, sqrt(0.5), -sqrt(0.5)], atol=1e-12)


def test_roll_is_applied_about_local_forward() -> None:
    # After yawing, roll must spin the up vector around the yawed forward axis
    q = quaternion_from_yxz(pi / 2, 0.0, pi / 2)

    assert np.allclose(_rotate(q, [0.0, 0.0, -1.0]), [-1.0, 0.0, 0.0], atol=1e-12)
    assert np.allclose(_rotate(q, [0.0, 1.0, 0.0]), [0.0, 0.0, 1.0], atol=1e-12)


@pytest.mark.parametrize(
    "yaw, pitch, roll",
    [
        (0.4, 0.0, 0.0),
        (-2.9, 1.2, 0.3),
        (3.0, -1.5608, -3.0),
        (0.7, 0.25, 2.2),
        (-0.1, -0.9, 0.0),
    ],
)
def test_round_trip(yaw: float, pitch: float, roll: float) -> None:
    q = quaternion_from_yxz(yaw, pitch, roll)

    assert yxz_from_quaternion(q) == pytest.approx((yaw, pitch, roll), abs=1e-9)
    assert float(np.linalg.norm(q)) == pytest.approx(1.0, abs=1e-12)


def test_extraction_wraps_yaw_without_changing_rotation() -> None:
    q = quaternion_from_yxz(2 * pi + 0.5, 0.2, 0.0)

    yaw, pitch, roll = yxz_from_quaternion(q)
    assert yaw == pytest.approx(0.5, abs=1e-9)

    rebuilt = quaternion_from_yxz(yaw, pitch, roll)
    assert abs(float(np.dot(np.asarray(rebuilt), np.asarray(q)))) == pytest.approx(1.0, abs=1e-12)
