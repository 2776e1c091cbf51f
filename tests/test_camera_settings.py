from __future__ import annotations

from dataclasses import FrozenInstanceError
from math import pi

import pytest

from orbit.camera_settings import DEFAULT_PITCH_LIMIT, CameraSettings


def test_defaults() -> None:
    settings = CameraSettings()

    assert settings.orbit_distance == 20.0
    assert settings.pitch_speed == 0.003
    assert settings.yaw_speed == 0.004
    assert settings.roll_speed == 1.0
    assert settings.pitch_range == (-DEFAULT_PITCH_LIMIT, DEFAULT_PITCH_LIMIT)
    assert DEFAULT_PITCH_LIMIT == pytest.approx(pi / 2 - 0.01)


def test_pitch_range_is_normalised_to_float_tuple() -> None:
    settings = CameraSettings(pitch_range=[-1, 1])

    assert settings.pitch_range == (-1.0, 1.0)
    assert settings.pitch_min == -1.0
    assert settings.pitch_max == 1.0


def test_settings_are_frozen() -> None:
    settings = CameraSettings()

    with pytest.raises(FrozenInstanceError):
        settings.orbit_distance = 5.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"orbit_distance": 0.0}, "orbit_distance"),
        ({"orbit_distance": -3.0}, "orbit_distance"),
        ({"yaw_speed": float("nan")}, "yaw_speed"),
        ({"roll_speed": float("inf")}, "roll_speed"),
        ({"pitch_range": (0.5, 0.5)}, "below max"),
        ({"pitch_range": (1.0, -1.0)}, "below max"),
        ({"pitch_range": (-pi / 2, 1.0)}, "strictly inside"),
        ({"pitch_range": (-1.0, 1.6)}, "strictly inside"),
        ({"pitch_range": (-1.0, float("nan"))}, "finite"),
        ({"pitch_range": (0.1,)}, "pair"),
    ],
)
def test_invalid_settings_rejected(kwargs, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        CameraSettings(**kwargs)


def test_pitch_range_need_not_straddle_zero() -> None:
    settings = CameraSettings(pitch_range=(0.1, 0.8))

    assert settings.pitch_range == (0.1, 0.8)


def test_edit_returns_validated_copy() -> None:
    settings = CameraSettings()

    edited = settings.edit(orbit_distance=8.0, yaw_speed=-0.004)

    assert edited.orbit_distance == 8.0
    assert edited.yaw_speed == -0.004
    assert settings.orbit_distance == 20.0
    with pytest.raises(ValueError, match="orbit_distance"):
        settings.edit(orbit_distance=-1.0)


def test_from_mapping() -> None:
    settings = CameraSettings.from_mapping({"orbit_distance": 12.5, "pitch_range": [-0.5, 0.5]})

    assert settings.orbit_distance == 12.5
    assert settings.pitch_range == (-0.5, 0.5)
    assert settings.roll_speed == 1.0


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="unknown camera settings: fov, zoom"):
        CameraSettings.from_mapping({"zoom": 2.0, "fov": 60.0})
