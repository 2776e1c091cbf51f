"""
Orbit Camera Controller
October 19th 2026

Camera Settings Module
----------------------
This module holds the tunable configuration of the orbit camera: how far it
sits from its target, how sensitive it is to pointer motion, how fast it rolls
while a roll button is held, and how far it may pitch up or down.

Settings are immutable. A running program that wants different values asks
for an edited copy, which is validated exactly like a freshly built one.
"""

# Imports
from dataclasses import dataclass, field, fields, replace
from math import isfinite, pi

# Limiting pitch stops the camera flipping over when it passes straight up or down
DEFAULT_PITCH_LIMIT = pi / 2 - 0.01


@dataclass(frozen=True)
class CameraSettings:
    """
    Configuration for the orbit controller.

    Attributes:
        orbit_distance (float): radius of the orbit around the target, must be > 0
        pitch_speed (float): radians of pitch per unit of vertical pointer motion
        yaw_speed (float): radians of yaw per unit of horizontal pointer motion
        roll_speed (float): radians per second of roll while a roll input is held
        pitch_range (tuple): (min, max) pitch clamp in radians, inside (-pi/2, pi/2)
    """

    orbit_distance: float = 20.0
    pitch_speed: float = 0.003
    yaw_speed: float = 0.004
    roll_speed: float = 1.0
    pitch_range: tuple = field(default=(-DEFAULT_PITCH_LIMIT, DEFAULT_PITCH_LIMIT))

    def __post_init__(self):
        # Normalise the range to a tuple of floats so lists from config files work too
        if len(self.pitch_range) != 2:
            raise ValueError(f"pitch_range must be a (min, max) pair, got {self.pitch_range!r}")
        object.__setattr__(self, "pitch_range", (float(self.pitch_range[0]), float(self.pitch_range[1])))

        for name in ("orbit_distance", "pitch_speed", "yaw_speed", "roll_speed"):
            value = getattr(self, name)
            if not isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")

        if self.orbit_distance <= 0:
            raise ValueError(f"orbit_distance must be > 0, got {self.orbit_distance!r}")

        pitch_min, pitch_max = self.pitch_range
        if not (isfinite(pitch_min) and isfinite(pitch_max)):
            raise ValueError(f"pitch_range must be finite, got {self.pitch_range!r}")
        if pitch_min >= pitch_max:
            raise ValueError(f"pitch_range min must be below max, got {self.pitch_range!r}")
        if not (-pi / 2 < pitch_min and pitch_max < pi / 2):
            raise ValueError(f"pitch_range must lie strictly inside (-pi/2, pi/2), got {self.pitch_range!r}")

    @property
    def pitch_min(self) -> float:
        return self.pitch_range[0]

    @property
    def pitch_max(self) -> float:
        return self.pitch_range[1]

    def edit(self, **changes) -> "CameraSettings":
        """
        Returns a copy with some fields changed. The copy is validated again.

        Args:
            **changes: field name to new value

        Returns:
            CameraSettings: the edited settings
        """

        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, mapping: dict) -> "CameraSettings":
        """
        Builds settings from a plain dictionary, e.g. one loaded from a config file.
        Missing keys keep their defaults.

        Args:
            mapping (dict): field name to value

        Raises:
            ValueError: if the mapping holds a key that is not a settings field

        Returns:
            CameraSettings: the validated settings
        """

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"unknown camera settings: {', '.join(unknown)}")

        return cls(**mapping)
