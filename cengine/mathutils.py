"""Scalar helpers and small vector types."""

from __future__ import annotations

from dataclasses import dataclass


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit value to the closed range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def normalize_range(
    value: float,
    min_value: float,
    max_value: float,
    normalized_min: float,
    normalized_max: float,
) -> float:
    """Map value linearly from [min_value, max_value] to [normalized_min, normalized_max]."""
    fraction = (value - min_value) / (max_value - min_value)
    return fraction * (normalized_max - normalized_min) + normalized_min


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def format(self) -> str:
        """Text form used for logging: a newline then both components."""
        return f"\n{self.x:f} {self.y:f}"


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0