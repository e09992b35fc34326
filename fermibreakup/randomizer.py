"""Random sampling helpers shared by the break-up model."""

from __future__ import annotations

import math
import random

from fermibreakup.datatypes import Vector3

_generator = random.Random()


def seed(value: int | None) -> None:
    """Reseed the shared generator; ``None`` draws fresh entropy."""
    _generator.seed(value)


def uniform() -> float:
    """Return a uniform sample from [0, 1)."""
    return _generator.random()


def normal(mean: float = 0.0, deviation: float = 1.0) -> float:
    """Return a sample from the normal distribution N(mean, deviation)."""
    return mean + _generator.gauss(0.0, 1.0) * deviation


def isotropic_vector(magnitude: float = 1.0) -> Vector3:
    """Return a vector of the given magnitude with uniformly random direction."""
    cos_theta = 1.0 - 2.0 * uniform()
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
    phi = 2.0 * math.pi * uniform()
    return Vector3(
        magnitude * math.cos(phi) * sin_theta,
        magnitude * math.sin(phi) * sin_theta,
        magnitude * cos_theta,
    )


def probability_distribution(point_count: int) -> list[float]:
    """Return ``point_count`` sorted points in [0, 1], starting at 0 and ending at 1."""
    if point_count < 2:
        raise ValueError(f"point_count must be at least 2, got {point_count}")
    points = [0.0, *(uniform() for _ in range(point_count - 2)), 1.0]
    points.sort()
    return points