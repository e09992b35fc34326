"""Basic value types: nucleus identifiers and three-vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class NucleiData:
    """A nucleus identified by its mass number A and charge number Z.

    Ordering is by mass number first, then by charge number.
    """

    mass_number: int
    charge_number: int

    def __post_init__(self) -> None:
        if self.mass_number < 0 or self.charge_number < 0:
            raise ValueError(
                f"mass and charge numbers must be non-negative, "
                f"got A = {self.mass_number}, Z = {self.charge_number}"
            )

    def __str__(self) -> str:
        return f"A = {self.mass_number}, Z = {self.charge_number}"


def nuclei_slot(mass_number: int, charge_number: int) -> int:
    """Return the dense table index of the nucleus (A, Z) for 0 <= Z <= A."""
    return (mass_number * (mass_number + 1)) // 2 + charge_number


@dataclass(frozen=True)
class Vector3:
    """An immutable Cartesian three-vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def mag2(self) -> float:
        """Squared magnitude."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self) -> float:
        """Magnitude."""
        return math.sqrt(self.mag2())

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"