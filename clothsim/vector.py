"""Three-dimensional vectors and the physical constants of the simulation."""

from __future__ import annotations

import math
from typing import Iterator

_AXES = ("x", "y", "z")


class Vector3D:
    """A 3D vector. Arithmetic always returns new vectors."""

    __slots__ = _AXES

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def set_coord(self, coordinate: int, value: float) -> None:
        """Set coordinate 0 (x), 1 (y) or 2 (z)."""
        if coordinate not in (0, 1, 2):
            raise IndexError("La coordonnée choisie n'existe pas")
        setattr(self, _AXES[coordinate], float(value))

    def compare(self, other: Vector3D) -> bool:
        """Return True when every coordinate differs by at most EPSILON."""
        return all(abs(a - b) <= EPSILON for a, b in zip(self, other))

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def unit(self) -> Vector3D:
        """Unit vector in the same direction; the null vector for a null vector."""
        n = self.norm()
        if abs(n) < EPSILON:
            return Vector3D()
        return Vector3D(self.x / n, self.y / n, self.z / n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.compare(other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        """Scalar product with a vector, scaling with a number."""
        if isinstance(other, Vector3D):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __xor__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.cross(other)

    def __invert__(self) -> Vector3D:
        return self.unit()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def __repr__(self) -> str:
        return f"Vector3D({self.x!r}, {self.y!r}, {self.z!r})"


G = Vector3D(0.0, 0.0, -9.81)
"""Gravitational acceleration."""

EPSILON = 1e-10
"""Tolerance used for floating-point comparisons."""

DT = 0.01
"""Default time step of cloth simulations."""

SEAM_DELTA = 0.1
"""Distance below which masses of two cloths are sewn together."""

SEAM_K = 1000.0
"""Stiffness of the springs that sew cloths together."""

MASS_DISPLAY_SIZE = 0.05
"""Size of masses when displayed."""

BACKGROUND_COLOR = (0.3, 0.3, 0.3)
"""Background colour (red, green, blue) of the display."""