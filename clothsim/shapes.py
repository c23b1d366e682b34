"""Ready-made cloths: chains, rectangles and disks of masses."""

from __future__ import annotations

import math

from clothsim.cloth import Cloth
from clothsim.mass import Mass
from clothsim.vector import EPSILON, Vector3D


class ChainCloth(Cloth):
    """A straight line of masses, each linked to the next by a spring."""

    def __init__(
        self,
        mass: float,
        friction: float,
        start: Vector3D,
        end: Vector3D,
        spacing: float,
        k: float,
        fixed: bool = False,
        rest_length: float = -1,
    ) -> None:
        super().__init__()
        if rest_length < 0:
            rest_length = spacing
        direction = end - start
        if direction.norm() < EPSILON:
            raise ValueError("Les deux points de la chaine sont confondus")
        count = int(direction.norm() / spacing + 1 + EPSILON)
        step = ~direction
        for n in range(count):
            self.add_mass(Mass(mass, friction, start + n * spacing * step))
            if n >= 1:
                self.connect(self.masses[-2], self.masses[-1], k, rest_length)
        if fixed:
            self.masses[0].fix()
            self.masses[-1].fix()


class RectangleCloth(Cloth):
    """A rectangular grid of masses linked to their horizontal and vertical neighbours."""

    def __init__(
        self,
        mass: float,
        width: Vector3D,
        length: Vector3D,
        origin: Vector3D,
        friction: float,
        spacing: float,
        k: float,
        fixed: bool = False,
        rest_length: float = -1,
    ) -> None:
        super().__init__()
        if rest_length < 0:
            rest_length = spacing
        if abs(width * length) > EPSILON:
            width = width - (width * ~length) * ~length
        rows = int(width.norm() / spacing + 1 + EPSILON)
        columns = int(length.norm() / spacing + 1 + EPSILON)
        across = ~width
        along = ~length
        for n in range(rows):
            for m in range(columns):
                position = origin + n * spacing * across + m * spacing * along
                self.add_mass(Mass(mass, friction, position))
                on_border = n == 0 or n == rows - 1 or m == 0 or m == columns - 1
                if fixed and on_border:
                    self.masses[-1].fix()
                if m >= 1:
                    self.connect(self.masses[-2], self.masses[-1], k, rest_length)
                if n >= 1:
                    self.connect(self.masses[-columns - 1], self.masses[-1], k, rest_length)


class DiskCloth(Cloth):
    """A disk of masses laid out on rays around a central mass."""

    def __init__(
        self,
        mass: float,
        center: Vector3D,
        normal: Vector3D,
        radius: float,
        spacing: float,
        friction: float,
        k: float,
        fixed: bool = False,
        angle: float = math.pi / 9,
    ) -> None:
        super().__init__()
        if normal.norm() == 0:
            raise ValueError("Le vecteur normal doit être non nul")
        normal = ~normal
        if normal.x != 0:
            u = ~(Vector3D(0, 1, 0) ^ normal)
        else:
            u = ~(Vector3D(1, 0, 0) ^ normal)
        if abs(u * normal) > EPSILON:
            raise ValueError("Les vecteurs u et normal doivent être orthogonaux")

        per_ray = int(radius / spacing)
        rays = int(2 * math.pi / angle)
        chord = 2 * math.sin(angle / 2) * spacing

        for n in range(rays):
            u = ~(math.cos(angle) * u + math.sin(angle) * (normal ^ u))
            for m in range(1, per_ray + 1):
                self.add_mass(Mass(mass, friction, center + m * spacing * ~u))
                if m >= 2:
                    self.connect(self.masses[-2], self.masses[-1], k, spacing)
                if fixed and m == per_ray:
                    self.masses[-1].fix()
                if n >= 1:
                    self.connect(self.masses[-per_ray - 1], self.masses[-1], k, chord * m)
                if n == rays - 1:
                    self.connect(self.masses[m - 1], self.masses[-1], k, chord * m)

        self.add_mass(Mass(mass, friction, center))
        central = self.masses[-1]
        for n in range(rays):
            self.connect(self.masses[n * per_ray], central, k, spacing)