"""Constraints acting on the masses of cloths: hooks and impulses."""

from __future__ import annotations

import math
import warnings
from abc import ABC, abstractmethod
from typing import Iterable

from clothsim.cloth import Cloth
from clothsim.mass import Mass
from clothsim.vector import Vector3D


class Constraint(ABC):
    """A constraint acting inside a sphere of given centre and radius."""

    def __init__(self, position: Vector3D, radius: float) -> None:
        if radius < 0:
            raise ValueError("Contrainte avec rayon negatif")
        self.position = position
        self.radius = radius

    def concerns(self, mass: Mass) -> bool:
        return (self.position - mass.position).norm() <= self.radius

    @abstractmethod
    def apply(self, cloth: Cloth, t: float) -> None:
        """Act on the masses of a cloth at time t."""


class Hook(Constraint):
    """Holds still every mass inside its sphere."""

    def apply(self, cloth: Cloth, t: float) -> None:
        for mass in cloth.masses_in(self):
            mass.add_force(-mass.force)
            mass.velocity = Vector3D()
            mass.fix()


class Impulse(Constraint):
    """Adds a constant force during [start, end] to the masses chosen at construction."""

    def __init__(
        self,
        position: Vector3D,
        radius: float,
        start: float,
        end: float,
        force: Vector3D,
        targets: Cloth | Iterable[Cloth],
    ) -> None:
        super().__init__(position, radius)
        if start < 0:
            raise ValueError("Impulsion avec instant t de debut negatif")
        if end < start:
            start, end = end, start
        self.start = start
        self.end = end
        self.force = force
        if force == Vector3D(0, 0, 0):
            warnings.warn(f"L'Impulsion {id(self):#x} a force nulle", RuntimeWarning, stacklevel=2)
        self.target_cloths: list[Cloth] = [targets] if isinstance(targets, Cloth) else list(targets)
        self.target_masses: list[Mass] = []
        for cloth in self.target_cloths:
            for mass in cloth.masses_in(self):
                self.target_masses.append(mass)
                mass.gravity = False
        if not self.target_masses:
            warnings.warn(
                f"L'impulsion {id(self):#x} ne concerne aucune masse", RuntimeWarning, stacklevel=2
            )

    def _active(self, t: float) -> bool:
        return self.start <= t <= self.end

    def _targets_in(self, cloth: Cloth) -> Iterable[Mass]:
        return (mass for mass in self.target_masses if mass in cloth)

    def apply(self, cloth: Cloth, t: float) -> None:
        if self._active(t):
            for mass in self._targets_in(cloth):
                mass.add_force(self.force)


class SineImpulse(Impulse):
    """An impulse whose force is modulated by a sine of the given frequency."""

    def __init__(
        self,
        position: Vector3D,
        radius: float,
        start: float,
        end: float,
        force: Vector3D,
        frequency: float,
        targets: Cloth | Iterable[Cloth],
    ) -> None:
        super().__init__(position, radius, start, end, force, targets)
        if frequency <= 0:
            raise ValueError("Fréquence d'impulsion sinusoidale negative ou nulle")
        self.frequency = frequency

    def apply(self, cloth: Cloth, t: float) -> None:
        if self._active(t):
            factor = math.sin(2 * math.pi * self.frequency * (t - self.start))
            for mass in self._targets_in(cloth):
                mass.add_force(self.force * factor)