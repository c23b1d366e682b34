"""Springs linking two masses."""

from __future__ import annotations

from clothsim.mass import Mass
from clothsim.vector import Vector3D


class Spring:
    """A linear spring between two masses; it registers itself on both."""

    def __init__(self, mass1: Mass, mass2: Mass, k: float, rest_length: float) -> None:
        if k <= 0:
            raise ValueError("La constante de raideur doit être  strictement positive")
        if rest_length < 0:
            raise ValueError("La longueur à repos doit être positive")
        self.mass1 = mass1
        self.mass2 = mass2
        self.k = k
        self.rest_length = rest_length
        mass1.attach_spring(self)
        mass2.attach_spring(self)

    def restoring_force(self, mass: Mass) -> Vector3D:
        """Force the spring exerts on one of its two masses."""
        offset = self.mass1.position - self.mass2.position
        force = ~offset * (-self.k * (offset.norm() - self.rest_length))
        if mass is self.mass1:
            return force
        if mass is self.mass2:
            return -force
        raise ValueError("La masse n'est pas reliée au ressort")

    @property
    def length(self) -> float:
        return (self.mass1.position - self.mass2.position).norm()

    def detach(self) -> None:
        """Remove the spring from both of its masses."""
        self.mass1.detach_spring(self, delete=False)
        self.mass2.detach_spring(self, delete=False)

    def describe(self, full: bool = False) -> str:
        ident = f"{id(self):#x}"
        parts = [
            f"===== Ressort {ident} =====\n",
            f"Constante de raideur : {self.k:g}\n",
            f"Longeur à repos : {self.rest_length:g}\n",
            "Masses associées au ressort :\n",
            f"Masse depart : {id(self.mass1):#x}\n",
        ]
        if full:
            parts.append(self.mass1.describe())
        parts.append(f"Masse arrivée : {id(self.mass2):#x}\n")
        if full:
            parts.append(self.mass2.describe())
        parts.append(f"===== Ressort {ident} =====\n")
        return "".join(parts)

    def draw_on(self, canvas) -> None:
        canvas.draw_spring(self)

    def check_masses(self) -> None:
        if self.mass1 is self.mass2:
            raise RuntimeError("Le ressort est attaché aux deux extremités à la même masse")

    def check_connected(self, mass: Mass) -> None:
        if mass is not self.mass1 and mass is not self.mass2:
            raise RuntimeError("La masse n'est pas connecté au ressort choisi")

    def __str__(self) -> str:
        return self.describe()