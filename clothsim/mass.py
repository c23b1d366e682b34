"""Point masses subject to spring, friction and gravity forces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from clothsim.vector import G, Vector3D

if TYPE_CHECKING:
    from clothsim.spring import Spring


class Mass:
    """A point mass that accumulates the forces acting on it."""

    def __init__(
        self,
        mass: float,
        friction: float = 0.0,
        position: Vector3D | None = None,
        velocity: Vector3D | None = None,
        acceleration: Vector3D | None = None,
        springs: Iterable[Spring] | None = None,
        fixed: bool = False,
        gravity: bool = True,
    ) -> None:
        if mass <= 0:
            raise ValueError("La masse doit être positive")
        self.mass = mass
        self.friction = friction
        self.position = position if position is not None else Vector3D()
        self.velocity = velocity if velocity is not None else Vector3D()
        self.force = mass * (acceleration if acceleration is not None else G)
        self.springs: list[Spring] = list(springs) if springs is not None else []
        self.fixed = fixed
        self.gravity = gravity

    @property
    def acceleration(self) -> Vector3D:
        return self.force * (1 / self.mass)

    def fix(self, fixed: bool = True) -> None:
        self.fixed = fixed

    def attach_spring(self, spring: Spring) -> None:
        self.springs.append(spring)

    def detach_spring(self, spring: Spring, delete: bool = True) -> None:
        """Remove a spring; with delete, the spring is detached from both its ends."""
        if delete:
            spring.detach()
        else:
            self.springs = [s for s in self.springs if s is not spring]

    def add_force(self, force: Vector3D) -> None:
        if not self.fixed:
            self.force = self.force + force

    def update_forces(self) -> None:
        """Recompute the total force from springs, friction and gravity."""
        if self.fixed:
            self.force = Vector3D()
            return
        restoring = Vector3D()
        for spring in self.springs:
            restoring = restoring + spring.restoring_force(self)
        friction = self.velocity * (-self.friction)
        self.force = restoring + friction
        if self.gravity:
            self.force = self.force + self.mass * G

    def describe(self) -> str:
        ident = f"{id(self):#x}"
        lines = [
            f"===== Masse {ident} =====",
            f"Fixe : {'oui' if self.fixed else 'non'}",
            f"Masse de la masse : {self.mass:g}kg",
            f"Coefficient de frottement : {self.friction:g}",
            f"Position : {self.position}",
            f"Vitesse : {self.velocity}",
            f"Force subie : {self.force}",
        ]
        header = f"{len(self.springs)} ressorts "
        if self.springs:
            lines.append(header + " :")
            lines.extend(f"{id(spring):#x}" for spring in self.springs)
        else:
            lines.append(header)
        lines.append(f"===== Masse {ident} =====")
        return "\n".join(lines) + "\n"

    def draw_on(self, canvas) -> None:
        canvas.draw_mass(self)

    def check_attached(self) -> None:
        """Raise RuntimeError unless the mass has springs that all connect to it."""
        if not self.springs:
            raise RuntimeError("La masse n'est lié à aucun ressort")
        for spring in self.springs:
            spring.check_connected(self)

    def check_spring(self, spring: Spring) -> None:
        if not any(s is spring for s in self.springs):
            raise RuntimeError("Le ressort n'est pas attaché à la masse choisie")

    def __str__(self) -> str:
        return self.describe()