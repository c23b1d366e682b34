"""Cloths: sets of masses linked by springs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from clothsim.drawing import Canvas, Drawable
from clothsim.mass import Mass
from clothsim.spring import Spring

if TYPE_CHECKING:
    from clothsim.constraint import Constraint
    from clothsim.integrator import Integrator


class Cloth(Drawable):
    """A collection of masses and the springs that this cloth owns."""

    def __init__(self, masses: Mass | Iterable[Mass] | None = None) -> None:
        if masses is None:
            self.masses: list[Mass] = []
        elif isinstance(masses, Mass):
            self.masses = [masses]
        else:
            self.masses = list(masses)
        self.springs: list[Spring] = []

    def add_mass(self, mass: Mass) -> None:
        self.masses.append(mass)

    def connect(self, mass1: Mass, mass2: Mass, k: float, rest_length: float) -> Spring:
        """Link two masses with a new spring owned by this cloth."""
        spring = Spring(mass1, mass2, k, rest_length)
        self.springs.append(spring)
        return spring

    def __contains__(self, mass: object) -> bool:
        return any(m is mass for m in self.masses)

    def update_forces(self) -> None:
        for mass in self.masses:
            mass.update_forces()

    def evolve(self, integrator: Integrator) -> None:
        for mass in self.masses:
            integrator.evolve(mass)

    def masses_in(self, constraint: Constraint) -> list[Mass]:
        """Masses of this cloth that lie in the region of a constraint."""
        return [mass for mass in self.masses if constraint.concerns(mass)]

    def check(self) -> None:
        """Raise RuntimeError if a mass or a spring is badly connected."""
        for mass in self.masses:
            mass.check_attached()
        for spring in self.springs:
            spring.check_masses()

    def describe(self) -> str:
        banner = f"============ Tissu {id(self):#x} ============\n"
        return "".join(
            [
                banner,
                "\n".join(mass.describe() for mass in self.masses),
                "\n\n",
                "\n".join(spring.describe(False) for spring in self.springs),
                banner,
            ]
        )

    def describe_positions(self) -> str:
        return "".join(f"{mass.position} # position\n" for mass in self.masses)

    def draw_on(self, canvas: Canvas) -> None:
        for mass in self.masses:
            mass.draw_on(canvas)
        for spring in self.springs:
            spring.draw_on(canvas)

    def _release_springs(self) -> list[Spring]:
        """Hand over ownership of this cloth's springs and forget them."""
        springs = self.springs
        self.springs = []
        return springs

    def __str__(self) -> str:
        return self.describe()