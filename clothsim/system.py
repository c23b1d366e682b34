"""A simulated system of cloths and constraints."""

from __future__ import annotations

from typing import Iterable

from clothsim.cloth import Cloth
from clothsim.constraint import Constraint
from clothsim.drawing import Canvas, Drawable
from clothsim.integrator import Integrator


class System(Drawable):
    """Cloths evolving together under a set of constraints."""

    def __init__(
        self,
        cloths: Cloth | Iterable[Cloth],
        constraints: Constraint | Iterable[Constraint] | None = None,
    ) -> None:
        self.cloths: list[Cloth] = [cloths] if isinstance(cloths, Cloth) else list(cloths)
        if constraints is None:
            self.constraints: list[Constraint] = []
        elif isinstance(constraints, Constraint):
            self.constraints = [constraints]
        else:
            self.constraints = list(constraints)
        self.time = 0.0

    def draw_on(self, canvas: Canvas) -> None:
        for cloth in self.cloths:
            cloth.draw_on(canvas)

    def _banner(self) -> str:
        noun = "tissu" if len(self.cloths) == 1 else "tissus"
        return f"=============== Système {id(self):#x} de {len(self.cloths)} {noun} ==============="

    def describe(self) -> str:
        banner = self._banner()
        return "".join(
            [
                f"{banner} t = {self.time:g}\n",
                "\n".join(cloth.describe() for cloth in self.cloths),
                f"{banner}\n",
            ]
        )

    def describe_positions(self) -> str:
        header = f"## (position) Systeme au temps : {self.time:g}\n"
        return header + "".join(cloth.describe_positions() for cloth in self.cloths)

    def evolve(self, integrator: Integrator) -> None:
        """Advance every cloth by one step; the clock advances once per cloth."""
        for cloth in self.cloths:
            cloth.update_forces()
            for constraint in self.constraints:
                constraint.apply(cloth, self.time)
            self.time += integrator.dt
            cloth.evolve(integrator)

    def check(self) -> None:
        for cloth in self.cloths:
            cloth.check()

    def __str__(self) -> str:
        return self.describe()