"""Numerical integrators that advance a mass by one time step."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clothsim.vector import DT, EPSILON

if TYPE_CHECKING:
    from clothsim.mass import Mass


class Integrator:
    """Explicit Euler integrator; base of the other integrators."""

    def __init__(self, dt: float = DT) -> None:
        if dt < 0:
            raise ValueError("Le pas de temps doit être positif")
        self.dt = dt

    def evolve(self, mass: Mass) -> None:
        acceleration = mass.acceleration
        mass.position = mass.position + self.dt * mass.velocity
        mass.velocity = mass.velocity + self.dt * acceleration


class EulerCromerIntegrator(Integrator):
    """Semi-implicit Euler: velocity first, then position with the new velocity."""

    def evolve(self, mass: Mass) -> None:
        mass.velocity = mass.velocity + self.dt * mass.acceleration
        mass.position = mass.position + self.dt * mass.velocity


class NewmarkIntegrator(Integrator):
    """Newmark integrator, iterated until the position converges."""

    def __init__(self, dt: float, epsilon: float = EPSILON) -> None:
        super().__init__(dt)
        self.epsilon = epsilon

    def evolve(self, mass: Mass) -> None:
        dt = self.dt
        x_old = mass.position
        v_old = mass.velocity
        a_old = mass.acceleration
        x = x_old
        v = v_old
        s = a_old
        while True:
            previous = x
            r = a_old
            v = v_old + (dt / 2.0) * (r + s)
            x = x_old + dt * v + (dt * dt / 6.0) * (r + 2.0 * s)
            if (x - previous).norm() <= self.epsilon:
                break
        mass.position = x
        mass.velocity = v