"""Command-line demonstrations of the cloth simulation."""

from __future__ import annotations

import argparse
import sys

from clothsim.cloth import Cloth
from clothsim.constraint import Hook, SineImpulse
from clothsim.drawing import TextViewer
from clothsim.integrator import EulerCromerIntegrator
from clothsim.mass import Mass
from clothsim.shapes import RectangleCloth
from clothsim.system import System
from clothsim.vector import Vector3D

_RULE = "=========================\n"


def pendulum_system() -> System:
    """A mass hanging from two fixed masses by two springs."""
    mass_a = Mass(0.33, 0.3, Vector3D(0, 0, -3), Vector3D(0, 0, 0))
    mass_b = Mass(1, 0.3, Vector3D(-0.5, 0, 0), Vector3D(0, 0, 0))
    mass_c = Mass(1, 0.3, Vector3D(0.5, 0, 0), Vector3D(0, 0, 0))
    mass_b.fix()
    mass_c.fix()
    cloth = Cloth([mass_a, mass_b, mass_c])
    cloth.connect(mass_a, mass_b, 0.6, 2.5)
    cloth.connect(mass_a, mass_c, 0.6, 2.5)
    cloth.check()
    return System(cloth)


def hooked_sheet_system() -> System:
    """A square sheet hooked at two corners and shaken at the two others."""
    cloth = RectangleCloth(
        0.3125, Vector3D(3, 0, 0), Vector3D(0, 3, 0), Vector3D(0, 0, 0), 0.3, 1, 1, False, 1
    )
    hook1 = Hook(Vector3D(0, 0, 0), 0.1)
    hook2 = Hook(Vector3D(0, 3, 0), 0.1)
    impulse1 = SineImpulse(Vector3D(3, 0, 0), 0.5, 0, 2, Vector3D(0, 0, 30), 1.5, cloth)
    impulse2 = SineImpulse(Vector3D(3, 3, 0), 0.5, 0, 2, Vector3D(0, 0, 30), 1.5, cloth)
    system = System(cloth, [hook1, hook2, impulse1, impulse2])
    system.check()
    return system


def _describe(args: argparse.Namespace) -> None:
    sys.stdout.write(str(pendulum_system()) + "\n")


def _text(args: argparse.Namespace) -> None:
    out = sys.stdout
    viewer = TextViewer(out)
    integrator = EulerCromerIntegrator(args.dt)
    system = pendulum_system()
    for i in range(1, args.steps + 1):
        system.evolve(integrator)
        out.write(_RULE)
        out.write(f"Situation à t = {i * args.dt:g}s : \n")
        system.draw_on(viewer)
        out.write(_RULE)


def _positions(args: argparse.Namespace) -> None:
    out = sys.stdout
    integrator = EulerCromerIntegrator(args.dt)
    system = hooked_sheet_system()
    for _ in range(args.steps):
        system.evolve(integrator)
        out.write(system.describe_positions())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="clothsim", description="Cloth simulation demos.")
    commands = parser.add_subparsers(dest="command", required=True)

    describe = commands.add_parser("describe", help="print the pendulum system")
    describe.set_defaults(run=_describe)

    text = commands.add_parser("text", help="evolve the pendulum and print every object")
    text.add_argument("--steps", type=int, default=25)
    text.add_argument("--dt", type=float, default=0.1)
    text.set_defaults(run=_text)

    positions = commands.add_parser("positions", help="evolve a hooked sheet and print positions")
    positions.add_argument("--steps", type=int, default=200)
    positions.add_argument("--dt", type=float, default=0.01)
    positions.set_defaults(run=_positions)

    args = parser.parse_args(argv)
    args.run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())