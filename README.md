# clothsim

A small mass-spring cloth simulator. Point masses are linked by springs into
cloths; cloths and constraints are gathered into a system, which is advanced
in time by an integrator. It has no dependencies beyond the standard library.

## Building blocks

- `clothsim.vector.Vector3D`: 3D vector with `+`, `-`, unary `-`, scalar `*`
  (on either side), dot product (`*` between two vectors, or `dot`), cross
  product (`^` or `cross`), `norm`, `norm2` and the unit vector (`~v` or
  `unit`; the null vector gives the null vector). Equality (`==`, `compare`)
  is tolerant to within `EPSILON` (1e-10) on each coordinate. The module also
  holds the constants `G`, `EPSILON`, `DT`, `SEAM_DELTA`, `SEAM_K`,
  `MASS_DISPLAY_SIZE` and `BACKGROUND_COLOR`.
- `clothsim.mass.Mass`: a point mass with friction, position, velocity and
  the total force on it. `update_forces` recomputes spring, friction and
  gravity forces; `add_force` adds a force unless the mass is fixed; `fix`
  fixes or frees it; `gravity` can be turned off.
- `clothsim.spring.Spring`: a spring with stiffness `k` and a rest length
  between two masses; it registers itself on both. `restoring_force(mass)`
  gives the force on either end, `length` the current length, `detach`
  removes it from its masses.
- `clothsim.integrator`: `Integrator` (explicit Euler),
  `EulerCromerIntegrator` and `NewmarkIntegrator` (iterated until the
  position moves by no more than `epsilon`). A negative time step raises
  `ValueError`.
- `clothsim.cloth.Cloth`: a set of masses and the springs it owns.
  `connect` creates a spring, `mass in cloth` tests membership by identity,
  `check` raises `RuntimeError` on a mass with no spring or a spring with the
  same mass at both ends.
- `clothsim.shapes`: `ChainCloth`, `RectangleCloth` and `DiskCloth` build
  common cloths, optionally with their ends or border fixed.
- `clothsim.composed.ComposedCloth`: takes over other cloths (also with
  `+=`) and sews them with springs wherever two masses are closer than
  `delta`.
- `clothsim.constraint`: `Hook` holds still the masses within its sphere;
  `Impulse` and `SineImpulse` push, during a time window, the masses that
  were within their sphere when they were built (those masses stop feeling
  gravity). An impulse with a null force or no target mass emits a
  `RuntimeWarning`.
- `clothsim.system.System`: the cloths and constraints, advanced with
  `evolve(integrator)`; `describe` and `describe_positions` return text.
- `clothsim.drawing`: the `Drawable` and `Canvas` interfaces, and
  `TextViewer`, a canvas that writes every mass and spring to a text stream.

The textual descriptions use French labels (`Masse`, `Ressort`, `Tissu`,
`Système`).

## Example

```python
from clothsim.vector import Vector3D
from clothsim.mass import Mass
from clothsim.cloth import Cloth
from clothsim.system import System
from clothsim.integrator import EulerCromerIntegrator

a = Mass(0.33, 0.3, Vector3D(0, 0, -3))
b = Mass(1, 0.3, Vector3D(-0.5, 0, 0))
c = Mass(1, 0.3, Vector3D(0.5, 0, 0))
b.fix()
c.fix()

cloth = Cloth([a, b, c])
cloth.connect(a, b, 0.6, 2.5)
cloth.connect(a, c, 0.6, 2.5)
cloth.check()

system = System(cloth)
integrator = EulerCromerIntegrator(0.1)
for _ in range(25):
    system.evolve(integrator)
print(system.describe_positions())
```

## Command line

The `clothsim` command runs one of three text demonstrations:

```
clothsim describe
clothsim text [--steps 25] [--dt 0.1]
clothsim positions [--steps 200] [--dt 0.01]
```

- `describe` prints a mass hanging from two fixed masses by two springs.
- `text` evolves that system with the Euler-Cromer integrator and prints
  every mass and spring after each step.
- `positions` evolves a square sheet hooked at two corners and shaken at the
  two others, printing the positions of all masses after each step.

`clothsim --help` lists the commands.

## What it does not do

There is no graphical or interactive view: systems can only be described as
text or drawn on a `Canvas` you supply. `MASS_DISPLAY_SIZE` and
`BACKGROUND_COLOR` are provided for such a canvas but nothing in the package
uses them.

## Tests

```
pip install -e .[test]
pytest
```