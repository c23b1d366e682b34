import pytest

from clothsim.integrator import EulerCromerIntegrator, Integrator, NewmarkIntegrator
from clothsim.mass import Mass
from clothsim.vector import DT, EPSILON, Vector3D


def test_negative_dt_is_rejected():
    with pytest.raises(ValueError):
        Integrator(-0.1)
    with pytest.raises(ValueError):
        EulerCromerIntegrator(-1)
    with pytest.raises(ValueError):
        NewmarkIntegrator(-0.01)


def test_defaults():
    assert Integrator().dt == DT
    assert NewmarkIntegrator(0.2).epsilon == EPSILON
    assert NewmarkIntegrator(0.2).dt == 0.2


def test_zero_dt_leaves_mass_unchanged():
    m = Mass(1.0, position=Vector3D(1, 2, 3), velocity=Vector3D(4, 5, 6))
    EulerCromerIntegrator(0).evolve(m)
    assert m.position == Vector3D(1, 2, 3)
    assert m.velocity == Vector3D(4, 5, 6)


def test_euler_moves_with_constant_velocity_without_force():
    velocity = Vector3D(1, 0, 2)
    m = Mass(1.0, velocity=velocity, acceleration=Vector3D())
    Integrator(0.5).evolve(m)
    assert m.position == velocity * 0.5
    assert m.velocity == velocity


def test_euler_uses_old_velocity_for_position():
    acc = Vector3D(0, 0, -4)
    start = Vector3D(1, 1, 1)
    m = Mass(2.0, position=start, acceleration=acc)
    Integrator(0.1).evolve(m)
    assert m.position == start
    assert m.velocity == acc * 0.1


def test_euler_cromer_uses_new_velocity_for_position():
    acc = Vector3D(0, 0, -4)
    start = Vector3D(1, 1, 1)
    m = Mass(2.0, position=start, acceleration=acc)
    EulerCromerIntegrator(0.1).evolve(m)
    assert m.velocity == acc * 0.1
    assert m.position == start + acc * (0.1 * 0.1)


def test_integrators_keep_force_unchanged():
    m = Mass(1.0, acceleration=Vector3D(0, 3, 0))
    force = m.force
    for integrator in (Integrator(0.1), EulerCromerIntegrator(0.1), NewmarkIntegrator(0.1)):
        integrator.evolve(m)
        assert m.force == force