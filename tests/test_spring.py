import pytest

from clothsim.mass import Mass
from clothsim.spring import Spring
from clothsim.vector import Vector3D


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def draw_mass(self, mass):
        self.calls.append(("mass", mass))

    def draw_spring(self, spring):
        self.calls.append(("spring", spring))


@pytest.fixture
def line():
    m1 = Mass(1, 0.3, Vector3D(0, 0, 0))
    m2 = Mass(2, 0.3, Vector3D(1, 0, 0))
    m3 = Mass(3, 0.3, Vector3D(2, 0, 0))
    return m1, m2, m3


@pytest.mark.parametrize("k", [0, -3])
def test_non_positive_stiffness_is_rejected(line, k):
    m1, m2, _ = line
    with pytest.raises(ValueError):
        Spring(m1, m2, k, 1)


def test_negative_rest_length_is_rejected(line):
    m1, m2, _ = line
    with pytest.raises(ValueError):
        Spring(m1, m2, 3, -1)


def test_zero_rest_length_is_allowed(line):
    m1, m2, _ = line
    spring = Spring(m1, m2, 3, 0)
    assert spring.rest_length == 0


def test_construction_registers_on_both_masses(line):
    m1, m2, m3 = line
    s1 = Spring(m1, m2, 3, 1)
    s2 = Spring(m2, m3, 4, 5)
    assert m1.springs == [s1]
    assert m2.springs == [s1, s2]
    assert m3.springs == [s2]


def test_force_at_rest_length_is_null(line):
    m1, m2, _ = line
    spring = Spring(m1, m2, 3, 1)
    assert spring.restoring_force(m1) == Vector3D()
    assert spring.restoring_force(m2) == Vector3D()


def test_compressed_spring_pushes_masses_apart(line):
    _, m2, m3 = line
    spring = Spring(m2, m3, 4, 5)
    assert spring.restoring_force(m2) == Vector3D(-16, 0, 0)
    assert spring.restoring_force(m3) == -spring.restoring_force(m2)


def test_stretched_spring_pulls_masses_together():
    m1 = Mass(1, position=Vector3D(5, 0, 0))
    m2 = Mass(1, position=Vector3D(-5, 1, 2))
    spring = Spring(m1, m2, 3, 1)
    f1 = spring.restoring_force(m1)
    assert f1.dot(m2.position - m1.position) > 0
    assert f1 + spring.restoring_force(m2) == Vector3D()


def test_force_on_unrelated_mass_raises(line):
    m1, m2, m3 = line
    spring = Spring(m1, m2, 3, 1)
    with pytest.raises(ValueError):
        spring.restoring_force(m3)


def test_length_follows_masses(line):
    m1, _, m3 = line
    spring = Spring(m1, m3, 3, 1)
    assert spring.length == pytest.approx((m1.position - m3.position).norm())
    m3.position = Vector3D(0, 0, 0)
    assert spring.length == 0


def test_check_masses(line):
    m1, m2, _ = line
    same = Spring(m1, m1, 3, 1)
    with pytest.raises(RuntimeError):
        same.check_masses()
    ok = Spring(m1, m2, 3, 1)
    assert ok.mass1 is not ok.mass2


def test_check_connected(line):
    m1, m2, m3 = line
    spring = Spring(m1, m2, 3, 1)
    with pytest.raises(RuntimeError):
        spring.check_connected(m3)
    assert spring in m1.springs and spring in m2.springs


def test_mass_force_reflects_spring(line):
    m1, m2, m3 = line
    Spring(m1, m2, 3, 1)
    s2 = Spring(m2, m3, 4, 5)
    m3.gravity = False
    m3.update_forces()
    assert m3.force == s2.restoring_force(m3)


def test_describe(line):
    m1, m2, _ = line
    spring = Spring(m1, m2, 3, 1)
    short = spring.describe()
    assert short.startswith("===== Ressort ")
    assert "Constante de raideur : 3" in short
    assert "Longeur à repos : 1" in short
    assert f"Masse depart : {id(m1):#x}" in short
    assert "===== Masse" not in short
    full = spring.describe(full=True)
    assert m1.describe() in full
    assert m2.describe() in full
    assert str(spring) == short


def test_draw_on(line):
    m1, m2, _ = line
    spring = Spring(m1, m2, 3, 1)
    canvas = RecordingCanvas()
    spring.draw_on(canvas)
    assert canvas.calls == [("spring", spring)]