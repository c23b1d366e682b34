import io

import pytest

from clothsim.drawing import Canvas, Drawable, TextViewer
from clothsim.mass import Mass
from clothsim.spring import Spring
from clothsim.vector import Vector3D


class _Recorder(Canvas):
    def __init__(self):
        self.calls = []

    def draw_mass(self, mass):
        self.calls.append(("mass", mass))

    def draw_spring(self, spring):
        self.calls.append(("spring", spring))


def test_canvas_is_abstract():
    with pytest.raises(TypeError):
        Canvas()


def test_drawable_is_abstract():
    with pytest.raises(TypeError):
        Drawable()


def test_text_viewer_writes_mass_description():
    stream = io.StringIO()
    mass = Mass(1.0, 0.3, Vector3D(1, 2, 3))
    TextViewer(stream).draw_mass(mass)
    assert stream.getvalue() == str(mass)
    assert "Position : 1 2 3" in stream.getvalue()


def test_text_viewer_writes_spring_description():
    stream = io.StringIO()
    spring = Spring(Mass(1.0), Mass(1.0, position=Vector3D(1, 0, 0)), 3, 1)
    TextViewer(stream).draw_spring(spring)
    assert stream.getvalue() == str(spring)
    assert stream.getvalue().startswith("===== Ressort ")


def test_mass_and_spring_dispatch_to_canvas():
    recorder = _Recorder()
    m1, m2 = Mass(1.0), Mass(1.0)
    spring = Spring(m1, m2, 2, 1)
    m1.draw_on(recorder)
    spring.draw_on(recorder)
    assert recorder.calls[0][0] == "mass" and recorder.calls[0][1] is m1
    assert recorder.calls[1][0] == "spring" and recorder.calls[1][1] is spring