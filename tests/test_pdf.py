import math
import random

import pytest

from weekendrt.pdf import PDF, HittablePDF, MixturePDF, SpherePDF
from weekendrt.quad import Quad
from weekendrt.vec3 import Vec3


class _FixedPDF(PDF):
    def __init__(self, density, direction):
        self.density = density
        self.direction = direction

    def value(self, direction):
        return self.density

    def generate(self):
        return self.direction


def _facing_quad():
    return Quad(Vec3(-1, -1, -2), Vec3(2, 0, 0), Vec3(0, 2, 0), None)


def test_pdf_is_abstract():
    with pytest.raises(TypeError):
        PDF()


def test_sphere_pdf_value_is_uniform():
    pdf = SpherePDF()
    assert pdf.value(Vec3(1, 0, 0)) == pytest.approx(1 / (4 * math.pi))
    assert pdf.value(Vec3(0, -3, 2)) == pdf.value(Vec3(1, 0, 0))


def test_sphere_pdf_generates_unit_vectors():
    random.seed(4)
    pdf = SpherePDF()
    for _ in range(50):
        assert pdf.generate().length() == pytest.approx(1.0)


def test_hittable_pdf_matches_object_density():
    quad = _facing_quad()
    origin = Vec3(0, 0, 0)
    pdf = HittablePDF(quad, origin)
    d = Vec3(0.1, -0.2, -1)
    assert pdf.value(d) == quad.pdf_value(origin, d)


def test_hittable_pdf_generates_directions_towards_object():
    random.seed(8)
    quad = _facing_quad()
    pdf = HittablePDF(quad, Vec3(0, 0, 0))
    for _ in range(30):
        d = pdf.generate()
        assert d.z == pytest.approx(-2.0)
        assert pdf.value(d) > 0.0


def test_hittable_pdf_zero_away_from_object():
    pdf = HittablePDF(_facing_quad(), Vec3(0, 0, 0))
    assert pdf.value(Vec3(0, 0, 1)) == 0.0


def test_mixture_value_is_average():
    a = _FixedPDF(2.0, Vec3(1, 0, 0))
    b = _FixedPDF(4.0, Vec3(0, 1, 0))
    mix = MixturePDF(a, b)
    assert mix.value(Vec3(0, 0, 1)) == pytest.approx(0.5 * 2.0 + 0.5 * 4.0)


def test_mixture_of_uniform_is_uniform():
    mix = MixturePDF(SpherePDF(), SpherePDF())
    assert mix.value(Vec3(0, 1, 0)) == pytest.approx(SpherePDF().value(Vec3(0, 1, 0)))


def test_mixture_generates_from_both_components():
    random.seed(21)
    a = _FixedPDF(1.0, Vec3(1, 0, 0))
    b = _FixedPDF(1.0, Vec3(0, 1, 0))
    mix = MixturePDF(a, b)
    seen = {mix.generate() for _ in range(100)}
    assert seen == {Vec3(1, 0, 0), Vec3(0, 1, 0)}