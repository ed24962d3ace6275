import pytest

from weekendrt.onb import ONB
from weekendrt.vec3 import Vec3, cross, dot, unit_vector

DIRECTIONS = [
    Vec3(0, 0, 2),
    Vec3(1, 0, 0),
    Vec3(-3, 0.5, 0.2),
    Vec3(1, 2, 3),
    Vec3(0, -1, 0),
]


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_basis_is_orthonormal(direction):
    basis = ONB(direction)
    axes = [basis.u(), basis.v(), basis.w()]
    for i, a in enumerate(axes):
        assert a.length() == pytest.approx(1.0)
        for b in axes[i + 1:]:
            assert dot(a, b) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_w_follows_direction(direction):
    basis = ONB(direction)
    expected = unit_vector(direction)
    assert list(basis.w()) == pytest.approx(list(expected))


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_u_is_w_cross_v(direction):
    basis = ONB(direction)
    assert list(cross(basis.w(), basis.v())) == pytest.approx(list(basis.u()))


def test_indexing_matches_axes():
    basis = ONB(Vec3(1, 2, 3))
    assert basis[0] == basis.u()
    assert basis[1] == basis.v()
    assert basis[2] == basis.w()


def test_local_maps_unit_coordinates_to_axes():
    basis = ONB(Vec3(1, 2, 3))
    assert list(basis.local(Vec3(0, 0, 1))) == pytest.approx(list(basis.w()))
    assert list(basis.local(Vec3(1, 0, 0))) == pytest.approx(list(basis.u()))


def test_local_preserves_length():
    basis = ONB(Vec3(-2, 1, 5))
    a = Vec3(0.3, -1.2, 2.0)
    assert basis.local(a).length() == pytest.approx(a.length())


def test_z_axis_basis():
    basis = ONB(Vec3(0, 0, 2))
    assert basis.v() == Vec3(0, 1, 0)
    assert basis.u() == Vec3(-1, 0, 0)


def test_zero_vector_is_rejected():
    with pytest.raises(ZeroDivisionError):
        ONB(Vec3(0, 0, 0))