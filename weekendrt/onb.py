"""Orthonormal bases."""

from __future__ import annotations

from weekendrt.vec3 import Vec3, cross, unit_vector


class ONB:
    """A right-handed orthonormal basis whose third axis follows a given direction."""

    def __init__(self, w: Vec3) -> None:
        axis_w = unit_vector(w)
        a = Vec3(0, 1, 0) if abs(axis_w.x) > 0.9 else Vec3(1, 0, 0)
        axis_v = unit_vector(cross(axis_w, a))
        axis_u = cross(axis_w, axis_v)
        self._axis = (axis_u, axis_v, axis_w)

    def __getitem__(self, i: int) -> Vec3:
        return self._axis[i]

    def u(self) -> Vec3:
        return self._axis[0]

    def v(self) -> Vec3:
        return self._axis[1]

    def w(self) -> Vec3:
        return self._axis[2]

    def local(self, a: Vec3) -> Vec3:
        """Express basis coordinates ``a`` as a vector in world space."""
        u, v, w = self._axis
        return a.x * u + a.y * v + a.z * w