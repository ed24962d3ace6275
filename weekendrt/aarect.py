"""Rectangles aligned with the coordinate planes."""

from __future__ import annotations

from typing import Any

from weekendrt.aabb import AABB
from weekendrt.hittable import HitRecord, Hittable
from weekendrt.interval import Interval
from weekendrt.ray import Ray
from weekendrt.vec3 import Vec3

_THICKNESS = 0.0001
_AXES = (Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1))


class _AxisRect(Hittable):
    """A rectangle spanning axes ``a`` and ``b`` at coordinate ``k`` on the third axis."""

    _a_axis: int
    _b_axis: int
    _k_axis: int

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, mat: Any) -> None:
        self._a0, self._a1 = a0, a1
        self._b0, self._b1 = b0, b1
        self.k = k
        self.mat = mat

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        dk = r.direction[self._k_axis]
        if dk == 0:
            return None
        t = (self.k - r.origin[self._k_axis]) / dk
        if t < ray_t.min or t > ray_t.max:
            return None

        a = r.origin[self._a_axis] + t * r.direction[self._a_axis]
        b = r.origin[self._b_axis] + t * r.direction[self._b_axis]
        if a < self._a0 or a > self._a1 or b < self._b0 or b > self._b1:
            return None

        rec = HitRecord(
            p=r.at(t),
            mat=self.mat,
            t=t,
            u=(a - self._a0) / (self._a1 - self._a0),
            v=(b - self._b0) / (self._b1 - self._b0),
        )
        rec.set_face_normal(r, _AXES[self._k_axis])
        return rec

    def bounding_box(self) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self._a_axis], hi[self._a_axis] = self._a0, self._a1
        lo[self._b_axis], hi[self._b_axis] = self._b0, self._b1
        lo[self._k_axis] = self.k - _THICKNESS
        hi[self._k_axis] = self.k + _THICKNESS
        return AABB.from_points(Vec3(*lo), Vec3(*hi))


class XYRect(_AxisRect):
    """A rectangle in the plane z = k."""

    _a_axis, _b_axis, _k_axis = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, mat: Any) -> None:
        super().__init__(x0, x1, y0, y1, k, mat)

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        return super().hit(r, ray_t)

    def bounding_box(self) -> AABB:
        return super().bounding_box()


class XZRect(_AxisRect):
    """A rectangle in the plane y = k."""

    _a_axis, _b_axis, _k_axis = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, mat: Any) -> None:
        super().__init__(x0, x1, z0, z1, k, mat)

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        return super().hit(r, ray_t)

    def bounding_box(self) -> AABB:
        return super().bounding_box()


class YZRect(_AxisRect):
    """A rectangle in the plane x = k."""

    _a_axis, _b_axis, _k_axis = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, mat: Any) -> None:
        super().__init__(y0, y1, z0, z1, k, mat)

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        return super().hit(r, ray_t)

    def bounding_box(self) -> AABB:
        return super().bounding_box()