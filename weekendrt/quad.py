"""Planar quadrilaterals and boxes built from them."""

from __future__ import annotations

from typing import Any

from weekendrt.aabb import AABB
from weekendrt.hittable import HitRecord, Hittable, HittableList
from weekendrt.interval import Interval
from weekendrt.mathutil import INFINITY, random_double
from weekendrt.ray import Ray
from weekendrt.vec3 import Point3, Vec3, cross, dot, unit_vector

_UNIT = Interval(0.0, 1.0)


class Quad(Hittable):
    """A parallelogram with corner ``q`` and edges ``u`` and ``v``."""

    def __init__(self, q: Point3, u: Vec3, v: Vec3, mat: Any) -> None:
        self.q = q
        self.u = u
        self.v = v
        self.mat = mat

        n = cross(u, v)
        self.normal = unit_vector(n)
        self.d = dot(self.normal, q)
        self.w = n / dot(n, n)
        self.area = n.length()

        diagonal1 = AABB.from_points(q, q + u + v)
        diagonal2 = AABB.from_points(q + u, q + v)
        self._bbox = diagonal1.merge(diagonal2)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        denom = dot(self.normal, r.direction)
        if abs(denom) < 1e-8:
            return None

        t = (self.d - dot(self.normal, r.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = r.at(t)
        planar = intersection - self.q
        alpha = dot(self.w, cross(planar, self.v))
        beta = dot(self.w, cross(self.u, planar))

        uv = self.is_interior(alpha, beta)
        if uv is None:
            return None

        rec = HitRecord(p=intersection, mat=self.mat, t=t, u=uv[0], v=uv[1])
        rec.set_face_normal(r, self.normal)
        return rec

    def is_interior(self, a: float, b: float) -> tuple[float, float] | None:
        """The texture coordinates of plane point (a, b), or None if it lies outside."""
        if not _UNIT.contains(a) or not _UNIT.contains(b):
            return None
        return a, b

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        rec = self.hit(Ray(origin, direction), Interval(0.001, INFINITY))
        if rec is None:
            return 0.0
        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(dot(direction, rec.normal) / direction.length())
        return distance_squared / (cosine * self.area)

    def random(self, origin: Point3) -> Vec3:
        p = self.q + random_double() * self.u + random_double() * self.v
        return p - origin


def make_box(a: Point3, b: Point3, mat: Any) -> HittableList:
    """The six sides of the box with opposite corners ``a`` and ``b``."""
    lo = Point3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Point3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vec3(hi.x - lo.x, 0, 0)
    dy = Vec3(0, hi.y - lo.y, 0)
    dz = Vec3(0, 0, hi.z - lo.z)

    return HittableList([
        Quad(Point3(lo.x, lo.y, hi.z), dx, dy, mat),    # front
        Quad(Point3(hi.x, lo.y, hi.z), -dz, dy, mat),   # right
        Quad(Point3(hi.x, lo.y, lo.z), -dx, dy, mat),   # back
        Quad(Point3(lo.x, lo.y, lo.z), dz, dy, mat),    # left
        Quad(Point3(lo.x, hi.y, hi.z), dx, -dz, mat),   # top
        Quad(Point3(lo.x, lo.y, lo.z), dx, dz, mat),    # bottom
    ])