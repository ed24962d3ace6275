"""Spheres."""

from __future__ import annotations

import math
from typing import Any

from weekendrt.aabb import AABB
from weekendrt.hittable import HitRecord, Hittable
from weekendrt.interval import Interval
from weekendrt.mathutil import INFINITY, PI
from weekendrt.ray import Ray
from weekendrt.vec3 import Point3, Vec3, dot


def get_sphere_uv(p: Point3) -> tuple[float, float]:
    """Texture coordinates (u, v) of a point on the unit sphere at the origin.

    u runs around the y axis from x=-1; v runs from y=-1 to y=+1.
    """
    theta = math.acos(-p.y)
    phi = math.atan2(-p.z, p.x) + PI
    return phi / (2 * PI), theta / PI


class Sphere(Hittable):
    """A sphere with a centre, a non-negative radius and a material."""

    def __init__(self, center: Point3, radius: float, mat: Any) -> None:
        self.center = center
        self.radius = max(0.0, radius)
        self.mat = mat
        rvec = Vec3(self.radius, self.radius, self.radius)
        self._bbox = AABB.from_points(center - rvec, center + rvec)

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        oc = self.center - r.origin
        a = r.direction.length_squared()
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        outward_normal = (p - self.center) / self.radius
        u, v = get_sphere_uv(outward_normal)
        rec = HitRecord(p=p, mat=self.mat, t=root, u=u, v=v)
        rec.set_face_normal(r, outward_normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """One over the solid angle the sphere covers from ``origin``, or 0 on a miss."""
        if self.hit(Ray(origin, direction), Interval(0.001, INFINITY)) is None:
            return 0.0
        distance_squared = (self.center - origin).length_squared()
        cos_theta_max = math.sqrt(1 - self.radius * self.radius / distance_squared)
        solid_angle = 2 * PI * (1 - cos_theta_max)
        return 1 / solid_angle