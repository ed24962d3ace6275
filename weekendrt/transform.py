"""Instances that move or rotate another hittable object."""

from __future__ import annotations

import math

from weekendrt.aabb import AABB
from weekendrt.hittable import HitRecord, Hittable
from weekendrt.interval import Interval
from weekendrt.mathutil import degrees_to_radians
from weekendrt.ray import Ray
from weekendrt.vec3 import Vec3


class Translate(Hittable):
    """An object displaced by a fixed offset."""

    def __init__(self, obj: Hittable, offset: Vec3) -> None:
        self.obj = obj
        self.offset = offset

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        moved_r = Ray(r.origin - self.offset, r.direction, r.time)
        rec = self.obj.hit(moved_r, ray_t)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        rec.set_face_normal(moved_r, rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.obj.bounding_box() + self.offset


class RotateY(Hittable):
    """An object rotated about the y axis by an angle in degrees."""

    def __init__(self, obj: Hittable, angle: float) -> None:
        self.obj = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = obj.bounding_box()
        rotated = [
            self._to_world(Vec3(x, y, z))
            for x in (box.x.min, box.x.max)
            for y in (box.y.min, box.y.max)
            for z in (box.z.min, box.z.max)
        ]
        xs, ys, zs = zip(*rotated)
        self._bbox = AABB.from_points(
            Vec3(min(xs), min(ys), min(zs)),
            Vec3(max(xs), max(ys), max(zs)),
        )

    def _to_object(self, v: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * v.x - self.sin_theta * v.z,
            v.y,
            self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def _to_world(self, v: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * v.x + self.sin_theta * v.z,
            v.y,
            -self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        rotated_r = Ray(self._to_object(r.origin), self._to_object(r.direction), r.time)
        rec = self.obj.hit(rotated_r, ray_t)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.set_face_normal(rotated_r, self._to_world(rec.normal))
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox