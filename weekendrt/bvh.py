"""Bounding volume hierarchies."""

from __future__ import annotations

from typing import Iterable

from weekendrt.aabb import AABB
from weekendrt.hittable import HitRecord, Hittable
from weekendrt.interval import Interval
from weekendrt.ray import Ray


class BVHNode(Hittable):
    """A binary tree of bounding boxes over a set of hittable objects."""

    def __init__(self, objects: Iterable[Hittable]) -> None:
        objs = list(objects)
        if not objs:
            raise ValueError("cannot build a bounding volume hierarchy from no objects")

        bbox = AABB.EMPTY
        for obj in objs:
            bbox = bbox.merge(obj.bounding_box())
        self._bbox = bbox

        axis = bbox.longest_axis()

        if len(objs) == 1:
            self.left = self.right = objs[0]
        elif len(objs) == 2:
            self.left, self.right = objs
        else:
            objs.sort(key=lambda o: o.bounding_box().axis_interval(axis).min)
            mid = len(objs) // 2
            self.left = BVHNode(objs[:mid])
            self.right = BVHNode(objs[mid:])

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        if not self._bbox.hit(r, ray_t):
            return None
        left_rec = self.left.hit(r, ray_t)
        upper = left_rec.t if left_rec is not None else ray_t.max
        right_rec = self.right.hit(r, Interval(ray_t.min, upper))
        return right_rec if right_rec is not None else left_rec

    def bounding_box(self) -> AABB:
        return self._bbox