"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from weekendrt.interval import Interval
from weekendrt.ray import Ray
from weekendrt.vec3 import Point3, Vec3

_MIN_SIDE = 0.0001


def _reciprocal(d: float) -> float:
    if d == 0:
        return math.copysign(math.inf, d)
    return 1.0 / d


@dataclass(frozen=True, slots=True)
class AABB:
    """A box given by one interval per axis; no side is narrower than a small delta."""

    x: Interval = Interval.EMPTY
    y: Interval = Interval.EMPTY
    z: Interval = Interval.EMPTY

    EMPTY: ClassVar[AABB]
    UNIVERSE: ClassVar[AABB]

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            side = getattr(self, name)
            if side.size() < _MIN_SIDE:
                object.__setattr__(self, name, side.expand(_MIN_SIDE))

    @classmethod
    def from_points(cls, a: Point3, b: Point3) -> AABB:
        """The box with ``a`` and ``b`` as opposite corners, in any order."""
        sides = [
            Interval(pa, pb) if pa <= pb else Interval(pb, pa)
            for pa, pb in zip(a, b)
        ]
        return cls(*sides)

    def merge(self, other: AABB) -> AABB:
        """The tightest box enclosing both boxes."""
        return AABB(self.x.merge(other.x), self.y.merge(other.y), self.z.merge(other.z))

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, r: Ray, ray_t: Interval) -> bool:
        """True if the ray passes through the box within ``ray_t``."""
        t_min, t_max = ray_t.min, ray_t.max
        for ax, origin, direction in zip((self.x, self.y, self.z), r.origin, r.direction):
            adinv = _reciprocal(direction)
            t0 = (ax.min - origin) * adinv
            t1 = (ax.max - origin) * adinv
            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0
            if t_max <= t_min:
                return False
        return True

    def longest_axis(self) -> int:
        """Index of the longest side of the box."""
        if self.x.size() > self.y.size():
            return 0 if self.x.size() > self.z.size() else 2
        return 1 if self.y.size() > self.z.size() else 2

    def __add__(self, offset):
        if not isinstance(offset, Vec3):
            return NotImplemented
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __radd__(self, offset):
        return self.__add__(offset)


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)