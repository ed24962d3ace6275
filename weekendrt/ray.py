"""Rays with an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass

from weekendrt.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray P(t) = origin + t * direction, sent at a given time."""

    origin: Point3 = Vec3()
    direction: Vec3 = Vec3()
    time: float = 0.0

    def at(self, t: float) -> Point3:
        return self.origin + t * self.direction