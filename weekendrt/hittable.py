"""Hit records, the hittable interface and lists of hittable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from weekendrt.aabb import AABB
from weekendrt.interval import Interval
from weekendrt.mathutil import random_int
from weekendrt.ray import Ray
from weekendrt.vec3 import Point3, Vec3, dot


@dataclass(slots=True)
class HitRecord:
    """Where and how a ray met a surface."""

    p: Point3 = Vec3()
    normal: Vec3 = Vec3()
    mat: Any = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Store the normal so that it always points against the ray.

        ``outward_normal`` is assumed to have unit length.
        """
        self.front_face = dot(r.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        """The hit record of the ray within ``ray_t``, or None on a miss."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """A box enclosing the whole object."""

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Density of sampling ``direction`` from ``origin`` towards this object."""
        return 0.0

    def random(self, origin: Point3) -> Vec3:
        """A random direction from ``origin`` towards this object."""
        return Vec3(1.0, 0.0, 0.0)


class HittableList(Hittable):
    """An ordered collection of hittable objects, hit as one."""

    def __init__(self, objects: Iterable[Hittable] | None = None) -> None:
        self.objects: list[Hittable] = []
        self._bbox = AABB.EMPTY
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)
        self._bbox = self._bbox.merge(obj.bounding_box())

    def clear(self) -> None:
        self.objects.clear()
        self._bbox = AABB.EMPTY

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        """The closest hit among all objects, or None."""
        closest: HitRecord | None = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(r, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest

    def bounding_box(self) -> AABB:
        return self._bbox

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """The average of the members' densities."""
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Point3) -> Vec3:
        """A direction towards one member chosen uniformly at random."""
        if not self.objects:
            raise IndexError("cannot sample a direction from an empty hittable list")
        return self.objects[random_int(0, len(self.objects) - 1)].random(origin)