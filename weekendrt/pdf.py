"""Probability densities over directions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from weekendrt.hittable import Hittable
from weekendrt.mathutil import PI, random_double
from weekendrt.vec3 import Point3, Vec3, random_unit_vector


class PDF(ABC):
    """A density over directions that can also be sampled."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """The density at ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """A random direction drawn from this density."""


class SpherePDF(PDF):
    """The uniform density over all directions."""

    def value(self, direction: Vec3) -> float:
        return 1 / (4 * PI)

    def generate(self) -> Vec3:
        return random_unit_vector()


class HittablePDF(PDF):
    """Directions from ``origin`` towards a hittable object."""

    def __init__(self, objects: Hittable, origin: Point3) -> None:
        self.objects = objects
        self.origin = origin

    def value(self, direction: Vec3) -> float:
        return self.objects.pdf_value(self.origin, direction)

    def generate(self) -> Vec3:
        return self.objects.random(self.origin)


class MixturePDF(PDF):
    """An equal mixture of two densities."""

    def __init__(self, p0: PDF, p1: PDF) -> None:
        self.p = (p0, p1)

    def value(self, direction: Vec3) -> float:
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self) -> Vec3:
        if random_double() < 0.5:
            return self.p[0].generate()
        return self.p[1].generate()