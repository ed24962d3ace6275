"""Textures that give a colour for surface coordinates and a point."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from weekendrt.perlin import Perlin
from weekendrt.vec3 import Color, Point3, Vec3


class Texture(ABC):
    """A colour that may vary over a surface."""

    @abstractmethod
    def value(self, u: float, v: float, p: Point3) -> Color:
        """The colour at texture coordinates (u, v) and point ``p``."""


class SolidColor(Texture):
    """The same colour everywhere."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.albedo


def _as_texture(t: Texture | Color) -> Texture:
    return t if isinstance(t, Texture) else SolidColor(t)


class CheckerTexture(Texture):
    """A 3D checker pattern of two textures with cells of side ``scale``."""

    def __init__(self, scale: float, even: Texture | Color, odd: Texture | Color) -> None:
        self.inv_scale = 1.0 / scale
        self.even = _as_texture(even)
        self.odd = _as_texture(odd)

    def value(self, u: float, v: float, p: Point3) -> Color:
        total = sum(int(math.floor(self.inv_scale * c)) for c in p)
        chosen = self.even if total % 2 == 0 else self.odd
        return chosen.value(u, v, p)


class NoiseTexture(Texture):
    """A marble-like pattern from Perlin turbulence."""

    def __init__(self, scale: float = 1.0) -> None:
        self.scale = scale
        self.noise = Perlin()

    def value(self, u: float, v: float, p: Point3) -> Color:
        return Vec3(0.5, 0.5, 0.5) * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p, 7)))