"""Perlin gradient noise and turbulence."""

from __future__ import annotations

import math
from itertools import product

from weekendrt.mathutil import random_int
from weekendrt.vec3 import Point3, Vec3, dot, unit_vector

_POINT_COUNT = 256
_MASK = _POINT_COUNT - 1


def _generate_perm() -> list[int]:
    """A random permutation of 0 .. _POINT_COUNT-1 (Fisher-Yates shuffle)."""
    perm = list(range(_POINT_COUNT))
    for i in range(_POINT_COUNT - 1, 0, -1):
        target = random_int(0, i)
        perm[i], perm[target] = perm[target], perm[i]
    return perm


class Perlin:
    """Gradient noise on a lattice of random unit vectors, repeating every 256 units."""

    def __init__(self) -> None:
        self._randvec = [unit_vector(Vec3.random(-1, 1)) for _ in range(_POINT_COUNT)]
        self._perm_x = _generate_perm()
        self._perm_y = _generate_perm()
        self._perm_z = _generate_perm()

    def noise(self, p: Point3) -> float:
        """Smoothly interpolated noise at ``p``; zero at every lattice point."""
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di, dj, dk in product((0, 1), repeat=3):
            gradient = self._randvec[
                self._perm_x[(i + di) & _MASK]
                ^ self._perm_y[(j + dj) & _MASK]
                ^ self._perm_z[(k + dk) & _MASK]
            ]
            weight_v = Vec3(u - di, v - dj, w - dk)
            accum += (
                (di * uu + (1 - di) * (1 - uu))
                * (dj * vv + (1 - dj) * (1 - vv))
                * (dk * ww + (1 - dk) * (1 - ww))
                * dot(gradient, weight_v)
            )
        return accum

    def turb(self, p: Point3, depth: int) -> float:
        """Absolute value of a sum of ``depth`` noise octaves."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)