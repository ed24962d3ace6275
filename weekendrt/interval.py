"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Interval:
    """A real interval [min, max]; the default interval is empty."""

    min: float = math.inf
    max: float = -math.inf

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> Interval:
        """Widen by ``delta`` in total, half on each side."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def merge(self, other: Interval) -> Interval:
        """The tightest interval enclosing both intervals."""
        return Interval(
            self.min if self.min <= other.min else other.min,
            self.max if self.max >= other.max else other.max,
        )

    def __add__(self, displacement):
        if not isinstance(displacement, (int, float)):
            return NotImplemented
        return Interval(self.min + displacement, self.max + displacement)

    def __radd__(self, displacement):
        return self.__add__(displacement)


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)