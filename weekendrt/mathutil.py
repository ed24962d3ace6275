"""Numeric constants and random helpers shared by the renderer."""

from __future__ import annotations

import math
import random

INFINITY = math.inf
PI = 3.1415926535897932385


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random real in [low, high)."""
    return low + (high - low) * random.random()


def random_int(low: int, high: int) -> int:
    """Return a random integer in [low, high]."""
    return int(random_double(low, high + 1))