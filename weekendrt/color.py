"""Conversion of linear colours to gamma-corrected bytes and PPM text."""

from __future__ import annotations

import math
from typing import TextIO

from weekendrt.interval import Interval
from weekendrt.vec3 import Color

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Apply gamma 2 to a linear component; non-positive values map to 0."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def color_to_bytes(pixel_color: Color) -> tuple[int, int, int]:
    """Gamma-correct a colour and map each component to the byte range [0, 255]."""
    r, g, b = (int(256 * _INTENSITY.clamp(linear_to_gamma(c))) for c in pixel_color)
    return r, g, b


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel as a PPM text line."""
    r, g, b = color_to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")