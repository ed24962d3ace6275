"""A small Monte Carlo path tracer that renders hittable scenes to PPM images."""

__version__ = "0.1.0"