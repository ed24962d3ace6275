"""A positionable camera with depth of field that renders a scene to PPM text."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import TextIO

from weekendrt.color import write_color
from weekendrt.hittable import Hittable
from weekendrt.interval import Interval
from weekendrt.mathutil import INFINITY, degrees_to_radians, random_double
from weekendrt.ray import Ray
from weekendrt.vec3 import Color, Point3, Vec3, cross, random_in_unit_disk, unit_vector

_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)
_BLACK = Color(0.0, 0.0, 0.0)


@dataclass
class Camera:
    """Camera settings; call ``initialize`` (or ``render``) before casting rays."""

    aspect_ratio: float = 1.0  # image width over height
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10  # maximum ray bounces into the scene

    vfov: float = 90.0  # vertical field of view in degrees
    lookfrom: Point3 = Vec3(0.0, 0.0, 0.0)
    lookat: Point3 = Vec3(0.0, 0.0, -1.0)
    vup: Vec3 = Vec3(0.0, 1.0, 0.0)

    defocus_angle: float = 0.0  # variation angle of rays through each pixel
    focus_dist: float = 10.0  # distance to the plane of perfect focus

    image_height: int = field(init=False, default=0)
    pixel_samples_scale: float = field(init=False, default=0.0, repr=False)
    center: Point3 = field(init=False, default=Vec3(), repr=False)
    pixel00_loc: Point3 = field(init=False, default=Vec3(), repr=False)
    pixel_delta_u: Vec3 = field(init=False, default=Vec3(), repr=False)
    pixel_delta_v: Vec3 = field(init=False, default=Vec3(), repr=False)
    u: Vec3 = field(init=False, default=Vec3(), repr=False)
    v: Vec3 = field(init=False, default=Vec3(), repr=False)
    w: Vec3 = field(init=False, default=Vec3(), repr=False)
    defocus_disk_u: Vec3 = field(init=False, default=Vec3(), repr=False)
    defocus_disk_v: Vec3 = field(init=False, default=Vec3(), repr=False)
    _initialized: bool = field(init=False, default=False, repr=False)

    def initialize(self) -> None:
        """Derive the image height, camera frame and viewport from the settings."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (float(self.image_width) / self.image_height)

        self.w = unit_vector(self.lookfrom - self.lookat)
        self.u = unit_vector(cross(self.vup, self.w))
        self.v = cross(self.w, self.u)

        viewport_u = viewport_width * self.u
        viewport_v = viewport_height * -self.v

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self.center - self.focus_dist * self.w - viewport_u / 2 - viewport_v / 2
        )
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius
        self._initialized = True

    def get_ray(self, i: int, j: int) -> Ray:
        """A ray from the defocus disk through a random point around pixel (i, j)."""
        if not self._initialized:
            raise RuntimeError("camera must be initialized before casting rays")
        offset = self._sample_square()
        pixel_sample = (
            self.pixel00_loc
            + (i + offset.x) * self.pixel_delta_u
            + (j + offset.y) * self.pixel_delta_v
        )
        ray_origin = self.center if self.defocus_angle <= 0 else self._defocus_disk_sample()
        return Ray(ray_origin, pixel_sample - ray_origin)

    def _sample_square(self) -> Vec3:
        """A random point in the square [-.5, -.5] to [+.5, +.5]."""
        return Vec3(random_double() - 0.5, random_double() - 0.5, 0.0)

    def _defocus_disk_sample(self) -> Point3:
        p = random_in_unit_disk()
        return self.center + p.x * self.defocus_disk_u + p.y * self.defocus_disk_v

    def ray_color(self, r: Ray, depth: int, world: Hittable) -> Color:
        """The light gathered along ``r`` with at most ``depth`` bounces."""
        throughput = _WHITE
        for _ in range(depth):
            rec = world.hit(r, Interval(0.001, INFINITY))
            if rec is None:
                unit_direction = unit_vector(r.direction)
                a = 0.5 * (unit_direction.y + 1.0)
                return throughput * ((1.0 - a) * _WHITE + a * _SKY_BLUE)
            scattered = rec.mat.scatter(r, rec)
            if scattered is None:
                return _BLACK
            attenuation, r = scattered
            throughput = throughput * attenuation
        return _BLACK

    def render(
        self,
        world: Hittable,
        out: TextIO | None = None,
        log: TextIO | None = None,
    ) -> None:
        """Render ``world`` as a PPM image to ``out``, reporting progress on ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log
        self.initialize()

        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")
        for j in range(self.image_height):
            log.write(f"\rScanlines remaining: {self.image_height - j} ")
            log.flush()
            for i in range(self.image_width):
                pixel_color = _BLACK
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self.ray_color(
                        self.get_ray(i, j), self.max_depth, world
                    )
                write_color(out, self.pixel_samples_scale * pixel_color)
        log.write("\rDone.                 \n")