"""The final scene of many small random spheres around three large ones."""

from __future__ import annotations

import argparse
import random
import sys
from itertools import product

from weekendrt.camera import Camera
from weekendrt.hittable import HittableList
from weekendrt.material import Dielectric, Lambertian, Material, Metal
from weekendrt.mathutil import random_double
from weekendrt.sphere import Sphere
from weekendrt.vec3 import Color, Point3, Vec3

_SMALL_RADIUS = 0.2
_CLEARANCE_POINT = Point3(4, 0.2, 0)


def random_scene() -> HittableList:
    """A ground sphere, a grid of random small spheres and three large spheres."""
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5))))

    for a, b in product(range(-11, 11), repeat=2):
        choose_mat = random_double()
        center = Point3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
        if (center - _CLEARANCE_POINT).length() <= 0.9:
            continue

        sphere_material: Material
        if choose_mat < 0.8:
            sphere_material = Lambertian(Color.random() * Color.random())
        elif choose_mat < 0.95:
            albedo = Color.random(0.5, 1)
            fuzz = random_double(0, 0.5)
            sphere_material = Metal(albedo, fuzz)
        else:
            sphere_material = Dielectric(1.5)
        world.add(Sphere(center, _SMALL_RADIUS, sphere_material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


def make_camera(image_width: int = 1200, samples_per_pixel: int = 10) -> Camera:
    """The camera that frames the final scene."""
    return Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=image_width,
        samples_per_pixel=samples_per_pixel,
        max_depth=20,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        vup=Vec3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )


def main(argv: list[str] | None = None) -> int:
    """Render the final scene as a PPM image on standard output."""
    parser = argparse.ArgumentParser(description="Render the final scene as a PPM image.")
    parser.add_argument("--width", type=int, default=1200, help="image width in pixels")
    parser.add_argument("--samples", type=int, default=10, help="samples per pixel")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    if args.width < 1:
        parser.error("--width must be at least 1")
    if args.samples < 1:
        parser.error("--samples must be at least 1")
    if args.seed is not None:
        random.seed(args.seed)

    world = random_scene()
    cam = make_camera(args.width, args.samples)
    cam.render(world, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())