# weekendrt

A compact Monte Carlo path tracer in pure Python. The camera renders a world
of hittable objects with diffuse, metal and glass materials, depth of field
and a sky-gradient background. It writes the image as plain-text PPM (P3).

The package also provides geometry and sampling building blocks: quads,
boxes, axis-aligned rectangles, translation and rotation instances,
bounding volume hierarchies, procedural textures, Perlin noise, orthonormal
bases and direction PDFs.

## Installation

```
pip install .
```

No third-party libraries are needed. Install the `test` extra
(`pip install .[test]`) to run the tests with pytest.

## Rendering the demo scene

The `weekendrt` command renders a scene of many small random spheres around
three large ones. The image goes to standard output. Progress goes to
standard error.

```
weekendrt > image.ppm
weekendrt --width 400 --samples 20 --seed 1 > small.ppm
```

Options:

- `--width` – image width in pixels (default 1200, at least 1). The height
  follows from the 16:9 aspect ratio.
- `--samples` – samples per pixel (default 10, at least 1).
- `--seed` – seed for Python's `random` module, so that the scene and the
  image can be reproduced.

Rendering in pure Python is slow. The full scene at its default size takes a
long time, so smaller widths are useful for trying things out.

## Using the library

```python
import sys

from weekendrt.camera import Camera
from weekendrt.hittable import HittableList
from weekendrt.material import Dielectric, Lambertian, Metal
from weekendrt.sphere import Sphere
from weekendrt.vec3 import Vec3

world = HittableList([])
world.add(Sphere(Vec3(0, -100.5, -1), 100, Lambertian(Vec3(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0, 0, -1.2), 0.5, Lambertian(Vec3(0.1, 0.2, 0.5))))
world.add(Sphere(Vec3(-1, 0, -1), 0.5, Dielectric(1.5)))
world.add(Sphere(Vec3(1, 0, -1), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 0.3)))

cam = Camera(image_width=200, samples_per_pixel=20)

with open("out.ppm", "w") as out:
    cam.render(world, out, sys.stderr)
```

`Camera` is a dataclass with these settings:

- `aspect_ratio`, `image_width`, `samples_per_pixel` and `max_depth`
- `vfov`, `lookfrom`, `lookat` and `vup`
- `defocus_angle` and `focus_dist`

`render(world, out=None, log=None)` writes to standard output and standard
error by default. `initialize()`, `get_ray(i, j)` and
`ray_color(r, depth, world)` are available for casting rays one at a time.

`weekendrt.scene.random_scene()` builds the demo world.
`weekendrt.scene.make_camera(image_width, samples_per_pixel)` returns the
camera used for it.

### Modules

- `weekendrt.mathutil` provides:
  - the `INFINITY` and `PI` constants
  - `degrees_to_radians`, `random_double` and `random_int`
- `weekendrt.vec3` provides:
  - the immutable `Vec3` (also named `Point3` and `Color`), with vector arithmetic, `length`, `near_zero` and `Vec3.random`
  - `dot`, `cross`, `unit_vector`, `reflect` and `refract`
  - `random_in_unit_disk`, `random_in_unit_sphere`, `random_unit_vector` and `random_on_hemisphere`
- `weekendrt.interval` provides `Interval`:
  - `size`, `contains`, `surrounds`, `clamp`, `expand`, `merge` and addition of a displacement
  - the constants `Interval.EMPTY` and `Interval.UNIVERSE`
- `weekendrt.ray` provides `Ray`, with `origin`, `direction`, `time` and `at(t)`.
- `weekendrt.aabb` provides axis-aligned bounding boxes (`AABB`):
  - `from_points`, `merge`, `axis_interval`, `hit`, `longest_axis` and offsetting by a `Vec3`
  - every side is padded to a minimum width
- `weekendrt.color` provides `linear_to_gamma`, `color_to_bytes` and `write_color`.
- `weekendrt.hittable` provides:
  - `HitRecord` and the abstract `Hittable`; `hit` returns a `HitRecord` or `None`
  - `HittableList`, which returns the closest hit, keeps a bounding box, averages `pdf_value` and picks a random member for `random`
- `weekendrt.sphere` provides `Sphere` and `get_sphere_uv`. A sphere reports texture coordinates and has a solid-angle `pdf_value`.
- `weekendrt.quad` provides `Quad`, a parallelogram with `pdf_value` and `random`, and `make_box`, which returns six quads as a `HittableList`.
- `weekendrt.aarect` provides `XYRect`, `XZRect` and `YZRect`.
- `weekendrt.transform` provides the `Translate` and `RotateY` instances.
- `weekendrt.bvh` provides `BVHNode`. It splits along the longest axis of the enclosing box and raises `ValueError` for an empty set of objects.
- `weekendrt.material` provides:
  - `Material`, which absorbs every ray
  - `Lambertian`, `Metal` and `Dielectric`, each with `scatter(r_in, rec)`, which returns `(attenuation, scattered)` or `None`
  - `reflectance`
- `weekendrt.texture` provides `SolidColor`, `CheckerTexture` and `NoiseTexture`.
- `weekendrt.perlin` provides `Perlin`, with `noise` and `turb`.
- `weekendrt.onb` provides `ONB`, an orthonormal basis built from one direction.
- `weekendrt.pdf` provides `SpherePDF`, `HittablePDF` and `MixturePDF`.

## What it does not do

- Images are written only as plain-text PPM (P3). There is no PNG or other
  output format, and no image loading, so there is no image texture.
- The camera shades with materials that have a fixed albedo colour, and it
  uses a sky gradient as background. Nothing in the package emits light, and
  the camera does not use lights or the sampling PDFs. Textures are not
  connected to any material. The PDFs, ONB, textures, quads, rectangles and
  transforms can be used directly, but the camera does not draw on the
  textures, PDFs or ONB.
- There is no motion blur. Rays carry a time, but no object moves.
- The only command is `weekendrt`, and it renders only the built-in demo
  scene. Scenes cannot be loaded from files.