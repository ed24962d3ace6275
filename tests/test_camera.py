import io
import random

import pytest

from weekendrt.camera import Camera
from weekendrt.hittable import HittableList
from weekendrt.material import Material
from weekendrt.ray import Ray
from weekendrt.sphere import Sphere
from weekendrt.vec3 import Vec3, dot


class _FixedBounce(Material):
    def __init__(self, attenuation, direction):
        self.attenuation = attenuation
        self.direction = direction

    def scatter(self, r_in, rec):
        return self.attenuation, Ray(rec.p, self.direction)


def _initialized(**kwargs):
    cam = Camera(**kwargs)
    cam.initialize()
    return cam


def test_image_height_follows_aspect_ratio():
    cam = _initialized(image_width=4, aspect_ratio=2.0)
    assert cam.image_height == 2


def test_image_height_is_at_least_one():
    cam = _initialized(image_width=1, aspect_ratio=16.0 / 9.0)
    assert cam.image_height == 1


def test_get_ray_requires_initialize():
    with pytest.raises(RuntimeError):
        Camera().get_ray(0, 0)


def test_camera_frame_is_orthonormal():
    cam = _initialized(lookfrom=Vec3(13, 2, 3), lookat=Vec3(0, 0, 0))
    for a in (cam.u, cam.v, cam.w):
        assert a.length() == pytest.approx(1.0)
    assert dot(cam.u, cam.v) == pytest.approx(0.0, abs=1e-12)
    assert dot(cam.v, cam.w) == pytest.approx(0.0, abs=1e-12)
    assert dot(cam.u, cam.w) == pytest.approx(0.0, abs=1e-12)


def test_rays_without_defocus_start_at_lookfrom():
    random.seed(3)
    cam = _initialized(lookfrom=Vec3(1, 2, 3), lookat=Vec3(0, 0, 0), image_width=10)
    for i, j in [(0, 0), (5, 5), (9, 9)]:
        r = cam.get_ray(i, j)
        assert r.origin == Vec3(1, 2, 3)
        assert dot(r.direction, -cam.w) > 0


def test_defocused_rays_start_within_disk():
    random.seed(5)
    cam = _initialized(defocus_angle=10.0, focus_dist=2.0, image_width=8)
    radius = cam.defocus_disk_u.length()
    for _ in range(50):
        r = cam.get_ray(3, 3)
        offset = r.origin - cam.lookfrom
        assert offset.length() <= radius + 1e-12
        assert dot(offset, cam.w) == pytest.approx(0.0, abs=1e-12)


def test_ray_color_zero_depth_is_black():
    cam = _initialized()
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 1, 0)), 0, HittableList()) == Vec3(0, 0, 0)


def test_ray_color_sky_gradient_extremes():
    cam = _initialized()
    world = HittableList()
    up = cam.ray_color(Ray(Vec3(), Vec3(0, 1, 0)), 5, world)
    down = cam.ray_color(Ray(Vec3(), Vec3(0, -1, 0)), 5, world)
    assert tuple(up) == pytest.approx((0.5, 0.7, 1.0))
    assert tuple(down) == pytest.approx((1.0, 1.0, 1.0))


def test_absorbing_material_gives_black():
    cam = _initialized()
    world = HittableList([Sphere(Vec3(0, 0, -1), 0.5, Material())])
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, world) == Vec3(0, 0, 0)


def test_bounce_to_sky_through_white_material():
    cam = _initialized()
    mat = _FixedBounce(Vec3(1, 1, 1), Vec3(0, 1, 0))
    world = HittableList([Sphere(Vec3(0, 0, -1), 0.5, mat)])
    result = cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, world)
    assert tuple(result) == pytest.approx((0.5, 0.7, 1.0))


def test_black_attenuation_gives_black():
    cam = _initialized()
    mat = _FixedBounce(Vec3(0, 0, 0), Vec3(0, 1, 0))
    world = HittableList([Sphere(Vec3(0, 0, -1), 0.5, mat)])
    result = cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, world)
    assert tuple(result) == pytest.approx((0.0, 0.0, 0.0))


def test_bounce_limit_stops_light():
    cam = _initialized()
    mat = _FixedBounce(Vec3(1, 1, 1), Vec3(0, 1, 0))
    world = HittableList([Sphere(Vec3(0, 0, -1), 0.5, mat)])
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 1, world) == Vec3(0, 0, 0)


def test_render_writes_ppm_header_and_pixels():
    random.seed(1)
    cam = Camera(image_width=4, aspect_ratio=2.0, samples_per_pixel=2, max_depth=3)
    out, log = io.StringIO(), io.StringIO()
    cam.render(HittableList(), out, log)
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["P3", "4 2", "255"]
    assert len(lines) == 3 + 4 * 2
    for line in lines[3:]:
        values = [int(x) for x in line.split()]
        assert len(values) == 3
        assert all(0 <= x <= 255 for x in values)


def test_render_reports_progress():
    random.seed(1)
    cam = Camera(image_width=3, aspect_ratio=1.0, samples_per_pixel=1, max_depth=2)
    out, log = io.StringIO(), io.StringIO()
    cam.render(HittableList(), out, log)
    text = log.getvalue()
    assert "Scanlines remaining: 3 " in text
    assert "Scanlines remaining: 1 " in text
    assert text.endswith("Done.                 \n")