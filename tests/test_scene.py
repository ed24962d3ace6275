import random

import pytest

from weekendrt.material import Dielectric, Lambertian, Metal
from weekendrt.scene import main, make_camera, random_scene
from weekendrt.vec3 import Point3, Vec3


@pytest.fixture
def world():
    random.seed(42)
    return random_scene()


def test_ground_sphere_comes_first(world):
    ground = world.objects[0]
    assert ground.center == Point3(0, -1000, 0)
    assert ground.radius == 1000
    assert isinstance(ground.mat, Lambertian)


def test_three_large_spheres_come_last(world):
    big = world.objects[-3:]
    assert [s.center for s in big] == [Point3(0, 1, 0), Point3(-4, 1, 0), Point3(4, 1, 0)]
    assert all(s.radius == 1.0 for s in big)
    assert isinstance(big[0].mat, Dielectric)
    assert isinstance(big[1].mat, Lambertian)
    assert isinstance(big[2].mat, Metal)
    assert big[2].mat.fuzz == 0.0


def test_small_spheres_respect_layout(world):
    small = world.objects[1:-3]
    assert 0 < len(small) <= 22 * 22
    for s in small:
        assert s.radius == 0.2
        assert s.center.y == 0.2
        assert -11 <= s.center.x < 11
        assert -11 <= s.center.z < 11
        assert (s.center - Point3(4, 0.2, 0)).length() > 0.9


def test_small_sphere_materials_within_ranges(world):
    for s in world.objects[1:-3]:
        if isinstance(s.mat, Metal):
            assert 0 <= s.mat.fuzz < 0.5
            assert all(0.5 <= c < 1 for c in s.mat.albedo)
        elif isinstance(s.mat, Lambertian):
            assert all(0 <= c < 1 for c in s.mat.albedo)
        else:
            assert s.mat.refraction_index == 1.5


def test_scene_is_reproducible_with_seed():
    random.seed(7)
    first = [s.center for s in random_scene()]
    random.seed(7)
    second = [s.center for s in random_scene()]
    assert first == second


def test_make_camera_settings():
    cam = make_camera(400, 50)
    assert cam.image_width == 400
    assert cam.samples_per_pixel == 50
    assert cam.aspect_ratio == pytest.approx(16.0 / 9.0)
    assert cam.max_depth == 20
    assert cam.vfov == 20
    assert cam.lookfrom == Point3(13, 2, 3)
    assert cam.lookat == Point3(0, 0, 0)
    assert cam.vup == Vec3(0, 1, 0)
    assert cam.defocus_angle == 0.6
    assert cam.focus_dist == 10.0


def test_make_camera_defaults():
    cam = make_camera()
    assert cam.image_width == 1200
    assert cam.samples_per_pixel == 10


def test_main_renders_ppm(capsys):
    assert main(["--width", "4", "--samples", "1", "--seed", "1"]) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[:3] == ["P3", "4 2", "255"]
    assert len(lines) == 3 + 4 * 2
    assert "Done." in captured.err


def test_main_is_deterministic_with_seed(capsys):
    main(["--width", "4", "--samples", "1", "--seed", "9"])
    first = capsys.readouterr().out
    main(["--width", "4", "--samples", "1", "--seed", "9"])
    second = capsys.readouterr().out
    assert first == second


def test_main_rejects_bad_width():
    with pytest.raises(SystemExit):
        main(["--width", "0"])