import math

import pytest

from perflabs.ao.geometry import (
    FAR,
    Isect,
    Plane,
    Ray,
    Sphere,
    Vec,
    clamp,
    default_scene,
    ortho_basis,
    ray_plane_intersect,
    ray_sphere_intersect,
    save_ppm,
)


def _length(v: Vec) -> float:
    return math.sqrt(v.dot(v))


def test_dot_of_orthogonal_axes_is_zero():
    assert Vec(1.0, 0.0, 0.0).dot(Vec(0.0, 1.0, 0.0)) == 0.0


def test_cross_is_orthogonal_to_both_inputs():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_cross_of_x_and_y_is_z():
    assert Vec(1.0, 0.0, 0.0).cross(Vec(0.0, 1.0, 0.0)) == Vec(0.0, 0.0, 1.0)


def test_normalized_has_unit_length():
    assert _length(Vec(3.0, -4.0, 12.0).normalized()) == pytest.approx(1.0)


def test_normalized_keeps_zero_vector():
    assert Vec(0.0, 0.0, 0.0).normalized() == Vec(0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "value, expected", [(0.0, 0), (1.0, 255), (-1.0, 0), (2.0, 255)]
)
def test_clamp_saturates(value, expected):
    assert clamp(value) == expected


def test_clamp_is_monotonic():
    levels = [clamp(i / 100) for i in range(101)]
    assert levels == sorted(levels)


def test_save_ppm_writes_header_and_pixels(tmp_path):
    path = tmp_path / "img.ppm"
    pixels = bytes(range(6))
    save_ppm(path, 2, 1, pixels)
    assert path.read_bytes() == b"P6\n2 1\n255\n" + pixels


def test_save_ppm_rejects_wrong_size(tmp_path):
    with pytest.raises(ValueError):
        save_ppm(tmp_path / "img.ppm", 2, 2, b"\x00" * 3)


def test_sphere_hit_records_surface_point_and_normal():
    isect = Isect()
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, 0.0, -1.0))
    sphere = Sphere(Vec(0.0, 0.0, -3.0), 0.5)
    ray_sphere_intersect(isect, ray, sphere)
    assert isect.hit
    assert isect.t == pytest.approx(2.5)
    assert isect.p.z == pytest.approx(-2.5)
    assert isect.n == Vec(0.0, 0.0, 1.0)


def test_sphere_miss_leaves_isect_untouched():
    isect = Isect()
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, 0.0, 1.0))
    ray_sphere_intersect(isect, ray, Sphere(Vec(0.0, 0.0, -3.0), 0.5))
    assert not isect.hit
    assert isect.t == FAR


def test_farther_sphere_does_not_replace_nearer_hit():
    isect = Isect()
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, 0.0, -1.0))
    ray_sphere_intersect(isect, ray, Sphere(Vec(0.0, 0.0, -3.0), 0.5))
    nearest = isect.t
    ray_sphere_intersect(isect, ray, Sphere(Vec(0.0, 0.0, -6.0), 0.5))
    assert isect.t == nearest


def test_plane_hit_uses_plane_normal():
    scene = default_scene()
    isect = Isect()
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, -1.0, 0.0))
    ray_plane_intersect(isect, ray, scene.plane)
    assert isect.hit
    assert isect.t == pytest.approx(0.5)
    assert isect.n == scene.plane.n
    assert isect.p.y == pytest.approx(scene.plane.p.y)


def test_parallel_ray_misses_plane():
    isect = Isect()
    plane = Plane(Vec(0.0, -0.5, 0.0), Vec(0.0, 1.0, 0.0))
    ray_plane_intersect(isect, Ray(Vec(0.0, 0.0, 0.0), Vec(1.0, 0.0, 0.0)), plane)
    assert not isect.hit


@pytest.mark.parametrize(
    "normal",
    [
        Vec(0.0, 1.0, 0.0),
        Vec(1.0, 0.0, 0.0),
        Vec(0.0, 0.0, 1.0),
        Vec(0.7, 0.7, 0.14142135623730953),
        Vec(1.0, 1.0, 1.0).normalized(),
    ],
)
def test_ortho_basis_is_orthonormal(normal):
    basis = ortho_basis(normal)
    assert basis[2] == normal
    for i, a in enumerate(basis):
        assert _length(a) == pytest.approx(1.0)
        for b in basis[i + 1 :]:
            assert a.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_default_scene_layout():
    scene = default_scene()
    assert len(scene.spheres) == 3
    assert all(sphere.radius == 0.5 for sphere in scene.spheres)
    assert scene.spheres[0].center == Vec(-2.0, 0.0, -3.5)
    assert scene.plane.p == Vec(0.0, -0.5, 0.0)
    assert scene.plane.n == Vec(0.0, 1.0, 0.0)