"""Vectors, scene primitives and ray intersection for an ambient-occlusion renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

WIDTH = 256
HEIGHT = 256
NSUBSAMPLES = 2
NAO_SAMPLES = 8

FAR = 1.0e17
_EPSILON = 1.0e-17


@dataclass(frozen=True, slots=True)
class Vec:
    """A three-component vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vec:
        return Vec(self.x * scale, self.y * scale, self.z * scale)

    def dot(self, other: Vec) -> float:
        """Return the scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec) -> Vec:
        """Return the vector product."""
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalized(self) -> Vec:
        """Return the unit vector in this direction; a near-zero vector is kept as is."""
        length = math.sqrt(self.dot(self))
        if abs(length) > _EPSILON:
            return Vec(self.x / length, self.y / length, self.z / length)
        return self


@dataclass(slots=True)
class Isect:
    """The nearest intersection found so far along a ray."""

    t: float = FAR
    p: Vec = field(default_factory=Vec)
    n: Vec = field(default_factory=Vec)
    hit: bool = False


@dataclass(frozen=True, slots=True)
class Sphere:
    center: Vec
    radius: float


@dataclass(frozen=True, slots=True)
class Plane:
    p: Vec
    n: Vec


@dataclass(frozen=True, slots=True)
class Ray:
    org: Vec
    dir: Vec


@dataclass(frozen=True, slots=True)
class Scene:
    """Spheres and a single ground plane."""

    spheres: tuple[Sphere, ...]
    plane: Plane


def clamp(f: float) -> int:
    """Convert an intensity in ``[0, 1]`` to a byte, saturating out-of-range values."""
    return min(max(int(f * 255.5), 0), 255)


def save_ppm(path: str | Path, width: int, height: int, img: bytes | bytearray) -> None:
    """Write an RGB image as a binary PPM file."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid image dimensions {width}x{height}")
    if len(img) != width * height * 3:
        raise ValueError(
            f"image holds {len(img)} bytes, expected {width * height * 3}"
        )
    header = f"P6\n{width} {height}\n255\n".encode("ascii")
    Path(path).write_bytes(header + bytes(img))


def ray_sphere_intersect(isect: Isect, ray: Ray, sphere: Sphere) -> None:
    """Record the ray's hit on ``sphere`` in ``isect`` if it is the nearest so far."""
    rs = ray.org - sphere.center
    b = rs.dot(ray.dir)
    c = rs.dot(rs) - sphere.radius * sphere.radius
    d = b * b - c
    if d > 0.0:
        t = -b - math.sqrt(d)
        if 0.0 < t < isect.t:
            isect.t = t
            isect.hit = True
            isect.p = ray.org + ray.dir * t
            isect.n = (isect.p - sphere.center).normalized()


def ray_plane_intersect(isect: Isect, ray: Ray, plane: Plane) -> None:
    """Record the ray's hit on ``plane`` in ``isect`` if it is the nearest so far."""
    d = -plane.p.dot(plane.n)
    v = ray.dir.dot(plane.n)
    if abs(v) < _EPSILON:
        return
    t = -(ray.org.dot(plane.n) + d) / v
    if 0.0 < t < isect.t:
        isect.t = t
        isect.hit = True
        isect.p = ray.org + ray.dir * t
        isect.n = plane.n


def ortho_basis(n: Vec) -> tuple[Vec, Vec, Vec]:
    """Return an orthonormal basis whose third vector is ``n``."""
    if -0.6 < n.x < 0.6:
        helper = Vec(1.0, 0.0, 0.0)
    elif -0.6 < n.y < 0.6:
        helper = Vec(0.0, 1.0, 0.0)
    elif -0.6 < n.z < 0.6:
        helper = Vec(0.0, 0.0, 1.0)
    else:
        helper = Vec(1.0, 0.0, 0.0)
    first = helper.cross(n).normalized()
    second = n.cross(first).normalized()
    return first, second, n


def default_scene() -> Scene:
    """Return the three spheres resting above a horizontal plane."""
    return Scene(
        spheres=(
            Sphere(Vec(-2.0, 0.0, -3.5), 0.5),
            Sphere(Vec(-0.5, 0.0, -3.0), 0.5),
            Sphere(Vec(1.0, 0.0, -2.2), 0.5),
        ),
        plane=Plane(Vec(0.0, -0.5, 0.0), Vec(0.0, 1.0, 0.0)),
    )