"""Ambient-occlusion rendering of the sphere scene."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from pathlib import Path

from perflabs.ao.geometry import (
    FAR,
    HEIGHT,
    NAO_SAMPLES,
    NSUBSAMPLES,
    WIDTH,
    Isect,
    Ray,
    Scene,
    Vec,
    clamp,
    default_scene,
    ortho_basis,
    ray_plane_intersect,
    ray_sphere_intersect,
    save_ppm,
)

_MODULUS = 2**31 - 1
_MULTIPLIER = 48271
_RANGE = _MODULUS - 1


class UniformSampler:
    """Uniform doubles in ``[0, 1)`` from a minimal-standard linear congruential generator.

    Each double combines two successive generator outputs, as the standard
    canonical-generation procedure does for a 31-bit engine.
    """

    def __init__(self, seed: int = 1) -> None:
        state = seed % _MODULUS
        self.state = state if state else 1

    def _raw(self) -> int:
        self.state = (self.state * _MULTIPLIER) % _MODULUS
        return self.state

    def next(self) -> float:
        """Return the next sample in ``[0, 1)``."""
        low = self._raw() - 1
        high = self._raw() - 1
        value = float(low + high * _RANGE) / float(_RANGE * _RANGE)
        if value >= 1.0:
            value = math.nextafter(1.0, 0.0)
        return value


def _intersect(scene: Scene, ray: Ray) -> Isect:
    isect = Isect()
    for sphere in scene.spheres:
        ray_sphere_intersect(isect, ray, sphere)
    ray_plane_intersect(isect, ray, scene.plane)
    return isect


def ambient_occlusion(isect: Isect, scene: Scene, sampler: UniformSampler) -> Vec:
    """Return the grey level at a hit point: the share of unoccluded hemisphere rays."""
    eps = 0.0001
    origin = Vec(
        isect.p.x + eps * isect.n.x,
        isect.p.y + eps * isect.n.y,
        isect.p.z + eps * isect.n.z,
    )
    b0, b1, b2 = ortho_basis(isect.n)

    samples = NAO_SAMPLES * NAO_SAMPLES
    occlusion = 0.0
    for _ in range(samples):
        theta = math.sqrt(sampler.next())
        phi = 2.0 * math.pi * sampler.next()

        x = math.cos(phi) * theta
        y = math.sin(phi) * theta
        z = math.sqrt(1.0 - theta * theta)

        direction = Vec(
            x * b0.x + y * b1.x + z * b2.x,
            x * b0.y + y * b1.y + z * b2.y,
            x * b0.z + y * b1.z + z * b2.z,
        )
        if _intersect(scene, Ray(origin, direction)).hit:
            occlusion += 1.0

    occlusion = (samples - occlusion) / float(samples)
    return Vec(occlusion, occlusion, occlusion)


def render(
    width: int = WIDTH,
    height: int = HEIGHT,
    nsubsamples: int = NSUBSAMPLES,
    scene: Scene | None = None,
    sampler: UniformSampler | None = None,
) -> bytes:
    """Render the scene and return row-major RGB bytes."""
    if width < 1 or height < 1:
        raise ValueError(f"invalid image dimensions {width}x{height}")
    if nsubsamples < 1:
        raise ValueError(f"nsubsamples must be at least 1, got {nsubsamples}")
    scene = default_scene() if scene is None else scene
    sampler = UniformSampler() if sampler is None else sampler

    half_w = width / 2.0
    half_h = height / 2.0
    count = float(nsubsamples * nsubsamples)
    origin = Vec(0.0, 0.0, 0.0)
    img = bytearray(width * height * 3)

    for y in range(height):
        for x in range(width):
            r = g = b = 0.0
            for v in range(nsubsamples):
                for u in range(nsubsamples):
                    px = (x + (u / float(nsubsamples)) - half_w) / half_w
                    py = -(y + (v / float(nsubsamples)) - half_h) / half_h
                    ray = Ray(origin, Vec(px, py, -1.0).normalized())
                    isect = _intersect(scene, ray)
                    if isect.hit:
                        col = ambient_occlusion(isect, scene, sampler)
                        r += col.x
                        g += col.y
                        b += col.z
            offset = 3 * (y * width + x)
            img[offset] = clamp(r / count)
            img[offset + 1] = clamp(g / count)
            img[offset + 2] = clamp(b / count)
    return bytes(img)


def ao_bench(path: str | Path = "ao.ppm") -> bytes:
    """Render the default scene at full size, save it as a PPM file and return the pixels."""
    img = render(WIDTH, HEIGHT, NSUBSAMPLES, default_scene(), UniformSampler())
    save_ppm(path, WIDTH, HEIGHT, img)
    return img


def main(argv: Sequence[str] | None = None) -> int:
    """Render ``ao.ppm`` and compare it byte for byte with a reference image."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: /path/to/golden.ppm", file=sys.stderr)
        return 1
    output = Path("ao.ppm")
    ao_bench(output)

    try:
        rendered = output.read_bytes()
        golden = Path(args[0]).read_bytes()
    except OSError:
        rendered, golden = b"", None
    if rendered != golden:
        print("Validation Failed. Images are not identical.", file=sys.stderr)
        return 1

    print("Validation Successful")
    return 0