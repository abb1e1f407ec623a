"""Gaussian blur of binary PGM grayscale images."""

from __future__ import annotations

import contextlib
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

MAX_IMAGE_DIMENSION = 32 * 1024

# Integer Gaussian kernel of size 5; its weights sum to 1 << SHIFT.
KERNEL = (1, 4, 6, 4, 1)
RADIUS = 2
SHIFT = 4

_WORD = re.compile(rb"\s*(\S+)")
_INT = re.compile(rb"\s*([+-]?\d+)")


class ImageFormatError(ValueError):
    """Raised when a file is not a PGM image this module can read."""


def _normalized(values: Sequence[int], weights: Sequence[int]) -> int:
    dot = sum(v * w for v, w in zip(values, weights))
    return int(dot / sum(weights) + 0.5) & 0xFF


def _filter_line(line: Sequence[int]) -> bytearray:
    """Blur one line of pixels, using a clipped, renormalised kernel at the ends."""
    n = len(line)
    out = bytearray(n)
    rounding = 1 << (SHIFT - 1)

    for r in range(min(RADIUS, n)):
        last = min(r + RADIUS, n - 1)
        start = RADIUS - r
        out[r] = _normalized(line[: last + 1], KERNEL[start : start + last + 1])

    for r in range(RADIUS, n - RADIUS):
        window = line[r - RADIUS : r + RADIUS + 1]
        dot = sum(v * w for v, w in zip(window, KERNEL))
        out[r] = ((dot + rounding) >> SHIFT) & 0xFF

    for r in range(max(RADIUS, n - RADIUS), n):
        window = line[r - RADIUS :]
        out[r] = _normalized(window, KERNEL[: len(window)])

    return out


def blur(data: bytes | bytearray, width: int, height: int) -> bytes:
    """Return a Gaussian-blurred copy of a row-major ``width`` by ``height`` image.

    The image is filtered vertically first and then horizontally.
    """
    if width < 0 or height < 0:
        raise ValueError(f"invalid image dimensions {width}x{height}")
    if len(data) != width * height:
        raise ValueError(
            f"image data holds {len(data)} bytes, expected {width * height}"
        )
    source = bytes(data)
    temp = bytearray(len(source))
    for c in range(width):
        temp[c::width] = _filter_line(source[c::width])

    output = bytearray(len(source))
    for r in range(height):
        row = slice(r * width, (r + 1) * width)
        output[row] = _filter_line(temp[row])
    return bytes(output)


@dataclass(frozen=True)
class Grayscale:
    """An 8-bit grayscale image stored row by row."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"image data holds {len(self.data)} bytes, "
                f"expected {self.width * self.height}"
            )

    @property
    def size(self) -> int:
        return len(self.data)

    def save(self, path: str | Path) -> None:
        """Write the image as a binary PGM file."""
        header = f"P5\n{self.width} {self.height}\n255\n".encode("ascii")
        Path(path).write_bytes(header + self.data)

    def blurred(self) -> Grayscale:
        """Return a blurred copy of the image."""
        return Grayscale(self.width, self.height, blur(self.data, self.width, self.height))


def load_grayscale(path: str | Path, max_size: int = MAX_IMAGE_DIMENSION) -> Grayscale:
    """Read a binary PGM image; comments in the header are not supported."""
    raw = Path(path).read_bytes()

    magic = _WORD.match(raw)
    if magic is None or magic.group(1) != b"P5":
        raise ImageFormatError(f"{path}: not a binary PGM image")
    pos = magic.end()

    numbers = []
    for _ in range(3):
        match = _INT.match(raw, pos)
        if match is None:
            raise ImageFormatError(f"{path}: malformed header")
        numbers.append(int(match.group(1)))
        pos = match.end()
    width, height, amplitude = numbers

    if not (0 < width <= max_size and 0 < height <= max_size):
        raise ImageFormatError(f"{path}: unsupported dimensions {width}x{height}")
    if not 0 <= amplitude <= 255:
        raise ImageFormatError(f"{path}: unsupported maximum value {amplitude}")
    if raw[pos : pos + 1] != b"\n":
        raise ImageFormatError(f"{path}: header must end with a newline")
    pos += 1

    size = width * height
    data = raw[pos : pos + size]
    if len(data) < size:
        raise ImageFormatError(f"{path}: image data is truncated")
    return Grayscale(width, height, data)


def main(argv: Sequence[str] | None = None) -> int:
    """Blur an input PGM image and write the result to an output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: input.pgm output.pgm", file=sys.stderr)
        return 1
    source, target = args

    with contextlib.suppress(FileNotFoundError):
        Path(target).unlink()

    try:
        image = load_grayscale(source)
        image.blurred().save(target)
    except (OSError, ValueError) as error:
        print(f"An IO problem: {error}", file=sys.stderr)
        return 1
    return 0