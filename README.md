# perflabs

A collection of small, well-defined computational workloads, each with an
input generator and a reference solution. They are useful as correctness
oracles when you experiment with faster variants of the same computation, and
as compact workloads in their own right.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Workloads

| Module | What it computes |
| --- | --- |
| `perflabs.conditional_store` | `select`: the `(metric, data)` pairs whose metric lies in `[lower, upper]`, in input order |
| `perflabs.lookup_tables` | `histogram`: counts of values 0..99 in 7 uneven buckets (`map_to_bucket`) |
| `perflabs.smoothing` | `image_smoothing`: sum of each byte's neighbours within a radius, clipped at the ends, stored as 16-bit values |
| `perflabs.longest_line` | `longest_line`: length of the longest line of a `str` or `bytes` text |
| `perflabs.checksum` | `checksum`: 16-bit sum with end-around carry |
| `perflabs.dep_chains` | `solution`: digit sums of the values of one linked list (`Node`, `Arena`) that occur in another |
| `perflabs.sort_pairs` | `solution`: `Pair` records sorted by `key1`, then `key2` |
| `perflabs.alignment` | `align_score`, `compute_alignment`: global alignment scores with affine gap penalties, kept as signed 16-bit values |
| `perflabs.data_packing` | `create_entry` builds `Entry` records; `solution` shuffles them and sorts them by `i` |
| `perflabs.false_sharing` | `solution`: sum of `transform(item) % 13`, split between worker threads |
| `perflabs.truss` | `generate_mesh` and `solution`: a shuffled 2D truss mesh and its matrix-free stiffness operator |
| `perflabs.matrix_power` | `power`: integer power of a square `float32` matrix by repeated squaring (NumPy) |
| `perflabs.transpose` | `transpose`, `solution`: square matrix transpose |
| `perflabs.grayscale` | `load_grayscale`, `Grayscale.save`, `blur`: binary PGM (P5) images and a 5-tap Gaussian blur |
| `perflabs.prefetch` | `HashMap` with one value per bucket, and `solution`: digit sums of the lookups it finds |
| `perflabs.crc32` | `crc32`, `crc32_file`: non-reflected CRC-32 with polynomial `0x1EDC6F41`; `MappedFile` maps a file read-only |
| `perflabs.ao.geometry` | `Vec`, `Sphere`, `Plane`, `Ray`, `Isect`, `Scene`, ray intersection and `save_ppm` |
| `perflabs.ao.render` | `render`, `ambient_occlusion`, `ao_bench`: an ambient-occlusion ray tracer writing a PPM image |

## Examples

```python
import random

from perflabs.crc32 import crc32, crc32_file
from perflabs.longest_line import longest_line
from perflabs.lookup_tables import histogram, map_to_bucket
from perflabs.sort_pairs import init, solution

longest_line("ab\nabc\n")          # 3
map_to_bucket(12)                  # 0
histogram([0, 13, 99])             # [1, 1, 0, 0, 0, 0, 1]

checksum_of_bytes = crc32(b"hello")
checksum_of_file = crc32_file("data.bin")

pairs = solution(init(random.Random(0)))
```

Most modules have an `init` function that takes a `random.Random` and
returns an input of the size the workload uses. A few take extra arguments:
`matrix_power.init(rng, n)`, `prefetch.init(rng, size, lookups_count)`.
`transpose.init_matrix(size)` and `truss.generate_mesh(n_nodes_x, n_nodes_y,
seed)` are the generators for those two workloads. A seeded generator gives
the same input every time.

## Command-line tools

Blur a binary PGM image with the 5-tap Gaussian kernel:

```
perflabs-blur input.pgm output.pgm
```

Render the ambient-occlusion scene into `ao.ppm` in the current directory and
compare it byte for byte with a reference image:

```
perflabs-ao golden.ppm
```

Both commands exit with status 1 when an input cannot be read or the result
does not match.

## What is not included

There is no timing or benchmark harness. The functions compute the reference
results only. To measure them, time them with your own tools, for example
`timeit` or a pytest benchmarking plugin.