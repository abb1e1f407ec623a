"""Matrix-free stiffness operator of a two-dimensional truss."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

E = 210e9
A = 3.14 * 1e-2 * 1e-2

Element = tuple[int, int]


def generate_mesh(
    n_nodes_x: int, n_nodes_y: int, seed: int | None = None
) -> tuple[list[Element], list[float], list[float]]:
    """Build a shuffled truss on an ``n_nodes_x`` by ``n_nodes_y`` grid.

    Returns the topology (pairs of node ids) and the x and y coordinates of
    the nodes. Node ids and the order of elements are shuffled with ``seed``.
    """
    if n_nodes_x < 1 or n_nodes_y < 1:
        raise ValueError("the mesh needs at least one node in each direction")
    nx, ny = n_nodes_x, n_nodes_y
    n_nodes = nx * ny

    topology: list[Element] = []
    for j in range(ny - 1):
        for i in range(nx - 1):
            base = nx * j + i
            topology += [(base, base + 1), (base, base + nx), (base, base + nx + 1)]
        topology.append((nx * (j + 1) - 1, nx * (j + 2) - 1))
    top = nx * (ny - 1)
    topology.extend((top + i, top + i + 1) for i in range(nx - 1))

    rng = random.Random(seed)
    permutation = list(range(n_nodes))
    rng.shuffle(permutation)

    x = [0.0] * n_nodes
    y = [0.0] * n_nodes
    for index, node in enumerate(permutation):
        row, column = divmod(index, nx)
        x[node] = float(column)
        y[node] = float(row)

    topology = [(permutation[n1], permutation[n2]) for n1, n2 in topology]
    rng.shuffle(topology)
    return topology, x, y


def compute_local_product(
    coords: Sequence[float], lhs_local: Sequence[float]
) -> tuple[float, float, float, float]:
    """Multiply the element stiffness matrix by the element's four DOF values.

    ``coords`` holds ``(x1, y1, x2, y2)`` of the element's two nodes.
    """
    x1, y1, x2, y2 = coords
    dx = x2 - x1
    dy = y2 - y1
    dx2 = dx * dx
    dy2 = dy * dy
    dxdy = dx * dy

    first = (dx2, dxdy, -dx2, -dxdy)
    second = (dxdy, dy2, -dxdy, -dy2)
    rows = (first, second, tuple(-v for v in first), tuple(-v for v in second))

    length = math.sqrt(dx2 + dy2)
    if length == 0.0:
        raise ValueError("element nodes coincide")
    scale = E * A / (length * length * length)

    products = [0.0] * 4
    for row, value in zip(rows, lhs_local):
        for r, k in enumerate(row):
            products[r] += k * value
    return tuple(scale * p for p in products)  # type: ignore[return-value]


def compute_dofs(n1: int, n2: int) -> tuple[int, int, int, int]:
    """Return the global degrees of freedom of an element's two nodes."""
    return (n1 * 2, n1 * 2 + 1, n2 * 2, n2 * 2 + 1)


def solution(
    topology: Sequence[Element],
    n_nodes: int,
    x: Sequence[float],
    y: Sequence[float],
    lhs: Sequence[float],
) -> list[float]:
    """Apply the assembled stiffness operator to ``lhs`` and return the result."""
    size = 2 * n_nodes
    if len(lhs) != size:
        raise ValueError(f"lhs must have {size} entries, got {len(lhs)}")
    rhs = [0.0] * size
    for n1, n2 in topology:
        dofs = compute_dofs(n1, n2)
        local = compute_local_product(
            (x[n1], y[n1], x[n2], y[n2]), [lhs[d] for d in dofs]
        )
        for dof, value in zip(dofs, local):
            rhs[dof] += value
    return rhs