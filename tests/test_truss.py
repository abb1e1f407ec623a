import math
import random

import pytest

from perflabs.truss import A, E, compute_dofs, compute_local_product, generate_mesh, solution

NX, NY = 4, 3
N_NODES = NX * NY


@pytest.fixture
def mesh():
    return generate_mesh(NX, NY, seed=7)


def _random_lhs(seed):
    rng = random.Random(seed)
    return [rng.uniform(0.0, 42.0) for _ in range(2 * N_NODES)]


def test_element_count(mesh):
    topology, _, _ = mesh
    assert len(topology) == (NX - 1) * (NY - 1) * 3 + (NX - 1) + (NY - 1)


def test_coordinates_cover_the_grid(mesh):
    _, x, y = mesh
    points = sorted(zip(x, y))
    assert points == sorted((float(i), float(j)) for i in range(NX) for j in range(NY))


def test_elements_join_neighbouring_nodes(mesh):
    topology, x, y = mesh
    for n1, n2 in topology:
        length = math.hypot(x[n2] - x[n1], y[n2] - y[n1])
        assert length == pytest.approx(1.0) or length == pytest.approx(math.sqrt(2))


def test_elements_are_distinct(mesh):
    topology, _, _ = mesh
    assert len({frozenset(e) for e in topology}) == len(topology)


def test_same_seed_same_mesh():
    topology1, x1, y1 = generate_mesh(5, 6, seed=3)
    topology2, x2, y2 = generate_mesh(5, 6, seed=3)
    assert len(topology1) == 4 * 5 * 3 + 4 + 5
    assert [tuple(e) for e in topology1] == [tuple(e) for e in topology2]
    assert list(x1) == list(x2)
    assert list(y1) == list(y2)


def test_single_node_mesh_has_no_elements():
    topology, x, y = generate_mesh(1, 1, seed=0)
    assert topology == [] and x == [0.0] and y == [0.0]


def test_rejects_empty_mesh():
    with pytest.raises(ValueError):
        generate_mesh(0, 3)


def test_compute_dofs():
    assert compute_dofs(3, 5) == (6, 7, 10, 11)


def test_local_product_of_horizontal_bar():
    c = E * A
    result = compute_local_product((0.0, 0.0, 1.0, 0.0), (1.0, 0.0, 0.0, 0.0))
    assert result == pytest.approx((c, 0.0, -c, 0.0))


def test_local_product_is_antisymmetric_between_nodes():
    result = compute_local_product((0.0, 0.0, 1.0, 1.0), (1.0, 2.0, 3.0, 5.0))
    assert result[2] == pytest.approx(-result[0])
    assert result[3] == pytest.approx(-result[1])


def test_local_product_rejects_coincident_nodes():
    with pytest.raises(ValueError):
        compute_local_product((1.0, 1.0, 1.0, 1.0), (1.0, 0.0, 0.0, 0.0))


def test_rigid_translation_gives_no_force(mesh):
    topology, x, y = mesh
    lhs = [3.0, -2.0] * N_NODES
    rhs = solution(topology, N_NODES, x, y, lhs)
    assert all(v == pytest.approx(0.0, abs=1e-3) for v in rhs)


def test_operator_is_linear(mesh):
    topology, x, y = mesh
    u, v = _random_lhs(1), _random_lhs(2)
    ru = solution(topology, N_NODES, x, y, u)
    rv = solution(topology, N_NODES, x, y, v)
    rsum = solution(topology, N_NODES, x, y, [a + b for a, b in zip(u, v)])
    assert rsum == pytest.approx([a + b for a, b in zip(ru, rv)], rel=1e-9, abs=1e-3)


def test_operator_is_symmetric(mesh):
    topology, x, y = mesh
    u, v = _random_lhs(3), _random_lhs(4)
    ku = solution(topology, N_NODES, x, y, u)
    kv = solution(topology, N_NODES, x, y, v)
    lhs_side = sum(a * b for a, b in zip(v, ku))
    rhs_side = sum(a * b for a, b in zip(u, kv))
    assert lhs_side == pytest.approx(rhs_side, rel=1e-9)


def test_solution_rejects_wrong_lhs_length(mesh):
    topology, x, y = mesh
    with pytest.raises(ValueError):
        solution(topology, N_NODES, x, y, [0.0] * N_NODES)