import pytest

from algoshelf.spanning_tree import SpanningTree, greedy_mst, prim_mst

SAMPLE = [
    [0, 2, 7, 4, 0],
    [2, 0, 8, 0, 3],
    [7, 8, 0, 4, 1],
    [4, 0, 4, 0, 4],
    [0, 3, 1, 4, 0],
]
TRIANGLE = [[0, 1, 5], [1, 0, 2], [5, 2, 0]]


def test_prim_sample_edges():
    tree = prim_mst(SAMPLE)
    assert tree.edges == [(0, 1, 2), (1, 4, 3), (4, 2, 1), (0, 3, 4)]
    assert tree.cost == 10


def test_prim_spans_all_vertices():
    tree = prim_mst(SAMPLE)
    assert len(tree.edges) == len(SAMPLE) - 1
    touched = {v for a, b, _ in tree.edges for v in (a, b)}
    assert touched == set(range(len(SAMPLE)))
    for a, b, cost in tree.edges:
        assert SAMPLE[a][b] == cost


def test_prim_does_not_modify_input():
    matrix = [row[:] for row in SAMPLE]
    prim_mst(matrix)
    assert matrix == SAMPLE


def test_greedy_matches_prim_on_triangle():
    assert greedy_mst(TRIANGLE).cost == prim_mst(TRIANGLE).cost
    assert len(greedy_mst(TRIANGLE).edges) == 2


def test_greedy_gets_stuck_on_sample():
    with pytest.raises(ValueError):
        greedy_mst(SAMPLE)


def test_prim_disconnected_raises():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


@pytest.mark.parametrize("build", [prim_mst, greedy_mst])
def test_non_square_raises(build):
    with pytest.raises(ValueError):
        build([[0, 1], [1, 0, 3]])


@pytest.mark.parametrize("build", [prim_mst, greedy_mst])
def test_single_vertex(build):
    tree = build([[0]])
    assert tree.edges == []
    assert tree.cost == 0


def test_cost_sums_edges():
    tree = SpanningTree([(0, 1, 2), (1, 2, 3)])
    assert tree.cost == 2 + 3