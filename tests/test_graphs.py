import pytest

from dsakit.graphs import DisjointSet, bfs, dfs, kruskal_mst, prim_mst

G = [
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, 1, 0, 0, 0],
    [0, 1, 0, 0, 1, 0, 0],
    [0, 1, 0, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]

N = None
WEIGHTS = [
    [N, 25, N, N, N, 5, N],
    [25, N, 12, N, N, N, 10],
    [N, 12, N, 8, N, N, N],
    [N, N, 8, N, 16, N, 14],
    [N, N, N, 16, N, 20, 18],
    [5, N, N, N, 20, N, N],
    [N, 10, N, 14, 18, N, N],
]
EDGES = [
    (i, j, w)
    for i, row in enumerate(WEIGHTS)
    for j, w in enumerate(row)
    if j > i and w is not None
]


def assert_spanning_tree(tree, n):
    assert len(tree) == n - 1
    sets = DisjointSet(n)
    for u, v, w in tree:
        assert WEIGHTS[u][v] == w
        assert sets.union(u, v)
    assert len({sets.find(x) for x in range(n)}) == 1


def test_bfs_source_example():
    assert bfs(G, 4) == [4, 2, 3, 5, 6, 1]


def test_dfs_source_example():
    assert dfs(G, 1) == [1, 2, 4, 3, 5, 6]


def test_traversals_reach_same_vertices():
    assert sorted(bfs(G, 1)) == sorted(dfs(G, 1))
    assert bfs(G, 1)[0] == dfs(G, 1)[0] == 1


def test_dfs_repeatable():
    first = dfs(G, 1)
    second = dfs(G, 1)
    assert first == [1, 2, 4, 3, 5, 6]
    assert second == [1, 2, 4, 3, 5, 6]


def test_isolated_start():
    assert bfs(G, 0) == [0]
    assert dfs(G, 0) == [0]


def test_bad_start():
    with pytest.raises(IndexError):
        bfs(G, 7)
    with pytest.raises(IndexError):
        dfs(G, -1)


def test_prim_is_spanning_tree():
    tree = prim_mst(WEIGHTS)
    assert_spanning_tree(tree, len(WEIGHTS))


def test_prim_first_edge_is_lightest():
    tree = prim_mst(WEIGHTS)
    assert tree[0][2] == min(w for _, _, w in EDGES)


def test_kruskal_is_spanning_tree():
    tree = kruskal_mst(EDGES, len(WEIGHTS))
    assert_spanning_tree(tree, len(WEIGHTS))


def test_mst_total_weight():
    prim_total = sum(w for _, _, w in prim_mst(WEIGHTS))
    kruskal_total = sum(w for _, _, w in kruskal_mst(EDGES, len(WEIGHTS)))
    assert prim_total == kruskal_total == 71


def test_kruskal_weights_non_decreasing():
    weights = [w for _, _, w in kruskal_mst(EDGES, len(WEIGHTS))]
    assert weights == sorted(weights)


def test_kruskal_skips_self_loop():
    tree = kruskal_mst(EDGES + [(6, 6, 1)], len(WEIGHTS))
    assert all(u != v for u, v, _ in tree)


def test_disconnected_graphs_rejected():
    with pytest.raises(ValueError):
        kruskal_mst(EDGES, len(WEIGHTS) + 1)
    padded = [row + [None] for row in WEIGHTS] + [[None] * (len(WEIGHTS) + 1)]
    with pytest.raises(ValueError):
        prim_mst(padded)


def test_no_edges_rejected():
    with pytest.raises(ValueError):
        prim_mst([[None, None], [None, None]])


def test_kruskal_vertex_out_of_range():
    with pytest.raises(ValueError):
        kruskal_mst([(0, 5, 1)], 2)


def test_trivial_graphs():
    assert prim_mst([[None]]) == []
    assert kruskal_mst([], 1) == []


def test_disjoint_set():
    sets = DisjointSet(4)
    assert [sets.find(x) for x in range(4)] == [0, 1, 2, 3]
    assert sets.union(0, 1)
    assert sets.union(2, 3)
    assert sets.find(0) == sets.find(1)
    assert sets.find(0) != sets.find(2)
    assert sets.union(1, 3)
    assert not sets.union(0, 2)
    assert len({sets.find(x) for x in range(4)}) == 1


def test_disjoint_set_out_of_range():
    with pytest.raises(IndexError):
        DisjointSet(2).find(2)