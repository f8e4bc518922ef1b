import pytest
from hypothesis import given, strategies as st

from cpkit.graph import bfs
from cpkit.tree import HeavyLightDecomposition, RootedTree


@st.composite
def trees(draw, max_n=12):
    n = draw(st.integers(1, max_n))
    edges = [(draw(st.integers(1, i - 1)), i) for i in range(2, n + 1)]
    root = draw(st.integers(1, n))
    return n, edges, root


def _adjacency(n, edges):
    adj = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


@given(trees())
def test_dist_matches_bfs(case):
    n, edges, root = case
    tree = RootedTree(n, edges, root)
    adj = _adjacency(n, edges)
    for u in range(1, n + 1):
        dist, _ = bfs(adj, u)
        for v in range(1, n + 1):
            assert tree.dist(u, v) == dist[v]


@given(trees())
def test_lca_lies_on_path_and_above_both(case):
    n, edges, root = case
    tree = RootedTree(n, edges, root)
    for u in range(1, n + 1):
        for v in range(1, n + 1):
            lowest = tree.lca(u, v)
            assert tree.dist(u, lowest) + tree.dist(lowest, v) == tree.dist(u, v)
            assert tree.kth_ancestor(u, tree.depth(u) - tree.depth(lowest)) == lowest
            assert tree.kth_ancestor(v, tree.depth(v) - tree.depth(lowest)) == lowest


@given(trees())
def test_go_walks_the_path(case):
    n, edges, root = case
    tree = RootedTree(n, edges, root)
    for u in range(1, n + 1):
        for v in range(1, n + 1):
            total = tree.dist(u, v)
            assert tree.go(u, v, 0) == u
            assert tree.go(u, v, total) == v
            for k in range(total + 1):
                node = tree.go(u, v, k)
                assert tree.dist(u, node) == k
                assert tree.dist(node, v) == total - k


@given(trees())
def test_subtree_sizes(case):
    n, edges, root = case
    tree = RootedTree(n, edges, root)
    assert tree.subtree_size(root) == n
    assert tree.depth(root) == 1
    for u in range(1, n + 1):
        inside = sum(
            1
            for v in range(1, n + 1)
            if tree.depth(v) >= tree.depth(u)
            and tree.kth_ancestor(v, tree.depth(v) - tree.depth(u)) == u
        )
        assert tree.subtree_size(u) == inside


def test_invalid_trees_rejected():
    with pytest.raises(ValueError):
        RootedTree(3, [(1, 2)])
    with pytest.raises(ValueError):
        RootedTree(3, [(1, 2), (2, 1)])
    with pytest.raises(IndexError):
        RootedTree(2, [(1, 3)])
    with pytest.raises(ValueError):
        RootedTree(0, [])


def test_query_errors():
    tree = RootedTree(3, [(1, 2), (2, 3)])
    with pytest.raises(ValueError):
        tree.kth_ancestor(3, -1)
    with pytest.raises(ValueError):
        tree.kth_ancestor(3, 3)
    with pytest.raises(ValueError):
        tree.go(1, 3, 3)
    with pytest.raises(IndexError):
        tree.lca(0, 1)


def _path_max_by_walking(tree, values, u, v):
    return max(values[tree.go(u, v, k) - 1] for k in range(tree.dist(u, v) + 1))


@given(
    trees().flatmap(
        lambda case: st.tuples(
            st.just(case),
            st.lists(st.integers(-50, 50), min_size=case[0], max_size=case[0]),
            st.lists(
                st.tuples(st.integers(1, case[0]), st.integers(-50, 50)), max_size=6
            ),
        )
    )
)
def test_path_max_matches_walk(data):
    (n, edges, root), values, updates = data
    values = list(values)
    hld = HeavyLightDecomposition(n, edges, values, root)
    for node, value in [(None, None)] + updates:
        if node is not None:
            hld.update(node, value)
            values[node - 1] = value
        for u in range(1, n + 1):
            for v in range(1, n + 1):
                assert hld.path_max(u, v) == _path_max_by_walking(hld, values, u, v)


def test_path_max_on_small_path():
    hld = HeavyLightDecomposition(3, [(1, 2), (2, 3)], [5, 1, 3])
    assert hld.path_max(1, 3) == 5
    assert hld.path_max(2, 3) == 3
    hld.update(2, 9)
    assert hld.path_max(3, 1) == 9


def test_value_count_checked():
    with pytest.raises(ValueError):
        HeavyLightDecomposition(2, [(1, 2)], [1])