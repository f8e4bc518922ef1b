"""Rooted trees with binary lifting and heavy-light path maximum queries."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .segment_tree import SegmentTree


class RootedTree:
    """A tree on nodes ``1..n`` with ancestor, LCA and distance queries.

    Node 0 is a sentinel above the root; the root has depth 1.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 1) -> None:
        if n < 1:
            raise ValueError(f"a tree needs at least one node, got {n}")
        self.n = n
        self.root = root
        self._check(root)
        adj: list[list[int]] = [[] for _ in range(n + 1)]
        count = 0
        for u, v in edges:
            self._check(u)
            self._check(v)
            adj[u].append(v)
            adj[v].append(u)
            count += 1
        if count != n - 1:
            raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {count}")
        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        children: list[list[int]] = [[] for _ in range(n + 1)]
        seen = [False] * (n + 1)
        seen[root] = True
        depth[root] = 1
        order: list[int] = []
        stack = [root]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    children[u].append(v)
                    stack.append(v)
        if len(order) != n:
            raise ValueError("the edges do not form a connected tree")
        size = [1] * (n + 1)
        size[0] = 0
        for u in reversed(order):
            if u != root:
                size[parent[u]] += size[u]
        up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            previous = up[-1]
            up.append([previous[previous[u]] for u in range(n + 1)])
        self._depth = depth
        self._size = size
        self._children = children
        self._up = up

    def __len__(self) -> int:
        return self.n

    def _check(self, u: int) -> None:
        if not 1 <= u <= self.n:
            raise IndexError(f"node {u} outside [1, {self.n}]")

    def depth(self, u: int) -> int:
        """Depth of ``u``, counting the root as 1."""
        self._check(u)
        return self._depth[u]

    def subtree_size(self, u: int) -> int:
        self._check(u)
        return self._size[u]

    def _lift(self, u: int, k: int) -> int:
        level = 0
        while k:
            if k & 1:
                u = self._up[level][u]
            k >>= 1
            level += 1
        return u

    def kth_ancestor(self, u: int, k: int) -> int:
        """The ancestor ``k`` steps above ``u``; ``u`` itself for ``k == 0``."""
        self._check(u)
        if not 0 <= k < self._depth[u]:
            raise ValueError(f"node {u} has no ancestor {k} steps up")
        return self._lift(u, k)

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        depth = self._depth
        if depth[u] < depth[v]:
            u, v = v, u
        u = self._lift(u, depth[u] - depth[v])
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]

    def dist(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        lowest = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[lowest]

    def go(self, u: int, v: int, k: int) -> int:
        """The ``k``-th node on the path from ``u`` to ``v``; the 0th is ``u``."""
        lowest = self.lca(u, v)
        depth = self._depth
        total = depth[u] + depth[v] - 2 * depth[lowest]
        if not 0 <= k <= total:
            raise ValueError(f"step {k} outside [0, {total}]")
        if depth[lowest] + k <= depth[u]:
            return self._lift(u, k)
        k -= depth[u] - depth[lowest]
        return self._lift(v, depth[v] - depth[lowest] - k)


class HeavyLightDecomposition(RootedTree):
    """Node values on a tree with point updates and path maximum queries."""

    def __init__(
        self,
        n: int,
        edges: Iterable[tuple[int, int]],
        values: Sequence[int],
        root: int = 1,
    ) -> None:
        super().__init__(n, edges, root)
        items = list(values)
        if len(items) != n:
            raise ValueError(f"expected {n} values, got {len(items)}")
        size = self._size
        heavy = [max(kids, key=size.__getitem__) if kids else 0 for kids in self._children]
        head = [0] * (n + 1)
        start = [0] * (n + 1)
        head[root] = root
        position = 0
        stack = [root]
        while stack:
            u = stack.pop()
            start[u] = position
            position += 1
            for v in self._children[u]:
                if v != heavy[u]:
                    head[v] = v
                    stack.append(v)
            if heavy[u]:
                head[heavy[u]] = head[u]
                stack.append(heavy[u])
        self._head = head
        self._start = start
        laid_out = [0] * n
        for node in range(1, n + 1):
            laid_out[start[node]] = items[node - 1]
        self._tree: SegmentTree = SegmentTree(n, max, -math.inf)
        self._tree.build(laid_out)

    def update(self, node: int, value: int) -> None:
        """Set the value held by ``node``."""
        self._check(node)
        self._tree.update(self._start[node], value)

    def _query_up(self, u: int, ancestor: int):
        head, start, parent = self._head, self._start, self._up[0]
        best = -math.inf
        while head[u] != head[ancestor]:
            best = max(best, self._tree.query(start[head[u]], start[u] + 1))
            u = parent[head[u]]
        return max(best, self._tree.query(start[ancestor], start[u] + 1))

    def path_max(self, u: int, v: int) -> int:
        """Largest value on the path between ``u`` and ``v``, both included."""
        lowest = self.lca(u, v)
        best = self._query_up(u, lowest)
        if v != lowest:
            below = self._lift(v, self._depth[v] - self._depth[lowest] - 1)
            best = max(best, self._query_up(v, below))
        return best