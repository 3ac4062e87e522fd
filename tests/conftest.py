# tests/conftest.py
import math

import numpy as np
import pytest

from graphpath.domain.entities.graph import Edge, GraphSnapshot, Node


def wedge(eid: int, u: int, v: int, w: int | str | None = None) -> Edge:
    """Edge with an optional ``weight`` property."""
    props = {} if w is None else {"weight": str(w)}
    return Edge(eid, u, v, props)


@pytest.fixture
def detour_graph() -> GraphSnapshot:
    # 1-2 is direct but expensive; 1-3-2 costs 2
    nodes = [Node(1), Node(2), Node(3)]
    edges = [wedge(1, 1, 2, 100), wedge(2, 1, 3, 1), wedge(3, 3, 2, 1)]
    return GraphSnapshot.of(nodes, edges)


@pytest.fixture
def random_graph():
    """
    Factory: random undirected multigraph on ``n`` nodes with ``m`` edges.
    With ``coords=True`` every node gets an integer position and each edge
    weight is at least the endpoints' ``metric`` distance, which keeps the
    matching A* heuristic admissible.
    """

    def make(seed: int, n: int = 7, m: int = 12, coords: bool = False, metric="euclidean"):
        rng = np.random.default_rng(seed)
        if coords:
            pts = rng.integers(0, 20, size=(n, 2))
            nodes = [Node(i, float(pts[i, 0]), float(pts[i, 1])) for i in range(n)]
        else:
            nodes = [Node(i) for i in range(n)]
        edges = []
        for eid in range(m):
            u, v = (int(x) for x in rng.integers(0, n, size=2))
            w = int(rng.integers(1, 10))
            if coords:
                a, b = nodes[u], nodes[v]
                if metric == "manhattan":
                    d = abs(a.x - b.x) + abs(a.y - b.y)
                else:
                    d = math.hypot(a.x - b.x, a.y - b.y)
                w += math.ceil(d)
            edges.append(wedge(eid, u, v, w))
        return GraphSnapshot.of(nodes, edges)

    return make
