# domain/search/search_dijkstra.py
import heapq
import math
from collections.abc import Container

from graphpath.app.protocols import PathFinder
from graphpath.domain.entities.graph import GraphSnapshot
from graphpath.domain.entities.paths import PathResult
from graphpath.domain.search.search_adjacency import Adjacency, build_adjacency, traversal_weight
from graphpath.runtime.hooks import NoopHooks, SearchHooks, observed

INF = math.inf


def reconstruct(
    prev: dict[int, int], edge_prev: dict[int, int], source: int, target: int
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Walk predecessor links back from ``target``; returns (nodes, edges)."""
    nodes, edges = [target], []
    cur = target
    while cur != source:
        edges.append(edge_prev[cur])
        cur = prev[cur]
        nodes.append(cur)
    nodes.reverse()
    edges.reverse()
    return tuple(nodes), tuple(edges)


def dijkstra(
    node_ids: Container[int],
    adjacency: Adjacency,
    source: int,
    target: int,
    *,
    excluded_edges: Container[int] = frozenset(),
) -> PathResult:
    """
    Single-pair shortest weighted path over an undirected adjacency.

    ``node_ids`` is the traversable domain: neighbours outside it are never
    entered, and a source outside it yields the sentinel. ``excluded_edges``
    hides edge ids without touching ``adjacency`` (used by Yen's spur search).
    """
    if node_ids is None or adjacency is None:
        raise ValueError("node_ids and adjacency must not be None")
    if source not in node_ids or target not in node_ids:
        return PathResult.not_found()
    if source == target:
        return PathResult.single(source)

    dist: dict[int, float] = {source: 0}
    prev: dict[int, int] = {}
    edge_prev: dict[int, int] = {}
    # (distance, seq, node); seq keeps pops FIFO among equal distances
    q: list[tuple[float, int, int]] = [(0, 0, source)]
    seq = 0

    while q:
        d, _, u = heapq.heappop(q)
        if d > dist.get(u, INF):
            continue  # stale entry
        if u == target:
            break
        for e in adjacency.get(u, ()):
            if e.id in excluded_edges:
                continue
            v = e.other(u)
            if v not in node_ids:
                continue
            alt = d + traversal_weight(e)
            if alt < dist.get(v, INF):
                dist[v] = alt
                prev[v] = u
                edge_prev[v] = e.id
                seq += 1
                heapq.heappush(q, (alt, seq, v))

    if dist.get(target, INF) == INF:
        return PathResult.not_found()
    nodes, edges = reconstruct(prev, edge_prev, source, target)
    return PathResult(nodes, edges, int(dist[target]))


class DijkstraPathFinder(PathFinder):
    name = "dijkstra"

    def __init__(self, hooks: SearchHooks | None = None):
        self.hooks = hooks or NoopHooks()

    def find_path(self, graph: GraphSnapshot, source: int, target: int) -> PathResult:
        return observed(
            self.hooks,
            self.name,
            graph,
            source,
            target,
            lambda: dijkstra(graph.node_ids, build_adjacency(graph.edges), source, target),
        )
