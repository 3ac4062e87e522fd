# domain/search/search_astar.py
"""
Informed (A*) shortest path with a planar heuristic.

The heuristic only guarantees an optimal route when it never overestimates
the remaining cost, e.g. when every edge weight is at least the straight-line
distance between its endpoints. With weights unrelated to the node layout the
search still terminates with a valid route, but it may not be the cheapest.

Open-set ties on ``f`` are broken by lower ``h`` (closer to the target),
then by insertion order.
"""

import heapq
import math
from collections.abc import Mapping

from graphpath.app.protocols import PathFinder
from graphpath.domain.entities.graph import GraphSnapshot, Node
from graphpath.domain.entities.paths import PathResult
from graphpath.domain.search.search_adjacency import Adjacency, build_adjacency, traversal_weight
from graphpath.domain.search.search_dijkstra import dijkstra, reconstruct
from graphpath.domain.search.search_heuristics import heuristic_fn
from graphpath.runtime.hooks import NoopHooks, SearchHooks, observed
from graphpath.runtime.types import Heuristic

INF = math.inf


def has_coordinates(node_map: Mapping[int, Node], source: int, target: int) -> bool:
    return node_map[source].has_position and node_map[target].has_position


def astar(
    node_map: Mapping[int, Node],
    adjacency: Adjacency,
    source: int,
    target: int,
    heuristic: Heuristic | str | None = Heuristic.EUCLIDEAN,
) -> PathResult:
    """
    A* from ``source`` to ``target``. Falls back to :func:`dijkstra` (with
    ``nodes_visited == 0``) when either endpoint has no coordinates.
    """
    if node_map is None or adjacency is None:
        raise ValueError("node_map and adjacency must not be None")
    if source not in node_map or target not in node_map:
        return PathResult.not_found()
    if not has_coordinates(node_map, source, target):
        return dijkstra(node_map.keys(), adjacency, source, target)

    h = heuristic_fn(heuristic)
    goal = node_map[target]

    g: dict[int, int] = {source: 0}
    prev: dict[int, int] = {}
    edge_prev: dict[int, int] = {}
    h0 = h(node_map[source], goal)
    # (f, h, seq, g_at_push, node)
    open_set: list[tuple[float, float, int, int, int]] = [(h0, h0, 0, 0, source)]
    seq = 0
    visited = 0

    while open_set:
        _, _, _, g_pushed, current = heapq.heappop(open_set)
        if g_pushed > g[current]:
            continue  # superseded by a cheaper push
        visited += 1
        if current == target:
            nodes, edges = reconstruct(prev, edge_prev, source, target)
            return PathResult(nodes, edges, g[target], visited)
        for e in adjacency.get(current, ()):
            nb = e.other(current)
            if nb not in node_map:
                continue
            tentative = g_pushed + traversal_weight(e)
            if tentative < g.get(nb, INF):
                g[nb] = tentative
                prev[nb] = current
                edge_prev[nb] = e.id
                hn = h(node_map[nb], goal)
                seq += 1
                heapq.heappush(open_set, (tentative + hn, hn, seq, tentative, nb))

    return PathResult.not_found(nodes_visited=visited)


class AStarPathFinder(PathFinder):
    name = "astar"

    def __init__(
        self, heuristic: Heuristic | str = Heuristic.EUCLIDEAN, hooks: SearchHooks | None = None
    ):
        self.heuristic = Heuristic.resolve(heuristic)
        self.hooks = hooks or NoopHooks()

    def find_path(self, graph: GraphSnapshot, source: int, target: int) -> PathResult:
        return observed(
            self.hooks, self.name, graph, source, target, lambda: self._run(graph, source, target)
        )

    def _run(self, graph: GraphSnapshot, source: int, target: int) -> PathResult:
        nodes = graph.node_map
        if source in nodes and target in nodes and not has_coordinates(nodes, source, target):
            self.hooks.fallback(
                algorithm=self.name, reason="missing_coordinates", source=source, target=target
            )
        return astar(nodes, build_adjacency(graph.edges), source, target, self.heuristic)
