# domain/search/search_traversal.py
from collections import deque

from graphpath.app.protocols import PathFinder
from graphpath.domain.entities.graph import GraphSnapshot
from graphpath.domain.entities.paths import PathResult
from graphpath.domain.search.search_adjacency import build_adjacency, path_weight
from graphpath.domain.search.search_dijkstra import reconstruct
from graphpath.runtime.hooks import NoopHooks, SearchHooks, observed

DEFAULT_MAX_PATHS = 10


def bfs_path(graph: GraphSnapshot, source: int, target: int) -> PathResult:
    """Fewest-hops route; the reported weight is the sum of the hops taken."""
    node_ids = graph.node_ids
    if source not in node_ids or target not in node_ids:
        return PathResult.not_found()
    if source == target:
        return PathResult.single(source)

    adjacency = build_adjacency(graph.edges)
    prev: dict[int, int] = {}
    edge_prev: dict[int, int] = {}
    seen = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for e in adjacency.get(u, ()):
            v = e.other(u)
            if v in seen or v not in node_ids:
                continue
            seen.add(v)
            prev[v], edge_prev[v] = u, e.id
            if v == target:
                nodes, edges = reconstruct(prev, edge_prev, source, target)
                return PathResult(nodes, edges, path_weight(edges, graph.edge_map))
            queue.append(v)
    return PathResult.not_found()


def all_simple_paths(
    graph: GraphSnapshot,
    source: int,
    target: int,
    max_paths: int | None = DEFAULT_MAX_PATHS,
) -> list[PathResult]:
    """
    Depth-first enumeration of loopless routes, one per distinct edge
    sequence, in discovery order. ``max_paths=None`` removes the cap.
    """
    if max_paths is not None and max_paths < 0:
        raise ValueError(f"max_paths must be >= 0, got {max_paths!r}")
    node_ids = graph.node_ids
    if source not in node_ids or target not in node_ids or max_paths == 0:
        return []
    if source == target:
        return [PathResult.single(source)]

    adjacency = build_adjacency(graph.edges)
    edge_map = graph.edge_map
    out: list[PathResult] = []
    nodes, edges = [source], []
    on_path = {source}
    # one adjacency iterator per node on the current path
    frames = [(source, iter(adjacency.get(source, ())))]
    while frames:
        u, pending = frames[-1]
        e = next(pending, None)
        if e is None:
            frames.pop()
            if len(nodes) > 1:
                on_path.discard(nodes.pop())
                edges.pop()
            continue
        v = e.other(u)
        if v in on_path or v not in node_ids:
            continue
        if v == target:
            hit = (*edges, e.id)
            out.append(PathResult((*nodes, v), hit, path_weight(hit, edge_map)))
            if max_paths is not None and len(out) >= max_paths:
                break
            continue
        nodes.append(v)
        edges.append(e.id)
        on_path.add(v)
        frames.append((v, iter(adjacency.get(v, ()))))
    return out


class BfsPathFinder(PathFinder):
    name = "bfs"

    def __init__(self, hooks: SearchHooks | None = None):
        self.hooks = hooks or NoopHooks()

    def find_path(self, graph: GraphSnapshot, source: int, target: int) -> PathResult:
        return observed(
            self.hooks, self.name, graph, source, target, lambda: bfs_path(graph, source, target)
        )
