# domain/search/search_yen.py
"""
Yen's k shortest loopless paths.

Each spur search runs Dijkstra over a filtered view of the snapshot: root
nodes are dropped from the id domain and blocked edges are passed as an
exclusion set, so the adjacency is built once and never mutated.

Paths are distinct by node sequence. Blocking a hop (u, v) therefore hides
every parallel edge between u and v, otherwise a spur search could return
an accepted route again through a sibling edge.
"""

import heapq

from graphpath.app.protocols import KPathFinder
from graphpath.domain.entities.graph import GraphSnapshot
from graphpath.domain.entities.paths import KPathsResult, PathResult
from graphpath.domain.search.search_adjacency import Adjacency, build_adjacency, path_weight
from graphpath.domain.search.search_dijkstra import dijkstra
from graphpath.runtime.hooks import NoopHooks, SearchHooks, observed

DEFAULT_K = 3


def _blocked_edges(
    accepted: list[PathResult], root: tuple[int, ...], adjacency: Adjacency
) -> set[int]:
    j = len(root) - 1
    blocked: set[int] = set()
    for p in accepted:
        if len(p.node_ids) > j + 1 and p.node_ids[: j + 1] == root:
            u, v = p.node_ids[j], p.node_ids[j + 1]
            blocked.update(e.id for e in adjacency.get(u, ()) if e.connects(u, v))
    return blocked


def yen_k_shortest(
    graph: GraphSnapshot,
    source: int,
    target: int,
    k: int = DEFAULT_K,
    *,
    hooks: SearchHooks | None = None,
) -> KPathsResult:
    if graph is None:
        raise ValueError("graph must not be None")
    if k is None or k < 0:
        raise ValueError(f"k must be >= 0, got {k!r}")
    hooks = hooks or NoopHooks()
    result = KPathsResult(requested_k=k)
    if k == 0:
        return result

    adjacency = build_adjacency(graph.edges)
    node_ids = graph.node_ids
    edge_map = graph.edge_map

    first = dijkstra(node_ids, adjacency, source, target)
    if not first.found:
        return result
    result.paths.append(first)

    seen: set[tuple[int, ...]] = {first.node_ids}  # accepted + pooled
    candidates: list[tuple[int, int, PathResult]] = []  # (weight, discovery seq, path)
    seq = 0
    spurs = 0  # per-call count handed to hooks for sampling

    for i in range(1, k):
        last = result.paths[-1]
        for j in range(len(last.node_ids) - 1):
            spur_node = last.node_ids[j]
            root = last.node_ids[: j + 1]
            blocked = _blocked_edges(result.paths, root, adjacency)
            removed = frozenset(root[:-1])

            spur = dijkstra(
                node_ids - removed, adjacency, spur_node, target, excluded_edges=blocked
            )
            spurs += 1
            hooks.spur(
                count=spurs,
                iteration=i,
                index=j,
                spur_node=spur_node,
                found=spur.found,
                excluded_edges=len(blocked),
                excluded_nodes=len(removed),
            )
            if not spur.found:
                continue

            nodes = root[:-1] + spur.node_ids
            if nodes in seen:
                continue
            edges = last.edge_ids[:j] + spur.edge_ids
            weight = path_weight(edges, edge_map)
            seen.add(nodes)
            seq += 1
            heapq.heappush(candidates, (weight, seq, PathResult(nodes, edges, weight)))

        if not candidates:
            break
        _, _, best = heapq.heappop(candidates)
        result.paths.append(best)

    return result


class YenKPathFinder(KPathFinder):
    name = "yen"

    def __init__(self, k: int = DEFAULT_K, hooks: SearchHooks | None = None):
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k!r}")
        self.k = k
        self.hooks = hooks or NoopHooks()

    def find_paths(
        self, graph: GraphSnapshot, source: int, target: int, k: int | None = None
    ) -> KPathsResult:
        k = self.k if k is None else k
        return observed(
            self.hooks,
            self.name,
            graph,
            source,
            target,
            lambda: yen_k_shortest(graph, source, target, k, hooks=self.hooks),
        )
