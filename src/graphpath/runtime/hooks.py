# runtime/hooks.py
import time
from collections.abc import Callable
from typing import Protocol

from graphpath.domain.entities.graph import GraphSnapshot


class SearchHooks(Protocol):
    def search_start(self, *, algorithm, source, target, nodes, edges): ...
    def search_end(self, result, *, algorithm, source, target, ms): ...
    def fallback(self, *, algorithm, reason, source, target): ...
    def spur(
        self, *, count, iteration, index, spur_node, found, excluded_edges, excluded_nodes
    ): ...
    def error(self, *, algorithm, exc: BaseException, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def search_end(self, *_, **__):
        pass

    def fallback(self, **_):
        pass

    def spur(self, **_):
        pass

    def error(self, **_):
        pass


def observed(
    hooks: SearchHooks,
    algorithm: str,
    graph: GraphSnapshot,
    source: int,
    target: int,
    run: Callable[[], object],
):
    """Run one search, reporting start/end (or the escaping error) to hooks."""
    hooks.search_start(
        algorithm=algorithm,
        source=source,
        target=target,
        nodes=len(graph.node_ids),
        edges=len(graph.edges),
    )
    t0 = time.perf_counter()
    try:
        result = run()
    except Exception as exc:
        hooks.error(algorithm=algorithm, exc=exc, source=source, target=target)
        raise
    ms = (time.perf_counter() - t0) * 1000
    hooks.search_end(result, algorithm=algorithm, source=source, target=target, ms=ms)
    return result
