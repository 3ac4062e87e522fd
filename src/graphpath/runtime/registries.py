# runtime/registries.py
from collections.abc import Callable

from graphpath.app.protocols import KPathFinder, PathFinder
from graphpath.config.models import (
    KPathsUnion,
    KPathsYenModel,
    PathFinderAStarModel,
    PathFinderBfsModel,
    PathFinderDijkstraModel,
    PathFinderUnion,
)
from graphpath.domain.search.search_astar import AStarPathFinder
from graphpath.domain.search.search_dijkstra import DijkstraPathFinder
from graphpath.domain.search.search_traversal import BfsPathFinder
from graphpath.domain.search.search_yen import YenKPathFinder
from graphpath.runtime.hooks import SearchHooks

PathFinderFactory = Callable[[PathFinderUnion, dict], PathFinder]
KPathFinderFactory = Callable[[KPathsUnion, dict], KPathFinder]

_path_finder_registry: dict[str, PathFinderFactory] = {}
_k_path_finder_registry: dict[str, KPathFinderFactory] = {}


# ------------------- Path finders ---------------------------


def register_path_finder(kind: str):
    def deco(fn: PathFinderFactory):
        _path_finder_registry[kind] = fn
        return fn

    return deco


def make_path_finder(cfg: PathFinderUnion, *, hooks: SearchHooks | None = None) -> PathFinder:
    try:
        factory = _path_finder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown path finder kind {cfg.kind!r}")
    return factory(cfg, {"hooks": hooks})


@register_path_finder("dijkstra")
def _make_dijkstra(cfg: PathFinderDijkstraModel, deps):
    return DijkstraPathFinder(hooks=deps["hooks"])


@register_path_finder("astar")
def _make_astar(cfg: PathFinderAStarModel, deps):
    return AStarPathFinder(heuristic=cfg.heuristic, hooks=deps["hooks"])


@register_path_finder("bfs")
def _make_bfs(cfg: PathFinderBfsModel, deps):
    return BfsPathFinder(hooks=deps["hooks"])


# --------------------- K-path finders ---------------------


def register_k_path_finder(kind: str):
    def deco(fn: KPathFinderFactory):
        _k_path_finder_registry[kind] = fn
        return fn

    return deco


def make_k_path_finder(cfg: KPathsUnion, *, hooks: SearchHooks | None = None) -> KPathFinder:
    try:
        factory = _k_path_finder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown k-path finder kind {cfg.kind!r}")
    return factory(cfg, {"hooks": hooks})


@register_k_path_finder("yen")
def _make_yen(cfg: KPathsYenModel, deps):
    return YenKPathFinder(k=cfg.k, hooks=deps["hooks"])
