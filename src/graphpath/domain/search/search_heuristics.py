import math
from collections.abc import Callable

from graphpath.domain.entities.graph import Node
from graphpath.runtime.types import Heuristic

HeuristicFn = Callable[[Node, Node], float]


def euclidean(a: Node, b: Node) -> float:
    if not (a.has_position and b.has_position):
        return 0.0
    return math.hypot(b.x - a.x, b.y - a.y)


def manhattan(a: Node, b: Node) -> float:
    if not (a.has_position and b.has_position):
        return 0.0
    return abs(b.x - a.x) + abs(b.y - a.y)


_HEURISTICS: dict[Heuristic, HeuristicFn] = {
    Heuristic.EUCLIDEAN: euclidean,
    Heuristic.MANHATTAN: manhattan,
}


def heuristic_fn(kind: Heuristic | str | None) -> HeuristicFn:
    return _HEURISTICS[Heuristic.resolve(kind)]
