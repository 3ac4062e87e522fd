from typing import Protocol, runtime_checkable

from graphpath.domain.entities.graph import GraphSnapshot
from graphpath.domain.entities.paths import KPathsResult, PathResult


@runtime_checkable
class PathFinder(Protocol):
    """
    Responsibilities:
      • Compute one route between two node ids of a snapshot.
      • Return the sentinel PathResult (weight -1) when there is none.
    Implementations hold no graph state between calls.
    """

    name: str

    def find_path(self, graph: GraphSnapshot, source: int, target: int) -> PathResult: ...


@runtime_checkable
class KPathFinder(Protocol):
    """
    Responsibilities:
      • Enumerate up to k loopless routes in non-decreasing weight order.
    """

    name: str
    k: int

    def find_paths(
        self, graph: GraphSnapshot, source: int, target: int, k: int | None = None
    ) -> KPathsResult: ...


@runtime_checkable
class TextMatcher(Protocol):
    """Score a candidate string against a free-text query."""

    def match(self, text: str, query: str): ...
