# domain/search/search_core.py
from dataclasses import dataclass

from graphpath.app.protocols import KPathFinder, PathFinder, TextMatcher
from graphpath.domain.entities.graph import GraphSnapshot
from graphpath.domain.entities.paths import KPathsResult, PathResult


@dataclass
class SearchEngine:
    """Façade over the configured search components."""

    path_finder: PathFinder
    k_path_finder: KPathFinder
    text_matcher: TextMatcher

    def shortest_path(self, graph: GraphSnapshot, source: int, target: int) -> PathResult:
        return self.path_finder.find_path(graph, source, target)

    def k_shortest_paths(
        self, graph: GraphSnapshot, source: int, target: int, k: int | None = None
    ) -> KPathsResult:
        return self.k_path_finder.find_paths(graph, source, target, k)

    def match(self, text: str, query: str):
        return self.text_matcher.match(text, query)
