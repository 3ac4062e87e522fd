from dataclasses import dataclass, field

NO_PATH_WEIGHT = -1


@dataclass(frozen=True)
class PathResult:
    node_ids: tuple[int, ...] = ()
    edge_ids: tuple[int, ...] = ()
    total_weight: int = NO_PATH_WEIGHT
    nodes_visited: int = 0  # A* diagnostics; 0 for every other search

    @classmethod
    def not_found(cls, nodes_visited: int = 0) -> "PathResult":
        return cls((), (), NO_PATH_WEIGHT, nodes_visited)

    @classmethod
    def single(cls, node_id: int) -> "PathResult":
        return cls((node_id,), (), 0)

    @property
    def found(self) -> bool:
        return self.total_weight != NO_PATH_WEIGHT and bool(self.node_ids)

    @property
    def hops(self) -> int:
        return len(self.edge_ids)


@dataclass
class KPathsResult:
    requested_k: int
    paths: list[PathResult] = field(default_factory=list)

    @property
    def found_k(self) -> int:
        return len(self.paths)
