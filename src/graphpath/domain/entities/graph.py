from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import cached_property

PropertyPairs = tuple[tuple[str, str], ...]


def _as_pairs(props: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> PropertyPairs:
    if props is None:
        return ()
    if isinstance(props, Mapping):
        return tuple((str(k), v) for k, v in props.items())
    return tuple((str(k), v) for k, v in props)


# Core graph types consumed by the search components
@dataclass(frozen=True)
class Node:
    id: int
    x: float | None = None  # planar coordinates, only read by A*
    y: float | None = None

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None


@dataclass(frozen=True)
class Edge:
    id: int
    source: int
    target: int
    properties: PropertyPairs = ()  # ordered (key, value) pairs

    def __post_init__(self):
        object.__setattr__(self, "properties", _as_pairs(self.properties))

    def other(self, node_id: int) -> int:
        """Endpoint on the far side of ``node_id``."""
        return self.target if self.source == node_id else self.source

    def connects(self, u: int, v: int) -> bool:
        return (self.source == u and self.target == v) or (self.source == v and self.target == u)


@dataclass(frozen=True)
class GraphSnapshot:
    """
    Read-only view of the nodes and edges handed in for one call.

    ``nodes=None`` means "no explicit node list": the id domain is then
    inferred from edge endpoints.
    """

    edges: tuple[Edge, ...] = ()
    nodes: tuple[Node, ...] | None = None

    def __post_init__(self):
        if self.edges is None:
            raise ValueError("edges must not be None")
        object.__setattr__(self, "edges", tuple(self.edges))
        if self.nodes is not None:
            object.__setattr__(self, "nodes", tuple(self.nodes))

    @classmethod
    def of(cls, nodes: Iterable[Node] | None, edges: Iterable[Edge]) -> "GraphSnapshot":
        return cls(edges=edges, nodes=nodes)

    @cached_property
    def node_map(self) -> dict[int, Node]:
        if self.nodes is None:
            return {nid: Node(nid) for nid in self.node_ids}
        return {n.id: n for n in self.nodes}

    @cached_property
    def node_ids(self) -> frozenset[int]:
        if self.nodes is not None:
            return frozenset(n.id for n in self.nodes)
        ids: set[int] = set()
        for e in self.edges:
            ids.add(e.source)
            ids.add(e.target)
        return frozenset(ids)

    @cached_property
    def edge_map(self) -> dict[int, Edge]:
        return {e.id: e for e in self.edges}
