# domain/search/search_adjacency.py
import re
from collections.abc import Iterable

from graphpath.domain.entities.graph import Edge

Adjacency = dict[int, list[Edge]]

DEFAULT_WEIGHT = 1
WEIGHT_KEYS = ("weight", "Weight")
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
_INT_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


def build_adjacency(edges: Iterable[Edge]) -> Adjacency:
    """
    Undirected adjacency: every edge is listed under both endpoints, a
    self-loop once. Parallel edges are kept as separate entries.
    """
    if edges is None:
        raise ValueError("edges must not be None")
    adj: Adjacency = {}
    for e in edges:
        adj.setdefault(e.source, []).append(e)
        if e.source != e.target:
            adj.setdefault(e.target, []).append(e)
    return adj


def edge_weight(edge: Edge) -> int:
    """
    First non-empty ``weight``/``Weight`` property parsed as a 32-bit signed
    integer. Missing, unparseable or out-of-range values give DEFAULT_WEIGHT.
    """
    for key, value in edge.properties:
        if key not in WEIGHT_KEYS or value is None or value == "":
            continue
        text = str(value)
        if not _INT_RE.fullmatch(text):
            return DEFAULT_WEIGHT
        w = int(text)
        return w if INT32_MIN <= w <= INT32_MAX else DEFAULT_WEIGHT
    return DEFAULT_WEIGHT


def traversal_weight(edge: Edge) -> int:
    """edge_weight for relaxation steps; negative costs are rejected."""
    w = edge_weight(edge)
    if w < 0:
        raise ValueError(f"edge {edge.id} has negative weight {w}")
    return w


def path_weight(edge_ids: Iterable[int], edge_map: dict[int, Edge]) -> int:
    return sum(edge_weight(edge_map[eid]) for eid in edge_ids)
