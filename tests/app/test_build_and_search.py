# tests/app/test_build_and_search.py
import logging
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from graphpath.app.build import build
from graphpath.app.protocols import KPathFinder, PathFinder, TextMatcher
from graphpath.config.models import EngineModel
from graphpath.domain.entities.graph import Edge, GraphSnapshot, Node
from graphpath.domain.search.search_astar import AStarPathFinder
from graphpath.domain.search.search_dijkstra import DijkstraPathFinder
from graphpath.domain.search.search_traversal import BfsPathFinder
from graphpath.domain.search.search_yen import YenKPathFinder
from graphpath.io.search_logging import SearchLogging
from graphpath.runtime.registries import make_k_path_finder, make_path_finder
from graphpath.runtime.types import Heuristic, MatchKind


@pytest.fixture
def test_logger() -> logging.Logger:
    return logging.getLogger("graphpath.tests")


def test_default_engine_uses_dijkstra_and_yen(detour_graph):
    engine = build(use_logging=False)
    assert isinstance(engine.path_finder, DijkstraPathFinder)
    assert isinstance(engine.k_path_finder, YenKPathFinder)
    assert engine.k_path_finder.k == 3
    assert engine.shortest_path(detour_graph, 1, 2).node_ids == (1, 3, 2)
    assert engine.k_shortest_paths(detour_graph, 1, 2).found_k == 2


def test_build_from_mapping():
    engine = build(
        {
            "run_id": "t1",
            "path_finder": {"kind": "astar", "heuristic": "manhattan"},
            "k_paths": {"kind": "yen", "k": 5},
            "text_match": {"use_fuzzy": True, "fuzzy_max_distance": 2},
        },
        use_logging=False,
    )
    assert isinstance(engine.path_finder, AStarPathFinder)
    assert engine.path_finder.heuristic is Heuristic.MANHATTAN
    assert engine.k_path_finder.k == 5
    assert engine.match("hello world", "hxllo").kind is MatchKind.FUZZY


def test_components_satisfy_protocols():
    engine = build({"path_finder": {"kind": "bfs"}}, use_logging=False)
    assert isinstance(engine.path_finder, BfsPathFinder)
    assert isinstance(engine.path_finder, PathFinder)
    assert isinstance(engine.k_path_finder, KPathFinder)
    assert isinstance(engine.text_matcher, TextMatcher)


@pytest.mark.parametrize(
    "cfg",
    [
        {"path_finder": {"kind": "floyd"}},
        {"k_paths": {"kind": "yen", "k": -1}},
        {"log": {"sample_every": 0}},
        {"unexpected": True},
    ],
)
def test_invalid_config_rejected(cfg):
    with pytest.raises(ValidationError):
        EngineModel.model_validate(cfg)


@pytest.mark.parametrize("name", ["chebyshev", "", "MANHATTAN"])
def test_heuristic_names_resolve_when_built(name):
    engine = build({"path_finder": {"kind": "astar", "heuristic": name}}, use_logging=False)
    expected = Heuristic.MANHATTAN if name == "MANHATTAN" else Heuristic.EUCLIDEAN
    assert engine.path_finder.heuristic is expected


def test_unknown_kind_rejected_by_factories():
    with pytest.raises(ValueError):
        make_path_finder(SimpleNamespace(kind="floyd"))
    with pytest.raises(ValueError):
        make_k_path_finder(SimpleNamespace(kind="eppstein"))


def test_search_end_is_logged(detour_graph, test_logger, caplog):
    caplog.set_level(logging.INFO, logger="graphpath.tests")
    hooks = SearchLogging(run_id="r1", logger=test_logger)
    DijkstraPathFinder(hooks=hooks).find_path(detour_graph, 1, 2)

    [rec] = [r for r in caplog.records if r.getMessage() == "search_end"]
    assert rec.extra["run_id"] == "r1"
    assert rec.extra["algorithm"] == "dijkstra"
    assert rec.extra["total_weight"] == 2
    assert rec.extra["found"] is True


def test_fallback_and_k_paths_are_logged(detour_graph, test_logger, caplog):
    caplog.set_level(logging.INFO, logger="graphpath.tests")
    hooks = SearchLogging(logger=test_logger)
    AStarPathFinder(hooks=hooks).find_path(detour_graph, 1, 2)
    YenKPathFinder(k=2, hooks=hooks).find_paths(detour_graph, 1, 2)

    msgs = [r.getMessage() for r in caplog.records]
    assert "astar_fallback" in msgs
    k_rec = [r for r in caplog.records if getattr(r, "extra", {}).get("algorithm") == "yen"][-1]
    assert k_rec.extra["found_k"] == 2
    assert k_rec.extra["weights"] == [2, 100]


class SpurRecordingLogging(SearchLogging):
    def __init__(self, **kw):
        super().__init__(**kw)
        self.counts: list[int] = []

    def spur(self, **kw):
        self.counts.append(kw["count"])
        super().spur(**kw)


def test_spur_debug_logs_are_sampled_per_call(detour_graph, test_logger, caplog):
    caplog.set_level(logging.DEBUG, logger="graphpath.tests")
    hooks = SpurRecordingLogging(logger=test_logger, debug=True, sample_every=2)
    finder = YenKPathFinder(k=3, hooks=hooks)
    finder.find_paths(detour_graph, 1, 2)
    per_call = len(hooks.counts)
    finder.find_paths(detour_graph, 1, 2)

    assert per_call > 0
    assert hooks.counts == list(range(1, per_call + 1)) * 2
    spur_logs = [r for r in caplog.records if r.getMessage() == "spur"]
    assert len(spur_logs) == 2 * (per_call // 2)
    assert all(r.extra["count"] % 2 == 0 for r in spur_logs)
    assert any(r.getMessage() == "search_start" for r in caplog.records)


def test_errors_are_logged_and_reraised(test_logger, caplog):
    caplog.set_level(logging.INFO, logger="graphpath.tests")
    g = GraphSnapshot.of([Node(1), Node(2)], [Edge(1, 1, 2, {"weight": "-5"})])
    hooks = SearchLogging(logger=test_logger)
    with pytest.raises(ValueError):
        DijkstraPathFinder(hooks=hooks).find_path(g, 1, 2)

    [rec] = [r for r in caplog.records if r.getMessage() == "search_error"]
    assert rec.levelname == "ERROR"
    assert "negative weight" in rec.extra["error"]
