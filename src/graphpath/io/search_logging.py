# io/search_logging.py
import json
import logging
import sys

from graphpath.domain.entities.paths import KPathsResult, PathResult
from graphpath.runtime.hooks import NoopHooks


def _default_json_logger(name="graphpath", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    One place to shape and emit structured logs for every search call.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    @staticmethod
    def _shape_result(result) -> dict:
        if isinstance(result, KPathsResult):
            return {
                "found": result.found_k > 0,
                "requested_k": result.requested_k,
                "found_k": result.found_k,
                "weights": [p.total_weight for p in result.paths],
            }
        if isinstance(result, PathResult):
            return {
                "found": result.found,
                "total_weight": result.total_weight,
                "hops": result.hops,
                "nodes_visited": result.nodes_visited,
            }
        return {}

    # --------------------------------------------------------

    def search_start(self, *, algorithm, source, target, nodes, edges):
        if self.debug:
            self._emit(
                "DEBUG",
                "search_start",
                algorithm=algorithm,
                source=source,
                target=target,
                nodes=nodes,
                edges=edges,
            )

    def search_end(self, result, *, algorithm, source, target, ms):
        self._emit(
            "INFO",
            "search_end",
            algorithm=algorithm,
            source=source,
            target=target,
            ms=round(ms, 3),
            **self._shape_result(result),
        )

    def fallback(self, *, algorithm, reason, source, target):
        self._emit(
            "INFO",
            "astar_fallback",
            algorithm=algorithm,
            reason=reason,
            source=source,
            target=target,
        )

    def spur(
        self, *, count, iteration, index, spur_node, found, excluded_edges, excluded_nodes
    ):
        if self.debug and (count % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "spur",
                count=count,
                iteration=iteration,
                index=index,
                spur_node=spur_node,
                found=found,
                excluded_edges=excluded_edges,
                excluded_nodes=excluded_nodes,
            )

    def error(self, *, algorithm, exc: BaseException, **extra):
        self._emit("ERROR", "search_error", algorithm=algorithm, error=str(exc), **extra)
