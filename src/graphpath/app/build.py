# graphpath/app/build.py
import logging
from collections.abc import Mapping

from graphpath.config.models import EngineModel
from graphpath.domain.search.search_core import SearchEngine
from graphpath.domain.text.text_matching import OptionTextMatcher
from graphpath.io.search_logging import SearchLogging  # JSON logs
from graphpath.runtime.hooks import NoopHooks
from graphpath.runtime.registries import make_k_path_finder, make_path_finder

logger = logging.getLogger(__name__)


def build(cfg: EngineModel | Mapping | None = None, *, use_logging: bool = True) -> SearchEngine:
    # 0) Validate config
    if cfg is None:
        model = EngineModel()
    else:
        model = cfg if isinstance(cfg, EngineModel) else EngineModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Components
    engine = SearchEngine(
        path_finder=make_path_finder(model.path_finder, hooks=hooks),
        k_path_finder=make_k_path_finder(model.k_paths, hooks=hooks),
        text_matcher=OptionTextMatcher(model.text_match),
    )
    logger.debug(
        "built engine path_finder=%s k_path_finder=%s",
        engine.path_finder.name,
        engine.k_path_finder.name,
    )
    return engine
