from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- PATH FINDERS ---------------------


class PathFinderDijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class PathFinderAStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    heuristic: str = "euclidean"  # unrecognised names resolve to euclidean


class PathFinderBfsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


PathFinderUnion = Annotated[
    PathFinderDijkstraModel | PathFinderAStarModel | PathFinderBfsModel,
    Field(discriminator="kind"),
]

# ----------------- K-PATH FINDERS ---------------------


class KPathsYenModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["yen"] = "yen"
    k: int = Field(default=3, ge=0)


KPathsUnion = Annotated[KPathsYenModel, Field(discriminator="kind")]

# ----------------- TEXT MATCHING ---------------------


class TextMatchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    use_regex: bool = False
    use_fuzzy: bool = False
    fuzzy_max_distance: int = Field(default=1, ge=0)
    case_sensitive: bool = False
    whole_word_only: bool = False

    @model_validator(mode="after")
    def _one_strategy(self):
        picked = [self.whole_word_only, self.use_regex, self.use_fuzzy]
        if sum(picked) > 1:
            raise ValueError("choose at most one of whole_word_only, use_regex, use_fuzzy")
        return self


# ------------------------------------------------------------------


class EngineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    log: LogModel = LogModel()
    path_finder: PathFinderUnion = Field(default_factory=PathFinderDijkstraModel)
    k_paths: KPathsUnion = Field(default_factory=KPathsYenModel)
    text_match: TextMatchModel = Field(default_factory=TextMatchModel)
