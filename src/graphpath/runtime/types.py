from enum import Enum


class Heuristic(Enum):
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"

    @classmethod
    def resolve(cls, name: "str | Heuristic | None") -> "Heuristic":
        """Unrecognised or missing names fall back to Euclidean."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            return cls.EUCLIDEAN


class MatchKind(Enum):
    WHOLE_WORD = "whole_word"
    REGEX = "regex"
    FUZZY = "fuzzy"
    SUBSTRING = "substring"
