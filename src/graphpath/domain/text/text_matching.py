# domain/text/text_matching.py
from dataclasses import dataclass

from graphpath.app.protocols import TextMatcher
from graphpath.config.models import TextMatchModel
from graphpath.domain.text.text_fuzzy import (
    find_match,
    find_regex_match,
    fuzzy_match,
    regex_match,
    relevance,
    token_spans,
)
from graphpath.runtime.types import MatchKind


@dataclass(frozen=True)
class TextMatch:
    kind: MatchKind
    relevance: float
    position: int  # -1 when the hit has no literal span (fuzzy-only)
    length: int


def _whole_word(text: str, query: str, case_sensitive: bool) -> TextMatch | None:
    q = query if case_sensitive else query.lower()
    for start, word in token_spans(text):
        if (word if case_sensitive else word.lower()) == q:
            return TextMatch(MatchKind.WHOLE_WORD, 1.0, start, len(word))
    return None


def match_text(text: str, query: str, options: TextMatchModel | None = None) -> TextMatch | None:
    """
    Apply the strategy picked by ``options`` (whole word, regex, fuzzy, or
    plain substring) and return the hit, or None.
    """
    opts = options or TextMatchModel()
    cs = opts.case_sensitive
    if not text or not query:
        return None

    if opts.whole_word_only:
        return _whole_word(text, query, cs)

    if opts.use_regex:
        if not regex_match(text, query, cs):
            return None
        pos, length = find_regex_match(text, query, cs)
        return TextMatch(MatchKind.REGEX, relevance(text, query, cs), pos, length)

    if opts.use_fuzzy:
        if not fuzzy_match(text, query, opts.fuzzy_max_distance, cs):
            return None
        pos, length = find_match(text, query, cs)
        return TextMatch(MatchKind.FUZZY, relevance(text, query, cs), pos, length)

    pos, length = find_match(text, query, cs)
    if pos < 0:
        return None
    return TextMatch(MatchKind.SUBSTRING, relevance(text, query, cs), pos, length)


class OptionTextMatcher(TextMatcher):
    def __init__(self, options: TextMatchModel | None = None):
        self.options = options or TextMatchModel()

    def match(self, text: str, query: str) -> TextMatch | None:
        return match_text(text, query, self.options)
