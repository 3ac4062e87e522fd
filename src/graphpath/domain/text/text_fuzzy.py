# domain/text/text_fuzzy.py
"""
String similarity primitives used to rank search hits.

All functions are pure. Case-insensitive scoring lower-cases both sides
before comparing. Positions are always offsets into the caller's text.
"""

import re

import numpy as np

# token delimiters for fuzzy/whole-word matching
DELIMITERS = " ,.;:-_"
_SPLIT_RE = re.compile("[" + re.escape(DELIMITERS) + "]+")
_TOKEN_RE = re.compile("[^" + re.escape(DELIMITERS) + "]+")

NO_MATCH = (-1, 0)
POSITION_PENALTY = 0.3


def _fold(text: str, query: str, case_sensitive: bool) -> tuple[str, str]:
    if case_sensitive:
        return text, query
    return text.lower(), query.lower()


def tokenize(text: str) -> list[str]:
    return [t for t in _SPLIT_RE.split(text) if t]


def token_spans(text: str) -> list[tuple[int, str]]:
    """(start, token) for every delimiter-separated token of ``text``."""
    return [(m.start(), m.group()) for m in _TOKEN_RE.finditer(text)]


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance; insert, delete and substitute all cost 1."""
    if not a:
        return len(b or "")
    if not b:
        return len(a)

    codes = np.array([ord(c) for c in b], dtype=np.int64)
    steps = np.arange(len(b) + 1, dtype=np.int64)
    row = steps.copy()
    for i, ca in enumerate(a, start=1):
        best = np.empty_like(row)
        best[0] = i
        best[1:] = np.minimum(row[:-1] + (codes != ord(ca)), row[1:] + 1)
        # insertions: cheapest best[k] + (j - k) over k <= j
        row = np.minimum.accumulate(best - steps) + steps
    return int(row[-1])


def fuzzy_match(
    text: str, query: str, max_distance: int = 1, case_sensitive: bool = False
) -> bool:
    """
    True when ``query`` is a substring of ``text`` or lies within
    ``max_distance`` edits of any delimiter-separated token of it.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0, got {max_distance}")
    if not text or not query:
        return False
    text, query = _fold(text, query, case_sensitive)
    if query in text:
        return True
    return any(edit_distance(tok, query) <= max_distance for tok in tokenize(text))


def relevance(text: str, query: str, case_sensitive: bool = False) -> float:
    """
    Score in [0, 1]:
      • exact match -> 1.0
      • containment -> mean of a position score (earlier is better, at most
        POSITION_PENALTY lost) and the query/text length ratio
      • otherwise   -> 1 - edit_distance / longer length, floored at 0
    """
    if not text or not query:
        return 0.0
    text, query = _fold(text, query, case_sensitive)
    if text == query:
        return 1.0
    pos = text.find(query)
    if pos >= 0:
        position_score = 1.0 - (pos / len(text)) * POSITION_PENALTY
        length_score = len(query) / len(text)
        return min(1.0, (position_score + length_score) / 2.0)
    longest = max(len(text), len(query))
    return max(0.0, 1.0 - edit_distance(text, query) / longest)


def find_match(text: str, query: str, case_sensitive: bool = False) -> tuple[int, int]:
    """(position, length) of the first occurrence in ``text``, or (-1, 0)."""
    if not text or not query:
        return NO_MATCH
    if case_sensitive:
        pos = text.find(query)
        return (pos, len(query)) if pos >= 0 else NO_MATCH
    # lower() may change lengths, so search the original text
    m = re.search(re.escape(query), text, re.IGNORECASE)
    return (m.start(), m.end() - m.start()) if m else NO_MATCH


def _compile(pattern: str, case_sensitive: bool) -> re.Pattern | None:
    try:
        return re.compile(pattern, 0 if case_sensitive else re.IGNORECASE)
    except re.error:
        return None  # user-typed pattern; treated as "no match"


def regex_match(text: str, pattern: str, case_sensitive: bool = False) -> bool:
    if not text or not pattern:
        return False
    rx = _compile(pattern, case_sensitive)
    return rx is not None and rx.search(text) is not None


def find_regex_match(text: str, pattern: str, case_sensitive: bool = False) -> tuple[int, int]:
    if not text or not pattern:
        return NO_MATCH
    rx = _compile(pattern, case_sensitive)
    m = rx.search(text) if rx is not None else None
    return (m.start(), m.end() - m.start()) if m else NO_MATCH
