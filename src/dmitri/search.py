from __future__ import annotations
from typing import Optional, Sequence, List

from rapidfuzz import fuzz, utils

from .models import Match
from .config import TOP_K, PRECISE_WEIGHT

# Rank candidates against the typed query, best first.


def _is_subsequence(query: str, candidate: str) -> bool:
    """True when every query char appears in candidate, in order (case-insensitive)."""
    it = iter(candidate.casefold())
    return all(ch in it for ch in query.casefold())


def fuzzy_score(query: str, candidate: str) -> Optional[float]:
    """
    /* ~~~ Base similarity in [0, 1], or None if candidate is not a match.
       A candidate matches only if it contains the query as a subsequence;
       the score itself is rapidfuzz's weighted ratio. ~~~ */
    """
    if not _is_subsequence(query, candidate):
        return None
    return fuzz.WRatio(query, candidate, processor=utils.default_process) / 100.0


def substring_boost(query: str, candidate: str, weight: float) -> float:
    """
    weight / (start + weight) when query occurs literally at `start`, else 0.
    start=0 gives the maximum boost of 1.0; later starts decay towards 0.
    """
    start = candidate.find(query)
    if start == -1:
        return 0.0
    return weight / (start + weight)


def rank_matches(query: str,
                 candidates: Sequence[str],
                 weight: float = PRECISE_WEIGHT,
                 top_k: int = TOP_K) -> List[Match]:
    """Score every candidate and return the top_k Matches, best first."""
    if not query:
        return []

    rows: List[Match] = []
    for cand in candidates:
        base = fuzzy_score(query, cand)
        if base is None:
            continue
        rows.append(Match(cand, base + substring_boost(query, cand, weight)))
    # list.sort is stable: equal scores keep the provider's order
    rows.sort(key=lambda m: m.score, reverse=True)
    return rows[:top_k]


def rank(query: str,
         candidates: Sequence[str],
         weight: float = PRECISE_WEIGHT,
         top_k: int = TOP_K) -> List[str]:
    """Return up to top_k candidate strings ordered by descending boosted score."""
    return [m.candidate for m in rank_matches(query, candidates, weight, top_k)]
