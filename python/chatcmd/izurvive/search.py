"""Two-stage location search: coarse candidate filtering, then edit-distance ranking.

The candidate filter is a case-insensitive trigram index over every spelling.
Any spelling that contains the query, or is contained in it, shares at least
one trigram with it, so the index returns a superset of a plain substring
scan.  Spellings and queries shorter than three characters have no trigrams
and are checked by substring containment instead.

Ranking uses the raw (case-sensitive) Levenshtein distance from
``rapidfuzz``, a stable ascending sort, truncation to ``max_results`` and
finally de-duplication by location.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from rapidfuzz.distance import Levenshtein

from chatcmd.izurvive.models import RankedMatch, Spelling
from chatcmd.izurvive.store import AliasStore

NGRAM = 3


def _trigrams(text: str) -> set[str]:
    return {text[i : i + NGRAM] for i in range(len(text) - NGRAM + 1)}


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insert/delete/substitute costs, no case folding."""
    return Levenshtein.distance(a, b)


class CandidateFilter:
    """Trigram index over the spellings of an AliasStore."""

    def __init__(self, store: AliasStore) -> None:
        self._spellings: list[Spelling] = store.spellings()
        self._lowered: list[str] = [s.spelling.lower() for s in self._spellings]
        self._index: dict[str, list[int]] = defaultdict(list)
        self._short: list[int] = []

        for pos, text in enumerate(self._lowered):
            grams = _trigrams(text)
            if not grams:
                self._short.append(pos)
            for gram in grams:
                self._index[gram].append(pos)

    def candidates(self, search: str) -> list[Spelling]:
        """Spellings plausibly related to *search*, in catalog order.

        An empty list means no candidates, not an error.
        """
        needle = search.lower()
        hits: set[int] = set()

        grams = _trigrams(needle)
        if grams:
            for gram in grams:
                hits.update(self._index.get(gram, ()))
            for pos in self._short:
                if self._lowered[pos] in needle:
                    hits.add(pos)
        else:
            hits.update(
                pos for pos, text in enumerate(self._lowered)
                if needle in text or text in needle
            )

        return [self._spellings[pos] for pos in sorted(hits)]


def rank(
    search: str,
    candidates: Sequence[Spelling],
    store: AliasStore,
    max_results: int = 1,
) -> list[RankedMatch]:
    """Rank *candidates* by edit distance to *search*.

    Args:
        search: The trimmed, decoded search text.
        candidates: Output of :meth:`CandidateFilter.candidates`; its order
            breaks distance ties.
        store: Catalog used to resolve each spelling's location.
        max_results: Number of ranked spellings kept before de-duplication.

    Returns:
        At most ``max_results`` matches, non-decreasing in distance, with at
        most one entry per location (the best-ranked one).
    """
    if max_results < 1:
        raise ValueError("max_results must be at least 1")

    scored = [(edit_distance(search, c.spelling), c) for c in candidates]
    scored.sort(key=lambda pair: pair[0])

    results: list[RankedMatch] = []
    seen: set[int] = set()
    for distance, spelling in scored[:max_results]:
        if spelling.location_id in seen:
            continue
        seen.add(spelling.location_id)
        results.append(
            RankedMatch(
                location=store.get(spelling.location_id),
                spelling=spelling.spelling,
                distance=distance,
            )
        )
    return results
