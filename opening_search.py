"""Approximate opening lookup by name.

Names are ranked with Jaro-Winkler similarity. The search streams over the
book once and keeps a bounded, descending-sorted list of the best distinct
names seen so far:

- a name already held in the list is never considered again, so the first
  entry in book order carrying a given name is the one returned;
- while the list is short every candidate is inserted;
- once full, a candidate replaces the current lowest only when it scores
  strictly higher.

Sorting is stable, so equal scores keep book order. Eviction removes the
last element, i.e. the most recently encountered among the lowest scores.
"""

from __future__ import annotations

import asyncio

from opening_errors import NoMatchFoundError
from openings import Opening, OpeningBook, get_opening_book

MAX_SEARCH_RESULTS = 15
WINKLER_PREFIX_SCALE = 0.1
WINKLER_MAX_PREFIX = 4
WINKLER_BOOST_THRESHOLD = 0.7


def jaro(a: str, b: str) -> float:
    """Jaro similarity in [0, 1]. Two empty strings are identical."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    len_a, len_b = len(a), len(b)
    window = max(max(len_a, len_b) // 2 - 1, 0)
    a_matched = [False] * len_a
    b_matched = [False] * len_b

    matches = 0
    for i, ch in enumerate(a):
        for j in range(max(0, i - window), min(len_b, i + window + 1)):
            if not b_matched[j] and b[j] == ch:
                a_matched[i] = b_matched[j] = True
                matches += 1
                break
    if matches == 0:
        return 0.0

    # Matched characters that appear in a different order, counted per side
    half_transpositions = 0
    j = 0
    for i in range(len_a):
        if not a_matched[i]:
            continue
        while not b_matched[j]:
            j += 1
        if a[i] != b[j]:
            half_transpositions += 1
        j += 1

    m = float(matches)
    return (m / len_a + m / len_b + (m - half_transpositions / 2) / m) / 3


def jaro_winkler(a: str, b: str) -> float:
    """Jaro similarity boosted for a shared prefix of up to 4 characters.

    The boost only applies above a Jaro score of 0.7. Result is in [0, 1];
    identical strings score exactly 1.0.
    """
    sim = jaro(a, b)
    if sim > WINKLER_BOOST_THRESHOLD:
        prefix = 0
        for x, y in zip(a, b):
            if x != y or prefix == WINKLER_MAX_PREFIX:
                break
            prefix += 1
        sim += WINKLER_PREFIX_SCALE * prefix * (1.0 - sim)
    return min(sim, 1.0)


def search_opening_name_scored(
    query: str,
    book: OpeningBook | None = None,
    limit: int = MAX_SEARCH_RESULTS,
) -> list[tuple[Opening, float]]:
    """Best ``limit`` distinct names with their scores, highest first.

    Raises:
        NoMatchFoundError: the book is empty.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    book = book if book is not None else get_opening_book()

    best: list[tuple[Opening, float]] = []
    held_names: set[str] = set()
    for opening in book:
        if opening.name in held_names:
            continue
        score = jaro_winkler(query, opening.name)
        if len(best) < limit:
            best.append((opening, score))
        elif score > best[-1][1]:
            evicted, _ = best.pop()
            held_names.discard(evicted.name)
            best.append((opening, score))
        else:
            continue
        held_names.add(opening.name)
        best.sort(key=lambda pair: pair[1], reverse=True)

    if not best:
        raise NoMatchFoundError(f"no opening matches {query!r}")
    return best


def search_opening_name(
    query: str,
    book: OpeningBook | None = None,
    limit: int = MAX_SEARCH_RESULTS,
) -> list[Opening]:
    """Openings whose names best match ``query``, best first."""
    return [opening for opening, _ in search_opening_name_scored(query, book, limit)]


async def search_opening_name_async(
    query: str,
    book: OpeningBook | None = None,
    limit: int = MAX_SEARCH_RESULTS,
) -> list[Opening]:
    """search_opening_name on a worker thread, for hosts running an event loop."""
    return await asyncio.to_thread(search_opening_name, query, book, limit)
