"""Tests for opening_search.py — Jaro-Winkler scoring and bounded name search."""

import asyncio

import chess
import pytest

from opening_errors import NoMatchFoundError
from opening_search import (
    MAX_SEARCH_RESULTS,
    jaro,
    jaro_winkler,
    search_opening_name,
    search_opening_name_async,
    search_opening_name_scored,
)
from openings import Opening, OpeningBook, get_opening_book


def make_book(*names):
    """Book of placeholder entries; only names matter for search."""
    return OpeningBook(Opening("A00", name, chess.Board(), "1. e4") for name in names)


class TestJaro:
    def test_identical(self):
        assert jaro("Ruy Lopez", "Ruy Lopez") == 1.0

    def test_no_common_characters(self):
        assert jaro("abc", "xyz") == 0.0

    def test_empty_strings(self):
        assert jaro("", "") == 1.0
        assert jaro("", "abc") == 0.0
        assert jaro("abc", "") == 0.0

    def test_transposition(self):
        assert jaro("MARTHA", "MARHTA") == pytest.approx(0.944444, abs=1e-6)

    def test_symmetric(self):
        assert jaro("DIXON", "DICKSONX") == pytest.approx(jaro("DICKSONX", "DIXON"))


class TestJaroWinkler:
    def test_identical_is_exactly_one(self):
        assert jaro_winkler("Sicilian Defense", "Sicilian Defense") == 1.0

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("MARTHA", "MARHTA", 0.961111),
            ("DWAYNE", "DUANE", 0.84),
            ("DIXON", "DICKSONX", 0.813333),
        ],
    )
    def test_reference_values(self, a, b, expected):
        assert jaro_winkler(a, b) == pytest.approx(expected, abs=1e-6)

    def test_prefix_boost(self):
        """Shared prefix ranks above the same mismatch elsewhere."""
        assert jaro_winkler("Dutch", "Dutcx") > jaro_winkler("Dutch", "Xutch")

    def test_no_boost_below_threshold(self):
        assert jaro_winkler("abcdef", "abzzzz") == pytest.approx(jaro("abcdef", "abzzzz"))

    def test_prefix_capped_at_four(self):
        a, b = "abcdefgh", "abcdefgx"
        sim = jaro(a, b)
        assert jaro_winkler(a, b) == pytest.approx(sim + 0.4 * (1 - sim))

    def test_case_sensitive(self):
        assert jaro_winkler("ruy lopez", "Ruy Lopez") < 1.0

    def test_bounds_over_book_names(self):
        names = [o.name for o in get_opening_book()]
        for query in ["", "a", "Sicilian", "king's indian", "zzzz", "Grünfeld"]:
            for name in names:
                assert 0.0 <= jaro_winkler(query, name) <= 1.0


class TestSearchOpeningName:
    def test_exact_name_first(self):
        results = search_opening_name_scored("Bongcloud Attack")
        opening, score = results[0]
        assert opening.name == "Bongcloud Attack"
        assert score == 1.0

    def test_at_most_fifteen(self):
        for query in ["Sicilian Defense", "Gambit", "x", ""]:
            assert len(search_opening_name(query)) <= MAX_SEARCH_RESULTS
        assert len(search_opening_name("Sicilian Defense")) == MAX_SEARCH_RESULTS

    def test_scores_non_increasing(self):
        scores = [score for _, score in search_opening_name_scored("King's Indian Defense")]
        assert scores == sorted(scores, reverse=True)

    def test_names_distinct(self):
        names = [o.name for o in search_opening_name("Queen's Pawn Game")]
        assert len(names) == len(set(names))

    def test_first_duplicate_returned(self):
        """'Queen's Pawn Game' appears three times; only the 1.d4 entry is eligible."""
        match = next(o for o in search_opening_name("Queen's Pawn Game") if o.name == "Queen's Pawn Game")
        assert match.moves == "1. d4"

    def test_plain_and_scored_agree(self):
        query = "French Defense"
        assert search_opening_name(query) == [o for o, _ in search_opening_name_scored(query)]

    def test_deterministic(self):
        assert search_opening_name("Italian") == search_opening_name("Italian")

    def test_empty_book(self):
        with pytest.raises(NoMatchFoundError):
            search_opening_name("Ruy Lopez", OpeningBook([]))

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            search_opening_name("Ruy Lopez", limit=0)


class TestBoundedSelection:
    def test_ties_keep_book_order(self):
        """All names score 0 against 'q'; the first ones encountered survive."""
        book = make_book("ab", "cd", "ef", "gh")
        assert [o.name for o in search_opening_name("q", book, limit=2)] == ["ab", "cd"]

    def test_strictly_better_evicts_lowest(self):
        book = make_book("zzz", "abx", "abc")
        results = search_opening_name_scored("abc", book, limit=2)
        assert [o.name for o, _ in results] == ["abc", "abx"]

    def test_equal_score_does_not_evict(self):
        book = make_book("abc", "xyz", "uvw")
        assert [o.name for o in search_opening_name("abc", book, limit=2)] == ["abc", "xyz"]

    def test_duplicate_never_returned_twice(self):
        book = OpeningBook(
            [
                Opening("A00", "Same Name", chess.Board(), "1. a3"),
                Opening("A00", "Other", chess.Board(), "1. h3"),
                Opening("A00", "Same Name", chess.Board(), "1. a4"),
            ]
        )
        results = search_opening_name("Same Name", book)
        assert [(o.name, o.moves) for o in results] == [("Same Name", "1. a3"), ("Other", "1. h3")]

    def test_fewer_entries_than_limit(self):
        book = make_book("one", "two")
        assert len(search_opening_name("one", book)) == 2


class TestSearchOpeningNameAsync:
    def test_same_result_as_sync(self):
        book = make_book("Dutch Defense", "Dutch Defense: Staunton Gambit", "Ruy Lopez")
        result = asyncio.run(search_opening_name_async("Dutch", book))
        assert result == search_opening_name("Dutch", book)

    def test_error_propagates(self):
        with pytest.raises(NoMatchFoundError):
            asyncio.run(search_opening_name_async("Dutch", OpeningBook([])))
