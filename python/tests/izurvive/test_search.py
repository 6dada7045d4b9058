"""Tests for the candidate filter, edit distance and ranking stages."""
import pytest

from chatcmd.izurvive.models import Spelling
from chatcmd.izurvive.search import CandidateFilter, edit_distance, rank


# ---------------------------------------------------------------------------
# edit_distance
# ---------------------------------------------------------------------------


class TestEditDistance:
    def test_classic_example(self):
        assert edit_distance("kitten", "sitting") == 3

    def test_identity_is_zero(self):
        for text in ["", "Cherno", "Черногорск", "NW Airfield"]:
            assert edit_distance(text, text) == 0

    @pytest.mark.parametrize(
        "a,b",
        [("Cherno", "Chernogorsk"), ("Elektro", "Electro"), ("", "Vybor"), ("Novy", "Stary")],
    )
    def test_symmetric(self, a, b):
        assert edit_distance(a, b) == edit_distance(b, a)

    def test_case_sensitive(self):
        assert edit_distance("cherno", "Cherno") == 1

    def test_counts_characters_not_bytes(self):
        assert edit_distance("Березино", "Берёзино") == 1


# ---------------------------------------------------------------------------
# CandidateFilter
# ---------------------------------------------------------------------------


class TestCandidateFilter:
    def test_case_insensitive_substring_hits(self, store):
        texts = [s.spelling for s in CandidateFilter(store).candidates("cherno")]
        assert texts == ["Chernogorsk", "Cherno"]

    def test_superset_of_substring_scan(self, store):
        """Every spelling containing (or contained in) the query is a candidate."""
        candidate_filter = CandidateFilter(store)
        for search in ["obo", "Sobor", "elek", "nw", "No", "Novy Sobor", "zavod", "NWAF base"]:
            found = {s.spelling for s in candidate_filter.candidates(search)}
            needle = search.lower()
            for spelling in store.spellings():
                text = spelling.spelling.lower()
                if needle in text or text in needle:
                    assert spelling.spelling in found, (search, spelling.spelling)

    def test_short_alias_inside_longer_query(self, store):
        texts = [s.spelling for s in CandidateFilter(store).candidates("NW Airfeld")]
        assert "NW" in texts

    def test_short_query_uses_substring_scan(self, store):
        texts = {s.spelling for s in CandidateFilter(store).candidates("No")}
        assert {"Novy", "Novy Sobor", "Northwest Airfield"} <= texts

    def test_misspelling_shares_trigrams(self, store):
        texts = [s.spelling for s in CandidateFilter(store).candidates("Chernogorks")]
        assert "Chernogorsk" in texts

    def test_unrelated_query_yields_nothing(self, store):
        assert CandidateFilter(store).candidates("zzzz") == []

    def test_candidates_in_catalog_order(self, store):
        spellings = store.spellings()
        candidates = CandidateFilter(store).candidates("sobor")
        positions = [spellings.index(c) for c in candidates]
        assert positions == sorted(positions)


# ---------------------------------------------------------------------------
# rank
# ---------------------------------------------------------------------------


class TestRank:
    def test_exact_alias_first_with_zero_distance(self, store):
        candidates = CandidateFilter(store).candidates("Elektro")
        results = rank("Elektro", candidates, store, max_results=3)
        assert results[0].location.name == "Elektrozavodsk"
        assert results[0].spelling == "Elektro"
        assert results[0].distance == 0

    def test_case_mismatch_scores_nearest_alias(self, store):
        candidates = CandidateFilter(store).candidates("cherno")
        [result] = rank("cherno", candidates, store, max_results=1)
        assert result.location.name == "Chernogorsk"
        assert result.spelling == "Cherno"
        assert result.distance == 1

    def test_one_entry_per_location(self, store):
        candidates = CandidateFilter(store).candidates("Elektro")
        results = rank("Elektro", candidates, store, max_results=3)
        assert [r.location.id for r in results] == [2]

    def test_truncates_before_deduplicating(self, store):
        candidates = [
            Spelling(spelling="Elektro", location_id=2),
            Spelling(spelling="Electro", location_id=2),
            Spelling(spelling="Elektrozavodsk", location_id=2),
            Spelling(spelling="Berezino", location_id=3),
        ]
        results = rank("Elektro", candidates, store, max_results=2)
        assert [r.location.id for r in results] == [2]

    def test_dedup_keeps_other_locations_in_place(self, store):
        candidates = [
            Spelling(spelling="Sobor", location_id=4),
            Spelling(spelling="Sobor", location_id=5),
            Spelling(spelling="Stary Sobor", location_id=4),
        ]
        results = rank("Sobor", candidates, store, max_results=3)
        assert [r.location.id for r in results] == [4, 5]

    def test_ties_keep_candidate_order(self, store):
        first = [Spelling(spelling="abcd", location_id=4), Spelling(spelling="abce", location_id=5)]
        assert [r.location.id for r in rank("abcx", first, store, max_results=2)] == [4, 5]
        assert [r.location.id for r in rank("abcx", first[::-1], store, max_results=2)] == [5, 4]

    def test_sorted_and_bounded(self, store):
        candidate_filter = CandidateFilter(store)
        for search, max_results in [("Sobor", 1), ("Sobor", 5), ("No", 4), ("ro", 10)]:
            results = rank(search, candidate_filter.candidates(search), store, max_results)
            distances = [r.distance for r in results]
            assert distances == sorted(distances)
            assert len(results) <= max_results
            assert len({r.location.id for r in results}) == len(results)

    def test_empty_candidates_give_empty_result(self, store):
        assert rank("anything", [], store, max_results=3) == []

    def test_max_results_must_be_positive(self, store):
        with pytest.raises(ValueError):
            rank("Cherno", [], store, max_results=0)
