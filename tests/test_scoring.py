"""
Unit tests for query normalization and similarity scoring.
"""

import pytest

from app.search.scoring import (
    fuzzy_score,
    levenshtein_distance,
    levenshtein_similarity,
    normalize_query,
    score,
)


class TestNormalizeQuery:
    def test_lowercases_and_trims(self):
        assert normalize_query("  Logo Design \t") == "logo design"

    def test_missing_query_is_empty(self):
        assert normalize_query(None) == ""

    def test_whitespace_only_is_empty(self):
        assert normalize_query("   \n ") == ""

    def test_inner_whitespace_and_accents_preserved(self):
        assert normalize_query(" Café  Menü ") == "café  menü"


class TestLevenshtein:
    @pytest.mark.parametrize(
        "source,target,expected",
        [
            ("", "", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("logo", "lgoo", 2),
            ("design", "design", 0),
            ("seo", "seo booster", 8),
        ],
    )
    def test_known_distances(self, source, target, expected):
        assert levenshtein_distance(source, target) == expected

    @pytest.mark.parametrize(
        "a,b",
        [("kitten", "sitting"), ("", "plugin"), ("wordpress", "wrdprss"), ("ab", "ba")],
    )
    def test_distance_is_symmetric(self, a, b):
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_similarity_normalizes_by_longest(self):
        assert levenshtein_similarity("logo", "lgoo") == pytest.approx(0.5)
        assert levenshtein_similarity("design", "design") == 1.0

    def test_similarity_of_two_empty_strings_is_zero(self):
        assert levenshtein_similarity("", "") == 0.0


class TestScoreTiers:
    def test_exact_match(self):
        assert score("Logo Design", "logo design") == 100

    def test_exact_match_ignores_query_case(self):
        assert score("logo design", "LOGO Design") == 100

    def test_prefix_match(self):
        assert score("WordPress SEO Booster", "wordpress") == 80

    def test_substring_match(self):
        assert score("Professional Logo Design", "logo") == 60

    def test_tiers_are_not_combined(self):
        # Prefix and substring both apply; only the first tier counts
        assert score("logo logo", "logo") == 80

    def test_typo_falls_through_to_fuzzy(self):
        assert score("Logo Design", "lgoo design") == pytest.approx(50.0)

    def test_single_word_typo(self):
        # "logo" vs "lgoo": distance 2 over length 4
        assert score("Logo", "lgoo") == pytest.approx(25.0)

    def test_fuzzy_uses_best_word(self):
        # best word is "plugin" vs "plugins": 1 - 1/7
        assert score("contact plugin", "plugins") == pytest.approx((1 - 1 / 7) * 50)

    def test_empty_text_scores_zero(self):
        assert score("", "logo") == 0
        assert score(None, "logo") == 0

    def test_unrelated_text_scores_low(self):
        assert score("xyz", "logo") == 0

    def test_exact_only_when_equal(self):
        for text in ["logo", "Logo", "logos", "a logo", "lgoo"]:
            assert (score(text, "logo") == 100) == (text.lower() == "logo")


class TestFuzzyScore:
    @pytest.mark.parametrize(
        "text,query",
        [
            ("professional logo design", "lgo"),
            ("a b c", "abcdefghij"),
            ("seo booster", "boster"),
            ("x", "y"),
        ],
    )
    def test_fuzzy_within_bounds(self, text, query):
        assert 0 <= fuzzy_score(text, query) <= 50

    def test_no_words_scores_zero(self):
        assert fuzzy_score("   ", "logo") == 0.0
