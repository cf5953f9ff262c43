"""
String similarity scoring
"""

import pytest

from email_autocorrect.core.similarity import (
    char_differences,
    edit_distance,
    keyboard_score,
    similarity,
)


class TestEditDistance:

    @pytest.mark.parametrize("a, b, expected", [
        ("kitten", "sitting", 3),
        ("gmail.com", "gmail.com", 0),
        ("", "abc", 3),
        ("gmial.com", "gmail.com", 2),
    ])
    def test_distance(self, a, b, expected):
        assert edit_distance(a, b) == expected

    def test_symmetric(self):
        assert edit_distance("hotmial.com", "hotmail.com") == edit_distance("hotmail.com", "hotmial.com")


class TestSimilarity:

    def test_identical_strings(self):
        assert similarity("gmail.com", "gmail.com") == 1.0

    def test_empty_string_scores_zero(self):
        assert similarity("", "gmail.com") == 0.0
        assert similarity("gmail.com", "") == 0.0

    def test_transposition(self):
        assert similarity("gmial.com", "gmail.com") == pytest.approx(7 / 9)

    def test_large_length_gap_is_pruned(self):
        # 4 vs 14 characters: gap exceeds 30% of the longer string
        assert similarity("a.io", "googlemail.com") == 0.0

    def test_result_in_unit_interval(self):
        score = similarity("outlok.com", "outlook.com")
        assert 0.0 <= score <= 1.0


class TestKeyboardScore:

    def test_identical(self):
        assert keyboard_score("gmail.com", "gmail.com") == 1.0

    def test_case_only_difference_is_free(self):
        assert keyboard_score("GMAIL.COM", "gmail.com") == 1.0

    def test_adjacent_key_costs_half(self):
        # i and o are neighbours
        assert keyboard_score("yahoi.com", "yahoo.com") == pytest.approx(8.5 / 9)

    def test_non_adjacent_key_costs_one(self):
        assert keyboard_score("gmpil.com", "gmail.com") == pytest.approx(8 / 9)

    def test_extra_character(self):
        assert keyboard_score("gmail.comm", "gmail.com") == pytest.approx(0.9)

    def test_length_gap_over_one_scores_zero(self):
        assert keyboard_score("gmail.commm", "gmail.com") == 0.0


class TestCharDifferences:

    def test_transposed_pair(self):
        assert char_differences("comapny.com", "company.com") == 2

    def test_length_difference_counts(self):
        assert char_differences("company.co", "company.com") == 1

    def test_equal(self):
        assert char_differences("acme.io", "acme.io") == 0
