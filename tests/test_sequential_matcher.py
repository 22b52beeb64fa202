"""Tests for the single-pass heuristic matcher."""

import pytest

from fuzzyselect.matching import SequentialMatcher


class TestSequentialScoring:
    """Word-start bonuses, run bonuses and skip penalties."""

    def test_contiguous_run_from_start(self, sequential):
        """+10 for the word start, +5 for each character continuing the run."""
        result = sequential.match("abc", "abc")
        assert result.score == 20
        assert result.offsets == (0, 1, 2)

    def test_trailing_characters_are_not_scored(self, sequential):
        """Scanning stops once the pattern is consumed."""
        assert sequential.match("bury", "bury").score == 25
        assert sequential.match("bury", "bury the dark").score == 25

    def test_skips_cost_one_each(self, sequential):
        result = sequential.match("lvl", "Level 999999")
        assert result.offsets == (0, 2, 4)
        assert result.score == 10 - 1 + 0 - 1 + 0

    def test_match_after_whitespace(self, sequential):
        assert sequential.match("t", "a t").score == -2 + 10

    def test_match_at_word_leading_capital(self, sequential):
        """Uppercase after a non-uppercase character starts a word."""
        assert sequential.match("b", "aB").score == -1 + 10

    def test_skipping_word_leading_capital_costs_extra(self, sequential):
        """'A' leads a word, 'B' follows an uppercase letter so it doesn't."""
        assert sequential.match("c", "ABc").score == -2 - 3

    def test_skipped_leading_penalty_is_capped(self, sequential):
        """Four skipped word starts would cost -12, capped at -9."""
        assert sequential.match("z", "A B C D z").score == -8 + 10 - 9


class TestSequentialContract:
    """Same contract as the recursive matcher."""

    @pytest.mark.parametrize(
        "pattern,candidate,expected",
        [
            ("lvl", "Level 999999", True),
            ("LVL", "level", True),
            ("btd", "bury the dark", True),
            ("dtb", "bury the dark", False),
            ("abc", "ab", False),
            ("a", "", False),
        ],
    )
    def test_subsequence(self, sequential, pattern, candidate, expected):
        result = sequential.match(pattern, candidate)
        assert result.matched is expected
        if expected:
            assert len(result.offsets) == len(pattern)
            for char, offset in zip(pattern, result.offsets):
                assert candidate[offset].lower() == char.lower()

    def test_empty_pattern_matches_only_empty_candidate(self, sequential):
        assert sequential.match("", "").matched
        assert sequential.match("", "").score == 0
        assert not sequential.match("", "abc")

    def test_slot_buffer_too_small_fails_closed(self, sequential):
        assert not sequential.match("abc", "abc", max_match_slots=2)
        assert not SequentialMatcher(max_match_slots=1).match("ab", "ab")

    def test_none_is_rejected(self, sequential):
        with pytest.raises(TypeError):
            sequential.match("a", None)
