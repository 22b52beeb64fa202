"""
Single-pass heuristic matcher.

Cheaper than the recursive matcher: it walks the candidate once and takes the
first occurrence of every pattern character, so it never revisits a choice.
"""

from fuzzyselect.constants import (
    CONSECUTIVE_BONUS,
    MAX_SKIPPED_LEADING_PENALTY,
    SKIPPED_LEADING_PENALTY,
    SKIPPED_LETTER_PENALTY,
    WORD_START_BONUS,
)
from fuzzyselect.matching.base import NO_MATCH, Matcher, MatchResult


def _is_word_leading(candidate: str, idx: int) -> bool:
    """Uppercase letter not preceded by another uppercase letter."""
    if not candidate[idx].isupper():
        return False
    return idx == 0 or not candidate[idx - 1].isupper()


def _follows_separator(candidate: str, idx: int) -> bool:
    return idx == 0 or candidate[idx - 1].isspace()


class SequentialMatcher(Matcher):
    """Greedy left-to-right matcher.

    Matches at word starts earn a flat bonus, matches continuing a run earn a
    smaller one, and every skipped character costs a point. Skipping the start
    of a word costs extra, up to a fixed cap.

    An empty pattern matches only an empty candidate.
    """

    name = "sequential"

    def _match(self, pattern: str, candidate: str, max_match_slots: int) -> MatchResult:
        if not pattern:
            return MatchResult(matched=True) if not candidate else NO_MATCH

        score = 0
        leading_penalty = 0
        consecutive = 0
        pattern_idx = 0
        offsets: list[int] = []

        for idx, char in enumerate(candidate):
            if pattern_idx == len(pattern):
                break

            leading = _is_word_leading(candidate, idx)
            if char.lower() == pattern[pattern_idx].lower():
                if len(offsets) >= max_match_slots:
                    return NO_MATCH
                if _follows_separator(candidate, idx) or leading:
                    score += WORD_START_BONUS
                else:
                    score += CONSECUTIVE_BONUS * consecutive
                consecutive = 1
                offsets.append(idx)
                pattern_idx += 1
            else:
                consecutive = 0
                score += SKIPPED_LETTER_PENALTY
                if leading:
                    leading_penalty += SKIPPED_LEADING_PENALTY

        if pattern_idx < len(pattern):
            return NO_MATCH

        score += max(leading_penalty, MAX_SKIPPED_LEADING_PENALTY)
        return MatchResult(matched=True, score=score, offsets=tuple(offsets))
