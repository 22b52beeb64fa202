"""
Recursive backtracking matcher.

Every time a pattern character matches, the search also tries skipping that
occurrence to see whether a later one scores better. This is what lets
"fb" pick the capital "B" in "fobBar" over the first "b".
"""

from dataclasses import dataclass

from fuzzyselect.constants import (
    BASE_SCORE,
    CAMEL_BONUS,
    DEFAULT_MAX_MATCH_SLOTS,
    DEFAULT_RECURSION_LIMIT,
    FIRST_LETTER_BONUS,
    LEADING_LETTER_PENALTY,
    MAX_LEADING_LETTER_PENALTY,
    SEPARATOR_BONUS,
    SEPARATORS,
    SEQUENTIAL_BONUS,
    UNMATCHED_LETTER_PENALTY,
)
from fuzzyselect.matching.base import NO_MATCH, Matcher, MatchResult


@dataclass
class _SearchState:
    """Per-call bookkeeping shared by all recursion branches."""

    pattern: str
    candidate: str
    max_match_slots: int
    calls: int = 0


def score_offsets(candidate: str, offsets: list[int] | tuple[int, ...]) -> int:
    """Score a complete match given the matched candidate offsets."""
    score = BASE_SCORE

    score += max(LEADING_LETTER_PENALTY * offsets[0], MAX_LEADING_LETTER_PENALTY)
    score += UNMATCHED_LETTER_PENALTY * (len(candidate) - len(offsets))

    for i, idx in enumerate(offsets):
        if i > 0 and idx == offsets[i - 1] + 1:
            score += SEQUENTIAL_BONUS

        if idx == 0:
            score += FIRST_LETTER_BONUS
            continue

        neighbor = candidate[idx - 1]
        current = candidate[idx]
        if neighbor.islower() and current.isupper():
            score += CAMEL_BONUS
        if neighbor in SEPARATORS:
            score += SEPARATOR_BONUS

    return score


class RecursiveMatcher(Matcher):
    """Backtracking matcher with positional scoring.

    The recursion counter is shared across the whole call; once it reaches
    recursion_limit further branches give up. That bounds the cost on inputs
    like "aaaa" against a long run of a's, at the price of sometimes missing
    the best-scoring alignment.
    """

    name = "recursive"

    def __init__(
        self,
        max_match_slots: int = DEFAULT_MAX_MATCH_SLOTS,
        recursion_limit: int = DEFAULT_RECURSION_LIMIT,
    ) -> None:
        super().__init__(max_match_slots)
        # The top-level search counts against the budget, so 1 would reject everything
        if recursion_limit < 2:
            raise ValueError(f"recursion_limit must be at least 2, got {recursion_limit}")
        self.recursion_limit = recursion_limit

    def _match(self, pattern: str, candidate: str, max_match_slots: int) -> MatchResult:
        state = _SearchState(pattern, candidate, max_match_slots)
        found = self._search(state, 0, 0, [])
        if found is None:
            return NO_MATCH
        score, offsets = found
        return MatchResult(matched=True, score=score, offsets=tuple(offsets))

    def _search(
        self, state: _SearchState, pattern_idx: int, candidate_idx: int, prefix: list[int]
    ) -> tuple[int, list[int]] | None:
        """Match pattern[pattern_idx:] against candidate[candidate_idx:].

        prefix holds the offsets already recorded by the caller. Returns
        (score, offsets) for the whole match, or None.
        """
        state.calls += 1
        if state.calls >= self.recursion_limit:
            return None

        pattern = state.pattern
        candidate = state.candidate
        if pattern_idx >= len(pattern) or candidate_idx >= len(candidate):
            return None

        offsets = list(prefix)
        best_recursive: tuple[int, list[int]] | None = None

        while pattern_idx < len(pattern) and candidate_idx < len(candidate):
            if pattern[pattern_idx].lower() == candidate[candidate_idx].lower():
                if len(offsets) >= state.max_match_slots:
                    return None

                # Try again without this occurrence
                skipped = self._search(state, pattern_idx, candidate_idx + 1, offsets)
                if skipped is not None and (best_recursive is None or skipped[0] > best_recursive[0]):
                    best_recursive = skipped

                offsets.append(candidate_idx)
                pattern_idx += 1
            candidate_idx += 1

        matched = pattern_idx == len(pattern)
        score = score_offsets(candidate, offsets) if matched else 0

        if best_recursive is not None and (not matched or best_recursive[0] > score):
            return best_recursive
        if matched:
            return score, offsets
        return None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_match_slots={self.max_match_slots}, "
            f"recursion_limit={self.recursion_limit})"
        )
