"""
Abstract matcher interface shared by the scoring strategies
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fuzzyselect.constants import DEFAULT_MAX_MATCH_SLOTS


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one pattern against one candidate.

    `score` is only meaningful when `matched` is True. `offsets` holds one
    candidate index per pattern character, strictly increasing.
    """

    matched: bool
    score: int = 0
    offsets: tuple[int, ...] = ()

    def __bool__(self) -> bool:
        return self.matched

    @property
    def match_count(self) -> int:
        return len(self.offsets)


NO_MATCH = MatchResult(matched=False)


def require_str(name: str, value: object) -> str:
    """Reject None and other non-strings passed as pattern or candidate."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


class Matcher(ABC):
    """Scoring strategy: decides whether a pattern fuzzy-matches a candidate.

    Matching is case-insensitive subsequence matching. Scores are higher for
    better matches and are only comparable between results of the same
    strategy.
    """

    name = ""

    def __init__(self, max_match_slots: int = DEFAULT_MAX_MATCH_SLOTS) -> None:
        if max_match_slots < 1:
            raise ValueError(f"max_match_slots must be positive, got {max_match_slots}")
        self.max_match_slots = max_match_slots

    def match(self, pattern: str, candidate: str, max_match_slots: int | None = None) -> MatchResult:
        """Match pattern against candidate.

        If recording the matched offsets would need more than max_match_slots
        entries the result is a non-match rather than a truncated one.
        """
        require_str("pattern", pattern)
        require_str("candidate", candidate)
        slots = self.max_match_slots if max_match_slots is None else max_match_slots
        return self._match(pattern, candidate, slots)

    def score(self, pattern: str, candidate: str) -> int | None:
        """Score of the match, or None when the pattern doesn't match"""
        result = self.match(pattern, candidate)
        return result.score if result.matched else None

    @abstractmethod
    def _match(self, pattern: str, candidate: str, max_match_slots: int) -> MatchResult:
        """Strategy-specific matching on validated input"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_match_slots={self.max_match_slots})"
