"""
Selection policies built on the matchers.

select_best picks the single best candidate (combo auto-select), select_all
ranks every matching candidate (filtered drop-down list). Both only need
len(items) and an item getter, so any indexable collection works.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fuzzyselect.errors import ConfigError
from fuzzyselect.matching import Matcher, MatchResult, RecursiveMatcher
from fuzzyselect.matching.base import require_str

logger = logging.getLogger(__name__)

# getter(items, index) -> display text
ItemGetter = Callable[[Any, int], str]


class TieBreak(Enum):
    """How select_best resolves candidates with equal scores."""

    SCORE_ONLY = "score_only"
    SCORE_THEN_MATCH_COUNT = "score_then_match_count"

    @classmethod
    def from_name(cls, name: str) -> "TieBreak":
        try:
            return cls(name)
        except ValueError:
            known = ", ".join(p.value for p in cls)
            raise ConfigError(f"Unknown tie-break policy {name!r} (expected one of: {known})") from None


@dataclass
class FilterResult:
    """A matching candidate: its index in the collection and its score.

    Ordering compares scores only, so two results for different indices can be
    neither less nor greater than each other while still being unequal.
    Equality compares both fields.
    """

    index: int
    score: int

    def __lt__(self, other: "FilterResult") -> bool:
        return self.score < other.score


_default_matcher = RecursiveMatcher()


def select_best(
    items: Any,
    pattern: str,
    getter: ItemGetter,
    matcher: Matcher | None = None,
    tie_break: TieBreak = TieBreak.SCORE_THEN_MATCH_COUNT,
) -> int:
    """
    Return the index of the best matching item, or -1.

    An empty pattern selects nothing. Among equal candidates the earliest
    index wins; with SCORE_THEN_MATCH_COUNT an equal score with more matched
    characters also replaces the current best.
    """
    if not require_str("pattern", pattern):
        return -1

    matcher = matcher or _default_matcher
    best_item = -1
    best: MatchResult | None = None

    for i in range(len(items)):
        result = matcher.match(pattern, getter(items, i))
        if not result.matched:
            continue
        if best is None or result.score > best.score:
            best_item, best = i, result
        elif (
            tie_break is TieBreak.SCORE_THEN_MATCH_COUNT
            and best is not None
            and result.score == best.score
            and result.match_count > best.match_count
        ):
            best_item, best = i, result

    logger.debug(
        "select_best %r over %d items (%s): %d", pattern, len(items), tie_break.value, best_item
    )
    return best_item


def select_all(
    items: Any, pattern: str, getter: ItemGetter, matcher: Matcher | None = None
) -> list[FilterResult]:
    """
    Return every matching item as (index, score), best first.

    Items with equal scores keep their original relative order. An empty
    pattern matches nothing.
    """
    if not require_str("pattern", pattern):
        return []

    matcher = matcher or _default_matcher
    results: list[FilterResult] = []

    for i in range(len(items)):
        result = matcher.match(pattern, getter(items, i))
        if result.matched:
            results.append(FilterResult(i, result.score))

    sort_results_descending(results)
    logger.debug("select_all %r over %d items: %d matches", pattern, len(items), len(results))
    return results


def sort_results_descending(results: list[FilterResult]) -> None:
    """Sort in place by score, highest first; ties keep their order."""
    results.sort(key=lambda r: r.score, reverse=True)


def sort_results_ascending(results: list[FilterResult]) -> None:
    """Sort in place by score, lowest first; ties keep their order."""
    results.sort(key=lambda r: r.score)
