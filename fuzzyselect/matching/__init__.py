"""Fuzzy matching strategies"""

from typing import Any

from fuzzyselect.errors import ConfigError
from fuzzyselect.matching.base import NO_MATCH, Matcher, MatchResult
from fuzzyselect.matching.recursive import RecursiveMatcher, score_offsets
from fuzzyselect.matching.sequential import SequentialMatcher

MATCHERS: dict[str, type[Matcher]] = {
    RecursiveMatcher.name: RecursiveMatcher,
    SequentialMatcher.name: SequentialMatcher,
}


def get_matcher(name: str, **options: Any) -> Matcher:
    """Instantiate a matcher strategy by name.

    Options the strategy doesn't take (recursion_limit for the sequential
    matcher) are ignored.
    """
    try:
        cls = MATCHERS[name]
    except KeyError:
        known = ", ".join(sorted(MATCHERS))
        raise ConfigError(f"Unknown matching strategy {name!r} (expected one of: {known})") from None

    if cls is not RecursiveMatcher:
        options.pop("recursion_limit", None)
    try:
        return cls(**options)
    except ValueError as e:
        raise ConfigError(str(e)) from e


__all__ = [
    "MATCHERS",
    "NO_MATCH",
    "Matcher",
    "MatchResult",
    "RecursiveMatcher",
    "SequentialMatcher",
    "get_matcher",
    "score_offsets",
]
