"""fuzzyselect - fuzzy matching and ranking for combo-box style pickers"""

from fuzzyselect.accessors import attribute_getter, default_getter, sequence_getter
from fuzzyselect.errors import ConfigError, FuzzySelectError
from fuzzyselect.matching import (
    Matcher,
    MatchResult,
    RecursiveMatcher,
    SequentialMatcher,
    get_matcher,
)
from fuzzyselect.selection import (
    FilterResult,
    ItemGetter,
    TieBreak,
    select_all,
    select_best,
    sort_results_ascending,
    sort_results_descending,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "FilterResult",
    "FuzzySelectError",
    "ItemGetter",
    "MatchResult",
    "Matcher",
    "RecursiveMatcher",
    "SequentialMatcher",
    "TieBreak",
    "attribute_getter",
    "default_getter",
    "get_matcher",
    "select_all",
    "select_best",
    "sequence_getter",
    "sort_results_ascending",
    "sort_results_descending",
]
