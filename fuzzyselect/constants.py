"""
Centralized constants for fuzzyselect.

Scoring weights and limits shared by the matchers, selectors and settings.
Centralizing them here makes them easier to find and tune.
"""

# Offset buffer and recursion bounds
DEFAULT_MAX_MATCH_SLOTS = 128
DEFAULT_RECURSION_LIMIT = 10

# Recursive matcher weights
BASE_SCORE = 100
SEQUENTIAL_BONUS = 15  # match directly after the previous match
SEPARATOR_BONUS = 30  # match right after a separator
CAMEL_BONUS = 30  # uppercase match right after a lowercase letter
FIRST_LETTER_BONUS = 15  # first character of the candidate matched
LEADING_LETTER_PENALTY = -5  # per character before the first match
MAX_LEADING_LETTER_PENALTY = -15
UNMATCHED_LETTER_PENALTY = -1  # per candidate character not matched

SEPARATORS = " _"

# Sequential matcher weights
WORD_START_BONUS = 10
CONSECUTIVE_BONUS = 5
SKIPPED_LETTER_PENALTY = -1
SKIPPED_LEADING_PENALTY = -3
MAX_SKIPPED_LEADING_PENALTY = -9

# Settings
SETTINGS_FILE = "settings.json"
STRATEGY_ENV_VAR = "FUZZYSELECT_STRATEGY"
DEFAULT_STRATEGY = "recursive"
DEFAULT_TIE_BREAK = "score_then_match_count"
