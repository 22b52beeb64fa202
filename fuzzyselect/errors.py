"""
Error types for fuzzyselect.

Matching itself never raises for bad luck: an exhausted offset buffer or the
recursion limit both degrade to "no match". Exceptions are reserved for caller
mistakes and broken configuration.
"""


class FuzzySelectError(Exception):
    """Base error for fuzzyselect."""


class ConfigError(FuzzySelectError):
    """Raised when a setting is missing, unknown or out of range."""
