"""
Settings management for fuzzyselect
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

from fuzzyselect.constants import (
    DEFAULT_MAX_MATCH_SLOTS,
    DEFAULT_RECURSION_LIMIT,
    DEFAULT_STRATEGY,
    DEFAULT_TIE_BREAK,
    SETTINGS_FILE,
    STRATEGY_ENV_VAR,
)
from fuzzyselect.errors import ConfigError
from fuzzyselect.matching import MATCHERS, Matcher, get_matcher
from fuzzyselect.selection import TieBreak

logger = logging.getLogger(__name__)


class Settings:
    """Manages matching and CLI settings"""

    DEFAULT_SETTINGS = {
        "matching": {
            "strategy": DEFAULT_STRATEGY,
            "tie_break": DEFAULT_TIE_BREAK,
            "max_match_slots": DEFAULT_MAX_MATCH_SLOTS,
            "recursion_limit": DEFAULT_RECURSION_LIMIT,
        },
        "cli": {
            "placeholder": "",
            "limit": 0,  # 0 = show every match
        },
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home() / ".config" / "fuzzyselect" / SETTINGS_FILE

        self.config_path = config_path
        self.settings: dict[str, Any] = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if not self.config_path.exists():
            return
        try:
            with open(self.config_path) as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid settings file {self.config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Settings file {self.config_path} must contain a JSON object")
        # Merge with defaults to handle new settings
        self._merge_settings(self.settings, loaded)
        logger.debug("Loaded settings from %s", self.config_path)

    def save(self) -> None:
        """Save settings to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.settings, f, indent=2)
        logger.debug("Saved settings to %s", self.config_path)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_settings(base[key], value)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'matching.strategy')"""
        value: Any = self.settings

        for part in path.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """Set a setting by dot-separated path"""
        parts = path.split(".")
        target: Any = self.settings

        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            target = target[part]

        target[parts[-1]] = value

    def get_strategy(self) -> str:
        """Get the matching strategy name.

        The FUZZYSELECT_STRATEGY environment variable wins over the file.
        """
        strategy = os.environ.get(STRATEGY_ENV_VAR) or str(
            self.get("matching.strategy", DEFAULT_STRATEGY)
        )
        if strategy not in MATCHERS:
            known = ", ".join(sorted(MATCHERS))
            raise ConfigError(f"Unknown matching strategy {strategy!r} (expected one of: {known})")
        return strategy

    def get_tie_break(self) -> TieBreak:
        """Get the tie-break policy for single-best selection"""
        return TieBreak.from_name(str(self.get("matching.tie_break", DEFAULT_TIE_BREAK)))

    def get_max_match_slots(self) -> int:
        """Get the per-call bound on recorded match offsets"""
        return self._get_int("matching.max_match_slots", DEFAULT_MAX_MATCH_SLOTS, minimum=1)

    def get_recursion_limit(self) -> int:
        """Get the recursion budget of the recursive matcher"""
        return self._get_int("matching.recursion_limit", DEFAULT_RECURSION_LIMIT, minimum=2)

    def get_placeholder(self) -> str:
        """Text shown for an out-of-range item index"""
        return str(self.get("cli.placeholder", ""))

    def get_limit(self) -> int:
        """Maximum number of ranked results the CLI prints (0 = all)"""
        limit = self.get("cli.limit", 0)
        try:
            return max(0, int(limit))
        except (TypeError, ValueError):
            raise ConfigError(f"cli.limit must be an integer, got {limit!r}") from None

    def create_matcher(self, strategy: str | None = None) -> Matcher:
        """Build the configured matcher strategy, or `strategy` if given"""
        return get_matcher(
            strategy or self.get_strategy(),
            max_match_slots=self.get_max_match_slots(),
            recursion_limit=self.get_recursion_limit(),
        )

    def _get_int(self, path: str, default: int, minimum: int) -> int:
        value = self.get(path, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise ConfigError(f"{path} must be an integer >= {minimum}, got {value!r}")
        return value
