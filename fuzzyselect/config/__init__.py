"""Configuration for fuzzyselect"""

from fuzzyselect.config.settings import Settings

__all__ = ["Settings"]
