"""
Item getters for the selectors.

A getter maps (items, index) to display text. The combo widget asks for
out-of-range indices (including -1 for "nothing selected") and expects a
placeholder back instead of an error, so these getters never wrap negative
indices the way Python indexing does.
"""

from collections.abc import Sequence
from typing import Any

from fuzzyselect.selection import ItemGetter


def sequence_getter(placeholder: str = "") -> ItemGetter:
    """Getter for a sequence of strings."""

    def getter(items: Sequence[str], index: int) -> str:
        if 0 <= index < len(items):
            return items[index]
        return placeholder

    return getter


def attribute_getter(name: str, placeholder: str = "") -> ItemGetter:
    """Getter for a sequence of records, reading the text from attribute `name`."""

    def getter(items: Sequence[Any], index: int) -> str:
        if 0 <= index < len(items):
            return str(getattr(items[index], name))
        return placeholder

    return getter


default_getter = sequence_getter()
