"""Copy-on-write list mutations.

Every function returns a brand new list and leaves its input untouched, so
reactive listeners always observe a fresh list object after a write. Indices
that match no position (out of range or negative) produce a list equal to the
input rather than raising.
"""

from __future__ import annotations

from typing import List, Sequence


def append_item(items: Sequence[str], text: str) -> List[str]:
    """Return ``items`` followed by ``text``."""
    return [*items, text]


def remove_at(items: Sequence[str], index: int) -> List[str]:
    """Return every item whose position differs from ``index``."""
    return [item for position, item in enumerate(items) if position != index]


def replace_at(items: Sequence[str], index: int, text: str) -> List[str]:
    """Return ``items`` with the entry at ``index`` swapped for ``text``."""
    return [text if position == index else item for position, item in enumerate(items)]


def in_bounds(items: Sequence[str], index: int) -> bool:
    return 0 <= index < len(items)
