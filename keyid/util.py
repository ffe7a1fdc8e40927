"""Small parsing helpers."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

_ENERGY_PATTERN = re.compile(r"Energy ([0-9]+)")


def parse_energy(comment: str) -> int:
    """Return the number following the first ``Energy`` in ``comment``, or 0."""
    match = _ENERGY_PATTERN.search(comment)
    return int(match.group(1)) if match else 0


def contains_any_of(items: Sequence[str], other: Iterable[str]) -> bool:
    """Return whether ``items`` holds the first entry of ``other``.

    Only the first entry of ``other`` is checked; an empty ``other`` gives False.
    """
    for candidate in other:
        return candidate in items
    return False