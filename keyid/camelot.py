"""Camelot wheel keys and the harmonic-mixing rules between them."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

_log = logging.getLogger(__name__)

WHEEL_SIZE = 12

_CAMELOT_PATTERN = re.compile(r"[0-9]{1,2}[AB]")
_CAMELOT_PARTS = re.compile(r"([0-9]{1,2})([AB])")


class ScaleKind(str, Enum):
    """Letter half of a Camelot key: A is minor, B is major."""

    MINOR = "A"
    MAJOR = "B"

    def swap(self) -> ScaleKind:
        """Return the opposite kind."""
        return ScaleKind.MAJOR if self is ScaleKind.MINOR else ScaleKind.MINOR

    def __str__(self) -> str:
        return self.value


def mod_cyclic(num: int, modulus: int) -> int:
    """Wrap ``num`` into the range 1..modulus (0 maps to modulus)."""
    return num % modulus or modulus


@dataclass(frozen=True)
class CamelotScale:
    """A position on the Camelot wheel."""

    index: int
    kind: ScaleKind

    def change_index(self, amount: int) -> CamelotScale:
        """Move ``amount`` steps around the wheel, keeping the kind."""
        return CamelotScale(mod_cyclic(self.index + amount, WHEEL_SIZE), self.kind)

    def swap_kind(self) -> CamelotScale:
        """Switch between the minor and major ring at the same number."""
        return CamelotScale(self.index, self.kind.swap())

    def horizontal(self, direction: int) -> CamelotScale:
        """Step around the same ring."""
        return self.change_index(direction)

    def vertical(self) -> CamelotScale:
        """Jump to the other ring at the same number."""
        return self.swap_kind()

    def diagonal(self) -> CamelotScale:
        """Cross rings with a one-step move (up from major, down from minor)."""
        step = 1 if self.kind is ScaleKind.MAJOR else -1
        return self.change_index(step).swap_kind()

    def flat_to_minor(self) -> CamelotScale:
        """Cross rings with a four-step move."""
        step = -4 if self.kind is ScaleKind.MINOR else 4
        return self.change_index(step).swap_kind()

    def major_to_minor(self) -> CamelotScale:
        """Cross rings with a three-step move."""
        step = 3 if self.kind is ScaleKind.MINOR else -3
        return self.change_index(step).swap_kind()

    def is_equal(self, other: CamelotScale) -> bool:
        """Return whether both keys sit at the same wheel position."""
        return (self.index, self.kind) == (other.index, other.kind)

    def is_compatible(self, other: CamelotScale) -> bool:
        """Return whether this key mixes harmonically after ``other``."""
        candidates = (
            other,
            other.major_to_minor(),
            other.horizontal(1),
            other.horizontal(-1),
            other.diagonal(),
            other.vertical(),
            other.horizontal(-3),
            other.horizontal(9),
            other.horizontal(2),  # energy boost
            other.horizontal(-5),
            other.flat_to_minor(),
        )
        return any(self.is_equal(candidate) for candidate in candidates)

    def __str__(self) -> str:
        return f"{self.index}{self.kind.value}"


# Musical key names grouped by the Camelot position they are read as.
_PITCH_GROUPS: dict[str, tuple[str, ...]] = {
    "1B": ("C#", "Db"),
    "3B": ("D",),
    "4B": ("D#", "Eb"),
    "5B": ("E",),
    "6B": ("F",),
    "7B": ("F#", "Gb"),
    "8B": ("C", "G"),
    "9B": ("G#", "Ab"),
    "10B": ("A",),
    "11B": ("A#", "Bb"),
    "12B": ("B",),
    "1A": ("A#m", "Bbm"),
    "3A": ("Bm",),
    "4A": ("Cm",),
    "5A": ("C#m", "Dbm"),
    "6A": ("Dm",),
    "7A": ("D#m", "Ebm"),
    "8A": ("Am", "Em"),
    "9A": ("Fm",),
    "10A": ("F#m", "Gbm"),
    "11A": ("Gm",),
    "12A": ("G#m", "Abm"),
}

PITCH_TO_CAMELOT: dict[str, str] = {
    pitch: camelot for camelot, pitches in _PITCH_GROUPS.items() for pitch in pitches
}


def is_camelot_key(key: str) -> bool:
    """Return whether ``key`` contains Camelot notation such as ``8A``."""
    return bool(_CAMELOT_PATTERN.search(key))


def parse_camelot_key(key: str) -> CamelotScale:
    """Parse Camelot or musical key notation.

    Unknown keys are logged and yield index 0 on the major ring.
    """
    if not is_camelot_key(key.upper()):
        if key not in PITCH_TO_CAMELOT:
            _log.warning("%s is not a valid camelot key", key)
            return CamelotScale(0, ScaleKind.MAJOR)
        key = PITCH_TO_CAMELOT[key]

    number, letter = _CAMELOT_PARTS.search(key.upper()).groups()
    return CamelotScale(int(number), ScaleKind(letter))


def new_key(key: str) -> CamelotScale:
    """Build a scale from its textual name."""
    return parse_camelot_key(key)


CAMELOT_KEYS: dict[str, CamelotScale] = {
    f"{number}{kind.value}": new_key(f"{number}{kind.value}")
    for number in range(1, WHEEL_SIZE + 1)
    for kind in ScaleKind
}