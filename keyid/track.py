"""Tracks of a DJ library and the rules for mixing one into another."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from keyid.camelot import CamelotScale, new_key
from keyid.util import parse_energy

_log = logging.getLogger(__name__)

NO_SCALE = "0A"
NO_ARTIST = "<none>"

BPM_MATCH_PERCENT = 1.8
PITCH_SHIFT_MIN_PERCENT = 5.0
PITCH_SHIFT_MAX_PERCENT = 6.5
PITCH_SHIFT_STEPS = 7


@dataclass(frozen=True)
class ContentRecord:
    """A raw content row of the library database.

    ``bpm`` is stored in hundredths of a beat per minute.
    """

    id: str
    bpm: int = 0
    title: str = ""
    comment: str = ""
    folder_path: str = ""
    date_created: str = ""
    key_id: str = ""
    artist_id: str = ""


@dataclass(eq=False)
class Track:
    """A track with the attributes used for harmonic mixing.

    Two tracks are equal when their ids are equal.
    """

    id: str
    bpm: float
    scale: CamelotScale
    artist: str = ""
    title: str = ""
    energy: int = 0
    path: str = ""
    date_added: str = ""
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_content(
        cls,
        content: ContentRecord,
        key_name: Optional[str],
        artist_name: Optional[str],
        tags: Iterable[str],
    ) -> Track:
        """Build a track from a content row and its looked-up key, artist and tags."""
        if key_name is None:
            _log.warning("Track has no scale %s", content.folder_path)
            key_name = NO_SCALE
        return cls(
            id=content.id,
            bpm=content.bpm / 100.0,
            scale=new_key(key_name),
            artist=NO_ARTIST if artist_name is None else artist_name,
            title=content.title,
            energy=parse_energy(content.comment),
            path=content.folder_path,
            date_added=content.date_created,
            tags=list(tags),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{int(self.bpm)}\t{self.scale}\t{self.energy}\t{self.artist} - {self.title}"

    def _percent_from(self, target_bpm: float) -> Optional[float]:
        if target_bpm == 0:
            return None
        return (self.bpm - target_bpm) / target_bpm * 100.0

    def bpm_matches_target(self, target_bpm: float) -> bool:
        """Return whether the tempo is within the mixable range of ``target_bpm``."""
        percent = self._percent_from(target_bpm)
        return percent is not None and abs(percent) <= BPM_MATCH_PERCENT

    def is_compatible(self, other: Track) -> bool:
        """Return whether ``other`` can follow this track in tempo and key."""
        return self.bpm_matches_target(other.bpm) and other.scale.is_compatible(self.scale)

    def as_bpm(self, target_bpm: float) -> Track:
        """Return a copy as it would sound pitched to ``target_bpm``.

        Only a shift of between 5 and 6.5 percent changes the copy: its tempo
        becomes the target and its key moves seven steps around the wheel.
        The copy carries no path.
        """
        copy = replace(self, path="", tags=self.tags)
        percent = self._percent_from(target_bpm)
        if percent is not None and PITCH_SHIFT_MIN_PERCENT < abs(percent) < PITCH_SHIFT_MAX_PERCENT:
            steps = PITCH_SHIFT_STEPS if target_bpm > self.bpm else -PITCH_SHIFT_STEPS
            copy.bpm = target_bpm
            copy.scale = copy.scale.change_index(steps)
        return copy