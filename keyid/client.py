"""Client that reads a DJ library and suggests or generates mixable playlists."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol

from keyid.args import Args, Mode
from keyid.collection import Collection
from keyid.track import ContentRecord, Track
from keyid.util import contains_any_of

_log = logging.getLogger(__name__)

ROOT_PARENT_IDS = ("", "root")
GENERATE_RETRIES = 10
IGNORE_BPM_AFTER_RETRIES = 5


@dataclass
class PlaylistNode:
    """A playlist or folder in the playlist tree."""

    id: str
    name: str
    children: list[PlaylistNode] = field(default_factory=list)


@dataclass(frozen=True)
class PlaylistRecord:
    """A raw playlist row of the library database."""

    id: str
    name: str
    parent_id: str = ""


class PlaylistNotFoundError(LookupError):
    """Raised when no playlist has the requested name."""


class TrackNotFoundError(LookupError):
    """Raised when no track matches the requested title or id."""


class _LibrarySource(Protocol):
    """Read access to the library database."""

    def all_content(self) -> Iterable[ContentRecord]: ...

    def playlists_by_name(self, name: str) -> list[PlaylistRecord]: ...

    def all_playlists(self) -> Iterable[PlaylistRecord]: ...

    def playlist_songs(self, playlist_id: str) -> Iterable[tuple[int, str]]:
        """Return ``(track_number, content_id)`` pairs of a playlist."""
        ...

    def content_by_id(self, content_id: str) -> Optional[ContentRecord]: ...

    def recent_history(self, limit: int) -> list[str]:
        """Return the content ids of the most recently played tracks."""
        ...

    def key_name(self, key_id: str) -> Optional[str]: ...

    def artist_name(self, artist_id: str) -> Optional[str]: ...

    def tag_names(self, content_id: str) -> Iterable[str]: ...

    def close(self) -> None: ...


class History:
    """Tracks already played in this session."""

    def __init__(self) -> None:
        self._tracks = Collection()

    def add(self, track: Track) -> None:
        self._tracks.add(track)

    def __contains__(self, track: Track) -> bool:
        return track in self._tracks

    def __len__(self) -> int:
        return len(self._tracks)


def build_playlist_tree(records: Iterable[PlaylistRecord]) -> list[PlaylistNode]:
    """Arrange playlist rows into a tree and return its roots.

    Rows whose parent is unknown are left out.
    """
    records = list(records)
    nodes = {record.id: PlaylistNode(record.id, record.name) for record in records}
    roots: list[PlaylistNode] = []
    for record in records:
        if record.parent_id in ROOT_PARENT_IDS:
            roots.append(nodes[record.id])
        elif record.parent_id in nodes:
            nodes[record.parent_id].children.append(nodes[record.id])
    return roots


class RekordboxClient:
    """Loads tracks from a library source and picks harmonically mixable ones."""

    def __init__(
        self,
        source: _LibrarySource,
        args: Optional[Args] = None,
        history: Optional[History] = None,
    ) -> None:
        self.source = source
        self.args = args if args is not None else Args()
        self.history = history if history is not None else History()

    def _track(self, content: ContentRecord) -> Track:
        return Track.from_content(
            content,
            self.source.key_name(content.key_id),
            self.source.artist_name(content.artist_id),
            self.source.tag_names(content.id),
        )

    def load_playlist(self, name: str) -> Collection:
        """Load the named playlist, or the whole library when no playlist is configured.

        Only tracks added after ``args.from_date`` are kept.
        """
        if not self.args.playlist:
            tracks = [self._track(content) for content in self.source.all_content()]
        else:
            playlists = self.source.playlists_by_name(name)
            if not playlists:
                raise PlaylistNotFoundError(
                    f"Error: cannot find a playlist with name '{name}'"
                )
            songs = sorted(
                self.source.playlist_songs(playlists[0].id), key=lambda song: song[0]
            )
            contents = (self.source.content_by_id(content_id) for _, content_id in songs)
            tracks = [self._track(content) for content in contents if content is not None]

        return Collection(*tracks).filter(
            lambda track: track.date_added > self.args.from_date
        )

    def get_playlists(self) -> list[PlaylistNode]:
        return build_playlist_tree(self.source.all_playlists())

    def get_track_by_title(self, pattern: str, collection: Collection) -> Track:
        """Return the first track whose title contains ``pattern``, ignoring case."""
        needle = pattern.lower()
        for track in collection:
            if needle in track.title.lower():
                return track
        raise TrackNotFoundError(
            f"Error: cannot find a track with '{pattern}' in the name"
        )

    def get_now_playing(self, collection: Collection) -> Optional[Track]:
        """Return the configured starting track, or the most recently played one.

        A track found in the play history is recorded in the session history.
        """
        if self.args.start_with:
            return self.get_track_by_title(self.args.start_with, collection)

        recent = self.source.recent_history(1)
        if not recent:
            return None
        content = self.source.content_by_id(recent[0])
        if content is None:
            raise TrackNotFoundError(f"Error: cannot find content with id '{recent[0]}'")
        track = self._track(content)
        self.history.add(track)
        return track

    def get_compatible_tracks(self, track: Track, collection: Collection) -> Collection:
        """Return the tracks of ``collection`` that can be mixed after ``track``."""
        compatible = Collection()
        for item in collection:
            if item in self.history:
                continue
            if item != track and track.is_compatible(item.as_bpm(track.bpm)):
                compatible.add(item)

        tags = self.args.tags.split(",")
        exclude_tags = self.args.exclude_tags.split(",")
        selected = Collection()

        for item in compatible:
            if contains_any_of(item.tags, tags):
                selected.add(item)
        for item in compatible:
            if not contains_any_of(item.tags, exclude_tags):
                selected.add(item)

        return selected if not selected.is_empty() else compatible

    def run(self) -> Optional[Collection]:
        """Load the configured playlist and run the configured mode."""
        collection = self.load_playlist(self.args.playlist)
        if self.args.mode == Mode.SUGGEST:
            return self.suggest(collection)
        if self.args.mode == Mode.GENERATE:
            return self.generate(collection)
        return None

    def suggest(self, collection: Collection) -> Collection:
        """Return tracks that mix after the one now playing."""
        try:
            track = self.get_now_playing(collection)
        except TrackNotFoundError as error:
            _log.error("%s", error)
            return Collection()
        if track is None:
            return Collection()
        return self.get_compatible_tracks(track, collection)

    def generate(self, collection: Collection) -> Collection:
        """Chain compatible tracks into a playlist, starting from the configured track."""
        crate = Collection(*collection.items())
        if self.args.random:
            crate.shuffle()

        try:
            start = self.get_track_by_title(self.args.start_with, crate)
        except TrackNotFoundError as error:
            _log.error("%s", error)
            return Collection()

        playlist = Collection(start)
        retries = GENERATE_RETRIES

        while retries > 0:
            last_track = playlist.last()

            compatible = self.get_compatible_tracks(last_track, crate)
            if self.args.random:
                compatible.shuffle()

            if len(playlist) == len(crate):
                break

            next_track = next((track for track in compatible if track not in playlist), None)
            if next_track is not None:
                playlist.add(next_track)
                continue

            remaining = crate.filter(lambda track: track not in playlist).sort_with(
                lambda a, b: a.scale.is_compatible(last_track.scale)
            )
            for track in remaining:
                if last_track.bpm_matches_target(track.bpm):
                    _log.warning("BPM jump from %s to %s", last_track.bpm, track.bpm)
                    _log.warning("Adding random track: %s", track)
                    playlist.add(track)
                    break
                if retries <= IGNORE_BPM_AFTER_RETRIES:
                    _log.warning("Adding random track (ignoring BPM): %s", track)
                    playlist.add(track)
                    break
            retries -= 1

        return playlist

    def close(self) -> None:
        self.source.close()