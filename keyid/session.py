"""State and actions of the interactive playlist browser, independent of any toolkit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence, TextIO

from keyid.client import PlaylistNode, PlaylistNotFoundError, TrackNotFoundError
from keyid.collection import Collection
from keyid.track import Track

_log = logging.getLogger(__name__)

DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 700
DEFAULT_SPLIT_OFFSET = 0.35

ROOT_ID = ""
TABLE_HEADERS = ("Title", "Artist", "BPM", "Key")
NOW_PLAYING_PROMPT = "_Press 'Now Playing' to update_"
NO_PLAYLIST_SELECTED = "**No playlist selected**"
EXPORT_FILE_NAME = "generated_playlist.m3u"


class SessionError(RuntimeError):
    """Raised when an action cannot be carried out; the status shows the message."""


class _Client(Protocol):
    def get_playlists(self) -> Iterable[Optional[PlaylistNode]]: ...

    def load_playlist(self, name: str) -> Optional[Collection]: ...

    def get_now_playing(self, collection: Collection) -> Optional[Track]: ...

    def suggest(self, collection: Collection) -> Optional[Collection]: ...

    def generate(self, collection: Collection) -> Optional[Collection]: ...


def _fallback_playlists() -> list[PlaylistNode]:
    return [
        PlaylistNode(
            "test1",
            "House Music",
            [PlaylistNode("house1", "Deep House"), PlaylistNode("house2", "Tech House")],
        ),
        PlaylistNode(
            "test2",
            "Electronic",
            [PlaylistNode("elec1", "Synthwave"), PlaylistNode("elec2", "Ambient")],
        ),
    ]


@dataclass(frozen=True)
class ButtonStates:
    """Which actions are currently available."""

    suggest: bool
    generate: bool
    now_playing: bool
    export: bool
    refresh: bool = True


def track_cell(row: int, col: int, tracks: Sequence[Track]) -> tuple[str, bool]:
    """Return the text of a track table cell and whether it is bold.

    Row 0 is the header row; row ``n`` shows ``tracks[n - 1]``.
    """
    if row == 0:
        text = TABLE_HEADERS[col] if 0 <= col < len(TABLE_HEADERS) else ""
        return text, True
    track = tracks[row - 1]
    columns = (track.title, track.artist, f"{track.bpm:.1f}", str(track.scale))
    text = columns[col] if 0 <= col < len(columns) else ""
    return text, False


class Session:
    """Playlist tree, loaded tracks, suggestions and generated playlist of one user."""

    def __init__(self, client: _Client) -> None:
        self.client = client
        self.playlists: list[PlaylistNode] = []
        self.playlist_map: dict[str, PlaylistNode] = {}
        self.current_tracks: Optional[Collection] = None
        self.suggested_tracks: list[Track] = []
        self.generated_tracks: list[Track] = []
        self.selected_playlist: Optional[PlaylistNode] = None
        self.status = "Ready"
        self.playlist_info = NO_PLAYLIST_SELECTED
        self.now_playing_info = NOW_PLAYING_PROMPT

    # status helpers

    def _update_status(self, message: str) -> None:
        self.status = message
        _log.info("Status: %s", message)

    def _fail(self, message: str) -> SessionError:
        _log.error("Error: %s", message)
        self._update_status(f"Error: {message}")
        return SessionError(message)

    # loading

    def _build_playlist_map(self, nodes: Iterable[Optional[PlaylistNode]]) -> None:
        for node in nodes:
            if node is None:
                continue
            self.playlist_map[node.id] = node
            if node.children:
                self._build_playlist_map(node.children)

    def _load_playlists(self) -> None:
        self._update_status("Loading playlists...")
        playlists = [node for node in self.client.get_playlists() if node is not None]
        if not playlists:
            _log.debug("No valid playlists found from client; using fallback test data")
            playlists = _fallback_playlists()
        self.playlists = playlists
        self._build_playlist_map(playlists)
        _log.info("Loaded %d root playlists", len(playlists))

    def initialize(self) -> None:
        """Load the playlist tree and prompt for a selection."""
        self._load_playlists()
        self._update_status("Select a playlist to begin")

    def refresh(self) -> None:
        """Reload the playlist tree from the client."""
        self._update_status("Refreshing...")
        self._load_playlists()
        self.now_playing_info = NOW_PLAYING_PROMPT
        self._update_status("Refreshed playlists")

    def select_playlist(self, node_id: str) -> Optional[Collection]:
        """Select a node of the tree; a leaf playlist is loaded and its tracks returned."""
        if node_id == ROOT_ID:
            return None
        node = self.playlist_map.get(node_id)
        if node is None:
            raise self._fail("Invalid playlist selection")
        if node.children:
            self._update_status(f"Folder selected: {node.name}")
            return None
        self.selected_playlist = node
        return self.load_playlist(node)

    def load_playlist(self, node: PlaylistNode) -> Collection:
        """Load the tracks of ``node``, clearing suggestions and the generated playlist."""
        self._update_status(f"Loading playlist: {node.name}...")
        self.playlist_info = "**Loading...**"
        self.now_playing_info = NOW_PLAYING_PROMPT
        self.suggested_tracks = []
        self.generated_tracks = []

        try:
            tracks = self.client.load_playlist(node.name)
        except PlaylistNotFoundError:
            tracks = None

        if tracks is None:
            self.playlist_info = "**Failed to load playlist**"
            self.current_tracks = None
            raise self._fail(f"Failed to load playlist: {node.name}")

        self.current_tracks = tracks
        count = len(tracks)
        self.playlist_info = f"**Playlist:** {node.name}  \n**Tracks:** {count}"
        self._update_status(f"Loaded {count} tracks from {node.name}")
        return tracks

    # actions

    def show_now_playing(self) -> Optional[Track]:
        """Look up the track now playing and describe it."""
        self._update_status("Getting current track...")
        self.now_playing_info = "_Loading now playing..._"
        collection = self.current_tracks if self.current_tracks is not None else Collection()
        try:
            track = self.client.get_now_playing(collection)
        except TrackNotFoundError as error:
            _log.error("%s", error)
            track = None

        if track is None:
            self.now_playing_info = "**No track is currently playing**"
            self._update_status("No track playing")
            return None

        self.now_playing_info = (
            f"**Title:** {track.title}  \n**Artist:** {track.artist}  \n"
            f"**BPM:** {track.bpm:.1f}  \n**Key:** {track.scale}"
        )
        self._update_status(f"Now Playing: {track.title}")
        return track

    def suggest(self) -> list[Track]:
        """Fill the suggestions with tracks that mix after the one now playing."""
        if self.current_tracks is None:
            raise self._fail("Please select a playlist first")
        self._update_status("Getting track suggestions...")
        suggested = self.client.suggest(self.current_tracks)
        if suggested is None:
            self.suggested_tracks = []
            self._update_status("No suggestions found")
        else:
            self.suggested_tracks = suggested.items()
            self._update_status(f"Found {len(self.suggested_tracks)} suggested tracks")
        return list(self.suggested_tracks)

    def generate(self) -> list[Track]:
        """Generate a playlist of chained compatible tracks."""
        if self.current_tracks is None:
            raise self._fail("Please select a playlist first")
        self._update_status("Generating playlist...")
        generated = self.client.generate(self.current_tracks)
        if generated is None:
            self.generated_tracks = []
            raise self._fail("Failed to generate playlist")
        self.generated_tracks = generated.items()
        self._update_status(f"Generated playlist with {len(self.generated_tracks)} tracks")
        return list(self.generated_tracks)

    def export_m3u(self, stream: TextIO) -> None:
        """Write the generated playlist to ``stream`` as extended M3U."""
        if not self.generated_tracks:
            raise SessionError("Nothing to Export: Please generate a playlist first.")
        stream.write("#EXTM3U\n")
        for track in self.generated_tracks:
            if track is None:
                continue
            stream.write(f"#EXTINF:-1,{track.artist} - {track.title}\n")
            stream.write(f"{track.path}\n")
        self._update_status("Playlist exported successfully")

    # tree and buttons

    def tree_children(self, node_id: str) -> list[str]:
        """Return the ids of the children of ``node_id`` (the root is ``""``)."""
        if node_id == ROOT_ID:
            return [playlist.id for playlist in self.playlists]
        node = self.playlist_map.get(node_id)
        if node is None:
            return []
        return [child.id for child in node.children]

    def is_branch(self, node_id: str) -> bool:
        """Return whether ``node_id`` is the root or a folder with children."""
        if node_id == ROOT_ID:
            return True
        node = self.playlist_map.get(node_id)
        return node is not None and bool(node.children)

    def button_states(self) -> ButtonStates:
        has_playlist = self.selected_playlist is not None and self.current_tracks is not None
        return ButtonStates(
            suggest=has_playlist,
            generate=has_playlist,
            now_playing=has_playlist,
            export=bool(self.generated_tracks),
        )