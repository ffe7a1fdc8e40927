"""Writers that print tracks as a listing or as an M3U playlist."""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from keyid.args import Args, Mode
from keyid.track import Track


class Printer(Protocol):
    def print_header(self) -> None: ...

    def print(self, track: Track) -> None: ...


class _StreamPrinter:
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write_line(self, text: str) -> None:
        self.stream.write(f"{text}\n")


class CliPrinter(_StreamPrinter):
    """Prints one tab-separated line per track."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(stream)

    def print_header(self) -> None:
        """The listing has no header."""

    def print(self, track: Track) -> None:
        self._write_line(str(track))


class M3uPrinter(_StreamPrinter):
    """Prints tracks as an extended M3U playlist."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(stream)

    def print_header(self) -> None:
        self._write_line("#EXTM3U")
        self._write_line("")

    def print(self, track: Track) -> None:
        self._write_line(f"#EXTINF:-1, {track.artist} - {track.title}")
        self._write_line(track.path)


def provide_printer(args: Args, stream: Optional[TextIO] = None) -> Printer:
    """Choose the M3U printer in generate mode with ``m3u`` set, else the listing."""
    if args.mode == Mode.GENERATE and args.m3u:
        return M3uPrinter(stream)
    return CliPrinter(stream)