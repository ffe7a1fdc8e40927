"""Command-line options."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class Mode(str, Enum):
    """What the program does with the loaded tracks."""

    GENERATE = "generate"
    SUGGEST = "suggest"

    def __str__(self) -> str:
        return self.value


@dataclass
class Args:
    """Parsed command-line options."""

    mode: str = Mode.SUGGEST.value
    from_date: str = "1970-01-01"
    start_with: str = ""
    tags: str = ""
    exclude_tags: str = ""
    playlist: str = ""
    random: bool = False
    m3u: bool = False
    debug: bool = False


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keyid", allow_abbrev=False)
    parser.add_argument(
        "-mode", "--mode", dest="mode", default=Mode.SUGGEST.value,
        help="One of 'suggest' or 'generate'",
    )
    parser.add_argument(
        "-from", "--from", dest="from_date", default="1970-01-01",
        help="Only look at tracks newer than this date",
    )
    parser.add_argument(
        "-startWith", "--startWith", dest="start_with", default="",
        help=(
            "Some part of the Track Title to start with in 'generate' mode "
            "(otherwise starts with first track in provided 'playlist')"
        ),
    )
    parser.add_argument(
        "-tags", "--tags", dest="tags", default="",
        help="Only include tracks that match the given tags (comma-separated)",
    )
    parser.add_argument(
        "-excludeTags", "--excludeTags", dest="exclude_tags", default="",
        help="Exclude tracks that match the given tags (comma-separated)",
    )
    parser.add_argument(
        "-playlist", "--playlist", dest="playlist", default="",
        help="Name of Rekordbox Playlist to use (uses whole collection by default)",
    )
    parser.add_argument(
        "-random", "--random", dest="random", action="store_true",
        help="Randomize playlist before 'generate'",
    )
    parser.add_argument(
        "-m3u", "--m3u", dest="m3u", action="store_true",
        help="Generate an M3U playlist in 'generate' mode",
    )
    parser.add_argument(
        "-debug", "--debug", dest="debug", action="store_true",
        help="Enable debug logging",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Args:
    """Parse ``argv`` (the process arguments when None) into :class:`Args`."""
    namespace = _build_parser().parse_args(argv)
    return Args(**vars(namespace))