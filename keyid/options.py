"""Location of the library's database options file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

_STORAGE = ("Pioneer", "rekordboxAgent", "storage", "options.json")


class UnsupportedPlatformError(RuntimeError):
    """Raised when the options file location is unknown for the platform."""


def resolve_options_path(
    platform: Optional[str] = None,
    home: Optional[Union[str, Path]] = None,
) -> Path:
    """Return the options file path for ``platform`` under ``home``.

    Only macOS and Windows are supported.
    """
    platform = sys.platform if platform is None else platform
    home_dir = Path.home() if home is None else Path(home)

    if platform == "darwin":
        return home_dir.joinpath("Library", "Application Support", *_STORAGE)
    if platform in ("win32", "windows"):
        return home_dir.joinpath("AppData", "Local", *_STORAGE)
    raise UnsupportedPlatformError(
        "Cannot determine Rekordbox db options path, unsupported OS (mac & windows only)"
    )