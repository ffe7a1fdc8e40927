from pathlib import Path

import pytest

from keyid.options import UnsupportedPlatformError, resolve_options_path


def test_macos_path():
    path = resolve_options_path("darwin", "/home/someone")
    assert path == Path(
        "/home/someone", "Library", "Application Support",
        "Pioneer", "rekordboxAgent", "storage", "options.json",
    )


@pytest.mark.parametrize("platform", ["win32", "windows"])
def test_windows_path(platform):
    path = resolve_options_path(platform, "/home/someone")
    assert path == Path(
        "/home/someone", "AppData", "Local",
        "Pioneer", "rekordboxAgent", "storage", "options.json",
    )


def test_default_home(monkeypatch, tmp_path):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    path = resolve_options_path("darwin")
    assert path.name == "options.json"
    assert path.is_relative_to(tmp_path)


@pytest.mark.parametrize("platform", ["linux", "freebsd"])
def test_unsupported_platform(platform):
    with pytest.raises(UnsupportedPlatformError, match="mac & windows only"):
        resolve_options_path(platform, "/home/someone")