from __future__ import annotations

from pathlib import Path

import pytest

from engine.paths import check_output_dir, resolve_output_dir
from records.errors import PlaylistWriteError


def test_resolve_output_dir_defaults_to_playlists() -> None:
    assert resolve_output_dir() == Path("playlists")


def test_resolve_output_dir_ignores_environment(monkeypatch) -> None:
    monkeypatch.setenv("SPOTIFY_XSPF_OUTPUT_DIR", "/elsewhere")

    assert resolve_output_dir() == Path("playlists")


def test_resolve_output_dir_uses_explicit_path(tmp_path) -> None:
    assert resolve_output_dir(tmp_path / "flag") == tmp_path / "flag"


def test_check_output_dir_requires_existing_directory(tmp_path) -> None:
    with pytest.raises(PlaylistWriteError):
        check_output_dir(tmp_path / "missing")

    assert check_output_dir(tmp_path) == tmp_path


def test_check_output_dir_can_create(tmp_path) -> None:
    target = tmp_path / "nested" / "playlists"

    assert check_output_dir(target, create=True) == target
    assert target.is_dir()


def test_check_output_dir_rejects_file(tmp_path) -> None:
    target = tmp_path / "playlists"
    target.write_text("not a dir", encoding="utf-8")

    with pytest.raises(PlaylistWriteError):
        check_output_dir(target)
