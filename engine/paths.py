import os
from pathlib import Path

from config.settings import DEFAULT_OUTPUT_DIRNAME
from records.errors import PlaylistWriteError


def ensure_dir(path):
    if path:
        os.makedirs(path, exist_ok=True)


def resolve_output_dir(path=None):
    """Return the playlist output directory: ``path`` when given, else ``playlists``."""
    if path:
        return Path(path)
    return Path(DEFAULT_OUTPUT_DIRNAME)


def check_output_dir(path, *, create=False):
    directory = Path(path)
    if create:
        try:
            ensure_dir(directory)
        except OSError as exc:
            raise PlaylistWriteError(f"cannot create output directory {directory}: {exc}") from exc
    if not directory.is_dir():
        raise PlaylistWriteError(f"output directory does not exist: {directory}")
    if not os.access(directory, os.W_OK):
        raise PlaylistWriteError(f"output directory is not writable: {directory}")
    return directory
