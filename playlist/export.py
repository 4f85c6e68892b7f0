"""Playlist export helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from config.settings import OUTPUT_SUFFIX
from playlist.models import Playlist
from playlist.xspf import render_xspf
from records.errors import PlaylistWriteError

logger = logging.getLogger(__name__)


def write_xspf(output_dir: Path, index: int, playlist: Playlist) -> Path:
    """Create or overwrite ``<output_dir>/<index>.xspf``.

    Rules:
    - ``output_dir`` must already exist; it is never created here.
    - Writes are atomic (temp file then replace), so a failed write leaves
      no partial document behind.

    Raises:
        PlaylistWriteError: the document could not be written.
    """
    root = Path(output_dir)
    target_path = root / f"{index}{OUTPUT_SUFFIX}"
    temp_path = root / f".{index}{OUTPUT_SUFFIX}.tmp"

    content = render_xspf(playlist)
    try:
        temp_path.write_bytes(content)
        temp_path.replace(target_path)
    except OSError as exc:
        try:
            temp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError:
            logger.warning("Could not remove temp file %s", temp_path)
        raise PlaylistWriteError(f"cannot write playlist {target_path}: {exc}") from exc
    return target_path


class PlaylistEmitter:
    """Writes finished playlists to sequentially numbered XSPF files.

    The emitter owns the run's output counter: the first playlist is written
    as ``0.xspf`` and each emit moves the counter on by one.
    """

    def __init__(self, output_dir: Path, *, stdout: TextIO | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.next_index = 0
        self.written: list[Path] = []
        self._stdout = stdout

    def emit(self, playlist: Playlist) -> Path:
        path = write_xspf(self.output_dir, self.next_index, playlist)
        self.next_index += 1
        self.written.append(path)
        out = self._stdout if self._stdout is not None else sys.stdout
        print(f"Written {len(self.written)} {playlist.title or ''}", file=out)
        logger.info("Wrote %s (%d tracks)", path, len(playlist.tracks))
        return path
