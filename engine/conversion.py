"""Single-pass conversion of record lines into XSPF playlist files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from playlist.export import PlaylistEmitter
from records.accumulator import RecordAccumulator, is_known_tag
from records.errors import MalformedRecordError, RecordError
from records.tokenizer import iter_records

logger = logging.getLogger(__name__)


@dataclass
class ConversionSummary:
    records_read: int = 0
    records_skipped: int = 0
    records_ignored: int = 0
    playlists_written: int = 0
    unfinished_playlists: list[str] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)


def convert_stream(
    lines: Iterable[bytes | str],
    emitter: PlaylistEmitter,
    accumulator: RecordAccumulator | None = None,
) -> ConversionSummary:
    """Convert every record in ``lines`` and write each finished playlist.

    Records are applied strictly in arrival order. A record that cannot be
    applied is logged and skipped; a playlist write failure propagates as
    :class:`records.errors.PlaylistWriteError` and ends the run.
    """
    accumulator = accumulator or RecordAccumulator()
    summary = ConversionSummary()

    def _malformed(exc: MalformedRecordError) -> None:
        summary.records_skipped += 1
        logger.warning("Skipping malformed record: %s", exc)

    for record in iter_records(lines, on_malformed=_malformed):
        summary.records_read += 1
        try:
            finished = accumulator.feed(record)
        except RecordError as exc:
            summary.records_skipped += 1
            logger.warning("Skipping record: %s", exc)
            continue
        if finished is None:
            if not is_known_tag(record.tag):
                summary.records_ignored += 1
            continue
        summary.paths.append(emitter.emit(finished))
        summary.playlists_written += 1

    for pending in accumulator.unfinished():
        summary.unfinished_playlists.append(pending.ref)
        logger.warning(
            "Playlist %s (%s) has no PLAYLIST:END; not written",
            pending.ref,
            pending.title,
        )

    logger.info(
        "Conversion finished: records=%d skipped=%d ignored=%d playlists=%d",
        summary.records_read,
        summary.records_skipped,
        summary.records_ignored,
        summary.playlists_written,
    )
    return summary
