"""Accumulates playlist and track records into finished playlists.

Records arrive one line at a time. ``PLAYLIST`` opens an accumulator for a
playlist reference, the ``TRACK:*``/``ALBUM:*``/``ARTIST:*`` records fill
per-track slots keyed by track index, ``TRACK:END`` freezes a slot into a
:class:`playlist.models.Track`, and ``PLAYLIST:END`` hands back the finished
:class:`playlist.models.Playlist`.

Artist names and meta entries are buffered on the slot itself and reset by
``TRACK:CREATOR``, so tracks of different playlists never share buffers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from config.settings import (
    ARTIST_SEPARATOR,
    META_ADDED_BY,
    META_ADDED_TIME,
    META_ALBUM,
    META_ARTIST,
    META_TRACK,
)
from playlist.models import MetaEntry, Playlist, Track
from records.errors import (
    InvalidTrackIndexError,
    MissingArgumentError,
    UnknownPlaylistError,
)
from records.text import join_free_text
from records.tokenizer import Record

logger = logging.getLogger(__name__)


@dataclass
class TrackSlot:
    identifier: str | None = None
    title: str | None = None
    duration: str | None = None
    album: str | None = None
    creator: str | None = None
    track_num: str | None = None
    artist_names: list[str] = field(default_factory=list)
    metas: list[MetaEntry] = field(default_factory=list)

    def start(self) -> None:
        self.artist_names = []
        self.metas = []

    def add_meta(self, key: str, value: str) -> None:
        self.metas.append(MetaEntry(key=key, value=value))

    def freeze(self) -> Track:
        self.creator = ARTIST_SEPARATOR.join(self.artist_names) or None
        return Track(
            identifier=self.identifier,
            title=self.title,
            creator=self.creator,
            album=self.album,
            duration=self.duration,
            track_num=self.track_num,
            metas=tuple(self.metas),
        )


@dataclass
class PlaylistAccumulator:
    ref: str
    title: str | None = None
    creator: str | None = None
    annotation: str | None = None
    tracks: list[Track] = field(default_factory=list)
    slots: dict[int, TrackSlot] = field(default_factory=dict)

    def slot(self, index: int) -> TrackSlot:
        if index not in self.slots:
            self.slots[index] = TrackSlot()
        return self.slots[index]

    def to_playlist(self) -> Playlist:
        return Playlist(
            title=self.title,
            creator=self.creator,
            annotation=self.annotation,
            tracks=tuple(self.tracks),
        )


class RecordAccumulator:
    """Applies records to per-playlist state in arrival order."""

    def __init__(self) -> None:
        self.open_playlists: dict[str, PlaylistAccumulator] = {}

    def feed(self, record: Record) -> Playlist | None:
        """Apply one record.

        Returns the finished playlist for ``PLAYLIST:END``, otherwise ``None``.
        Unknown tags are ignored.

        Raises:
            RecordError: the record cannot be applied and is skipped.
        """
        handler = _HANDLERS.get(record.tag)
        if handler is None:
            logger.debug("Ignoring unknown tag %s on line %d", record.tag, record.line_number)
            return None
        return handler(self, record)

    def unfinished(self) -> list[PlaylistAccumulator]:
        return list(self.open_playlists.values())

    # playlist lifecycle

    def _playlist(self, record: Record) -> None:
        if record.ref in self.open_playlists:
            logger.warning(
                "line %d: playlist %s reopened before PLAYLIST:END; discarding previous state",
                record.line_number,
                record.ref,
            )
        self.open_playlists[record.ref] = PlaylistAccumulator(
            ref=record.ref,
            title=join_free_text(record.args),
        )

    def _playlist_end(self, record: Record) -> Playlist:
        accumulator = self._require_playlist(record)
        del self.open_playlists[record.ref]
        return accumulator.to_playlist()

    def _owner(self, record: Record) -> None:
        accumulator = self._require_playlist(record)
        accumulator.creator = _require_arg(record, 0, "owner id")

    def _description(self, record: Record) -> None:
        accumulator = self._require_playlist(record)
        accumulator.annotation = join_free_text(record.args) or None

    # track accumulation

    def _track_creator(self, record: Record) -> None:
        _, slot = self._require_slot(record)
        added_by = _require_arg(record, 1, "added-by user")
        slot.start()
        slot.add_meta(META_ADDED_BY, added_by)

    def _track_uri(self, record: Record) -> None:
        index, slot = self._require_slot(record)
        uri = _require_arg(record, 1, "track uri")
        slot.identifier = uri
        slot.track_num = str(index + 1)
        slot.add_meta(META_TRACK, uri)

    def _track_name(self, record: Record) -> None:
        _, slot = self._require_slot(record)
        slot.title = join_free_text(record.args[1:])

    def _track_duration(self, record: Record) -> None:
        _, slot = self._require_slot(record)
        slot.duration = _require_arg(record, 1, "duration")

    def _track_epoch(self, record: Record) -> None:
        _, slot = self._require_slot(record)
        slot.add_meta(META_ADDED_TIME, _require_arg(record, 1, "timestamp"))

    def _album_name(self, record: Record) -> None:
        _, slot = self._require_slot(record)
        slot.album = join_free_text(record.args[1:])

    def _album_uri(self, record: Record) -> None:
        _, slot = self._require_slot(record)
        slot.add_meta(META_ALBUM, _require_arg(record, 1, "album uri"))

    def _artist_name(self, record: Record) -> None:
        _, slot = self._require_slot(record)
        # args[1] is the artist ordinal
        slot.artist_names.append(join_free_text(record.args[2:]))

    def _artist_uri(self, record: Record) -> None:
        _, slot = self._require_slot(record)
        _require_arg(record, 1, "artist uri")
        # Producers may put the artist ordinal before the uri.
        slot.add_meta(META_ARTIST, record.args[-1])

    def _track_end(self, record: Record) -> None:
        accumulator = self._require_playlist(record)
        index = _parse_index(record)
        accumulator.tracks.append(accumulator.slot(index).freeze())

    # lookups

    def _require_playlist(self, record: Record) -> PlaylistAccumulator:
        accumulator = self.open_playlists.get(record.ref)
        if accumulator is None:
            raise UnknownPlaylistError(
                f"{record.tag} for playlist {record.ref} which is not open",
                line_number=record.line_number,
            )
        return accumulator

    def _require_slot(self, record: Record) -> tuple[int, TrackSlot]:
        accumulator = self._require_playlist(record)
        index = _parse_index(record)
        return index, accumulator.slot(index)


def _parse_index(record: Record) -> int:
    token = _require_arg(record, 0, "track index")
    if not (token.isascii() and token.isdigit()):
        raise InvalidTrackIndexError(
            f"{record.tag} track index {token!r} is not a non-negative integer",
            line_number=record.line_number,
        )
    return int(token)


def _require_arg(record: Record, position: int, name: str) -> str:
    if len(record.args) <= position:
        raise MissingArgumentError(
            f"{record.tag} is missing its {name}",
            line_number=record.line_number,
        )
    return record.args[position]


_HANDLERS: dict[str, Callable[[RecordAccumulator, Record], Playlist | None]] = {
    "PLAYLIST": RecordAccumulator._playlist,
    "PLAYLIST:END": RecordAccumulator._playlist_end,
    "OWNER": RecordAccumulator._owner,
    "DESCRIPTION": RecordAccumulator._description,
    "TRACK:CREATOR": RecordAccumulator._track_creator,
    "TRACK:URI": RecordAccumulator._track_uri,
    "TRACK:NAME": RecordAccumulator._track_name,
    "TRACK:DURATION": RecordAccumulator._track_duration,
    "TRACK:EPOCH": RecordAccumulator._track_epoch,
    "ALBUM:NAME": RecordAccumulator._album_name,
    "ALBUM:URI": RecordAccumulator._album_uri,
    "ARTIST:NAME": RecordAccumulator._artist_name,
    "ARTIST:URI": RecordAccumulator._artist_uri,
    "TRACK:END": RecordAccumulator._track_end,
}


def is_known_tag(tag: str) -> bool:
    return tag in _HANDLERS
