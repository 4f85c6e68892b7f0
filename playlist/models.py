"""Finalized playlist document types."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MetaEntry:
    key: str
    value: str


@dataclass(frozen=True)
class Track:
    identifier: str | None = None
    title: str | None = None
    creator: str | None = None
    album: str | None = None
    duration: str | None = None
    track_num: str | None = None
    metas: tuple[MetaEntry, ...] = ()


@dataclass(frozen=True)
class Playlist:
    title: str | None = None
    creator: str | None = None
    annotation: str | None = None
    tracks: tuple[Track, ...] = field(default_factory=tuple)
