from .accumulator import RecordAccumulator, is_known_tag
from .errors import (
    InvalidTrackIndexError,
    MalformedRecordError,
    MissingArgumentError,
    PlaylistWriteError,
    RecordError,
    UnknownPlaylistError,
)
from .tokenizer import Record, iter_records, tokenize_line

__all__ = [
    "InvalidTrackIndexError",
    "MalformedRecordError",
    "MissingArgumentError",
    "PlaylistWriteError",
    "Record",
    "RecordAccumulator",
    "RecordError",
    "UnknownPlaylistError",
    "is_known_tag",
    "iter_records",
    "tokenize_line",
]
