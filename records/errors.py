"""Exceptions raised while converting playlist records."""

from __future__ import annotations


class RecordError(ValueError):
    """A single input record could not be applied; the record is skipped."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedRecordError(RecordError):
    pass


class InvalidTrackIndexError(RecordError):
    pass


class UnknownPlaylistError(RecordError):
    pass


class MissingArgumentError(RecordError):
    pass


class PlaylistWriteError(RuntimeError):
    """A playlist document could not be written. Aborts the run."""
