"""Tokenizer for tagged, space-delimited playlist records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from records.errors import MalformedRecordError

logger = logging.getLogger(__name__)

UTF8 = "utf-8"


@dataclass(frozen=True)
class Record:
    tag: str
    ref: str
    args: tuple[str, ...]
    line_number: int = 0


def tokenize_line(raw_line: bytes | str, line_number: int = 0) -> Record | None:
    """Split one input line into ``(tag, ref, args...)``.

    Bytes are decoded as UTF-8 (undecodable bytes are replaced). The trailing
    line terminator is dropped and the rest is split on whitespace.

    Returns:
        ``None`` for a blank line.

    Raises:
        MalformedRecordError: the line has a tag but no playlist reference.
    """
    if isinstance(raw_line, bytes):
        text = raw_line.decode(UTF8, errors="replace")
    else:
        text = raw_line
    tokens = text.rstrip("\r\n").split()
    if not tokens:
        return None
    if len(tokens) < 2:
        raise MalformedRecordError(
            f"record {tokens[0]!r} has no playlist reference",
            line_number=line_number,
        )
    return Record(tag=tokens[0], ref=tokens[1], args=tuple(tokens[2:]), line_number=line_number)


def iter_records(
    lines: Iterable[bytes | str],
    on_malformed: Callable[[MalformedRecordError], None] | None = None,
) -> Iterator[Record]:
    """Yield records in arrival order, skipping blank and malformed lines.

    Malformed lines are passed to ``on_malformed`` when given, otherwise
    logged as warnings.
    """
    for line_number, raw_line in enumerate(lines, start=1):
        try:
            record = tokenize_line(raw_line, line_number)
        except MalformedRecordError as exc:
            if on_malformed is None:
                logger.warning("Skipping malformed record: %s", exc)
            else:
                on_malformed(exc)
            continue
        if record is not None:
            yield record
