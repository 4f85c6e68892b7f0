"""Free-text helpers for record arguments."""

from __future__ import annotations

from typing import Iterable


def escape_single_quotes(value: str) -> str:
    """Backslash-escape every literal single quote: ``'`` becomes ``\\'``."""
    return value.replace("'", "\\'")


def join_free_text(tokens: Iterable[str]) -> str:
    return escape_single_quotes(" ".join(tokens))
