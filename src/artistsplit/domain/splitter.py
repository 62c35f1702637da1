"""Split combined artist strings into individual artist names."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Final

from .separators import DEFAULT_POLICY, SeparatorPolicy

_PLACEHOLDER_OPEN: Final[str] = "\ue000"
_PLACEHOLDER_CLOSE: Final[str] = "\ue001"
_SPLIT_CACHE_SIZE: Final[int] = 4096


class ArtistSplitter:
    """Split artist strings according to a :class:`SeparatorPolicy`.

    Splitting is a two-phase rewrite: every exception found inside the input
    is swapped for an opaque placeholder, the remainder is split on all
    separators at once, and the placeholders are restored in the pieces. An
    input that does not yield at least two pieces is returned unchanged.
    """

    def __init__(self, policy: SeparatorPolicy = DEFAULT_POLICY) -> None:
        self.policy = policy
        self._separator_regex = re.compile(
            "|".join(re.escape(token) for token in policy.separators_longest_first),
            re.IGNORECASE,
        )
        self._exception_regexes = tuple(
            re.compile(re.escape(exception), re.IGNORECASE)
            for exception in policy.exceptions_longest_first
        )
        # keyed on the raw string; the policy never changes for one splitter
        self._split_cached = lru_cache(maxsize=_SPLIT_CACHE_SIZE)(self._split)

    def split(self, raw: str) -> tuple[str, ...]:
        return self._split_cached(raw)

    def is_combined(self, raw: str) -> bool:
        return len(self.split(raw)) > 1

    def _split(self, raw: str) -> tuple[str, ...]:
        if self.policy.is_exception(raw):
            return (raw,)

        working, placeholders = self._protect_exceptions(raw)
        pieces = (piece.strip() for piece in self._separator_regex.split(working))
        restored = [_restore(piece, placeholders).strip() for piece in pieces if piece]
        parts = tuple(piece for piece in restored if piece)
        if len(parts) > 1:
            return parts
        return (raw,)

    def _protect_exceptions(self, raw: str) -> tuple[str, dict[str, str]]:
        placeholders: dict[str, str] = {}

        def _swap(match: re.Match[str]) -> str:
            token = f"{_PLACEHOLDER_OPEN}{len(placeholders)}{_PLACEHOLDER_CLOSE}"
            placeholders[token] = match.group(0)
            return token

        working = raw
        for regex in self._exception_regexes:
            working = regex.sub(_swap, working)
        return working, placeholders


def _restore(piece: str, placeholders: dict[str, str]) -> str:
    if _PLACEHOLDER_OPEN not in piece:
        return piece
    for token, original in placeholders.items():
        piece = piece.replace(token, original)
    return piece


DEFAULT_SPLITTER: Final[ArtistSplitter] = ArtistSplitter()


def split_artist_string(raw: str) -> tuple[str, ...]:
    """Split ``raw`` with the default separator policy."""

    return DEFAULT_SPLITTER.split(raw)
