"""Error taxonomy for artist queries."""

from __future__ import annotations


class ArtistQueryError(RuntimeError):
    """Base class for failures surfaced to callers of an artist query."""


class RowSourceError(ArtistQueryError):
    """Raised when a row source cannot be read; the query fails as a whole."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        super().__init__(f"Row source {source!r} failed: {detail}")


class QueryCancelledError(ArtistQueryError):
    """Raised when a caller abandons a query between reconciliation passes."""

    def __init__(self, *, next_pass: int) -> None:
        self.next_pass = next_pass
        super().__init__(f"Artist query cancelled before pass {next_pass}")
