"""Artist-identity reconciliation core."""

from __future__ import annotations

from .artist_index import ArtistIndex
from .errors import ArtistQueryError, QueryCancelledError, RowSourceError
from .identity import assign_artist_id, is_synthetic_id, synthetic_artist_id
from .model import AlbumRecord, CanonicalArtist, RawArtistRow, RawSongRow, SongRecord
from .reconciliation import ReconciliationEngine
from .separators import DEFAULT_POLICY, SeparatorPolicy
from .splitter import ArtistSplitter, split_artist_string

__all__ = [
    "DEFAULT_POLICY",
    "AlbumRecord",
    "ArtistIndex",
    "ArtistQueryError",
    "ArtistSplitter",
    "CanonicalArtist",
    "QueryCancelledError",
    "RawArtistRow",
    "RawSongRow",
    "ReconciliationEngine",
    "RowSourceError",
    "SeparatorPolicy",
    "SongRecord",
    "assign_artist_id",
    "is_synthetic_id",
    "split_artist_string",
    "synthetic_artist_id",
]
