"""Three-pass reconciliation of artist-aggregate and track-level rows.

Pass 1 records the native identifier of every aggregate row whose artist text
is a single artist. Pass 2 splits every aggregate row and folds the pieces
into one entry per case-insensitive name, summing album and track counts.
Pass 3 walks the track-level rows, adds artists the aggregate source never
surfaced and raises track counts to the number of tracks actually observed.

Each pass consumes the previous pass's output, so the passes always run in
order and each input is fully materialized before the first pass starts.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import TYPE_CHECKING

from .artist_index import ArtistIndex
from .errors import QueryCancelledError
from .identity import assign_artist_id, is_synthetic_id, normalize_artist_key
from .model import CanonicalArtist
from .splitter import DEFAULT_SPLITTER, ArtistSplitter

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .model import RawArtistRow, RawSongRow

type NativeIds = dict[str, int]
type ArtistsByKey = dict[str, CanonicalArtist]

log = logging.getLogger(__name__)


class ReconciliationEngine:
    """Fold raw artist and song rows into deduplicated :class:`CanonicalArtist` records.

    The engine owns the :class:`ArtistIndex` it fills; callers keep a handle
    to ``engine.index`` for lookups after a query. Calls to :meth:`reconcile`
    are serialized because they share that index.
    """

    def __init__(
        self,
        *,
        splitter: ArtistSplitter = DEFAULT_SPLITTER,
        index: ArtistIndex | None = None,
    ) -> None:
        self.splitter = splitter
        self.index = index if index is not None else ArtistIndex()
        self._query_lock = threading.Lock()

    def reconcile(
        self,
        artist_rows: Iterable[RawArtistRow] | None,
        song_rows: Iterable[RawSongRow] | None,
        *,
        cancel: threading.Event | None = None,
    ) -> list[CanonicalArtist]:
        """Run all three passes and return the merged artists in first-seen order."""

        aggregate_rows = tuple(artist_rows or ())
        track_rows = tuple(song_rows or ())

        with self._query_lock:
            self.index.reset()

            _checkpoint(cancel, next_pass=1)
            native_ids = self._discover_native_ids(aggregate_rows)

            _checkpoint(cancel, next_pass=2)
            artists = self._merge_aggregate_rows(aggregate_rows, native_ids)
            log.info(
                "Split artist count: %d (from %d raw entries)",
                len(artists),
                len(aggregate_rows),
            )

            _checkpoint(cancel, next_pass=3)
            added = self._fill_from_song_rows(track_rows, artists, native_ids)
            log.info(
                "Final artist count: %d (added %d from %d song rows)",
                len(artists),
                added,
                len(track_rows),
            )
            return list(artists.values())

    def _discover_native_ids(self, rows: Sequence[RawArtistRow]) -> NativeIds:
        native_ids: NativeIds = {}
        for row in rows:
            text = _artist_text(row.artist_string)
            if text is None:
                continue
            if len(self.splitter.split(text)) == 1:
                native_ids[normalize_artist_key(text)] = row.native_id
        return native_ids

    def _merge_aggregate_rows(
        self,
        rows: Sequence[RawArtistRow],
        native_ids: NativeIds,
    ) -> ArtistsByKey:
        artists: ArtistsByKey = {}
        skipped = 0
        for row in rows:
            text = _artist_text(row.artist_string)
            if text is None:
                skipped += 1
                continue
            pieces = self.splitter.split(text)
            single = len(pieces) == 1
            if not single:
                self._index_pieces(pieces, text)

            for piece in pieces:
                key = normalize_artist_key(piece)
                existing = artists.get(key)
                if existing is not None:
                    existing.absorb(album_count=row.album_count, track_count=row.track_count)
                    continue
                artist_id = assign_artist_id(
                    piece,
                    native_ids=native_ids,
                    single=single,
                    original_id=row.native_id,
                )
                if not single and is_synthetic_id(artist_id):
                    self.index.record_id(artist_id, piece)
                artists[key] = CanonicalArtist(
                    id=artist_id,
                    name=piece,
                    album_count=row.album_count,
                    track_count=row.track_count,
                )
        if skipped:
            log.debug("Skipped %d artist rows without artist text", skipped)
        return artists

    def _fill_from_song_rows(
        self,
        rows: Sequence[RawSongRow],
        artists: ArtistsByKey,
        native_ids: NativeIds,
    ) -> int:
        occurrences: Counter[str] = Counter()
        added = 0
        for row in rows:
            text = _artist_text(row.artist_string)
            if text is None:
                continue
            pieces = self.splitter.split(text)
            if len(pieces) > 1:
                self._index_pieces(pieces, text)

            for piece in pieces:
                key = normalize_artist_key(piece)
                occurrences[key] += 1
                if key in artists:
                    continue
                artist_id = assign_artist_id(piece, native_ids=native_ids, single=False)
                if is_synthetic_id(artist_id):
                    self.index.record_id(artist_id, piece)
                artists[key] = CanonicalArtist(id=artist_id, name=piece)
                added += 1
                log.debug("Added missing artist from songs: %s", piece)

        # track counts never drop below the observed song occurrences
        for key, count in occurrences.items():
            artist = artists[key]
            artist.track_count = max(artist.track_count, count)
        return added

    def _index_pieces(self, pieces: Sequence[str], combined: str) -> None:
        for piece in pieces:
            self.index.record(piece, combined)


def _artist_text(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _checkpoint(cancel: threading.Event | None, *, next_pass: int) -> None:
    if cancel is not None and cancel.is_set():
        log.info("Artist query cancelled before pass %d", next_pass)
        raise QueryCancelledError(next_pass=next_pass)
