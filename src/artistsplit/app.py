"""Application orchestration entry points."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from artistsplit.adapters.sqlalchemy import SqlAlchemyMediaIndex
from artistsplit.config import (
    QueryConfig,
    get_media_index_config,
    get_query_config,
    get_separator_policy,
)
from artistsplit.domain import ArtistSplitter, ReconciliationEngine, is_synthetic_id

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable, Iterable

    from artistsplit.config import MediaIndexConfig
    from artistsplit.domain import (
        AlbumRecord,
        ArtistIndex,
        CanonicalArtist,
        RawArtistRow,
        RawSongRow,
        SongRecord,
    )
    from artistsplit.domain.ports import MediaLibraryReader

log = getLogger(__name__)


@dataclass(slots=True)
class ArtistLibrary:
    """Artist queries and artist-scoped lookups over one media index.

    ``query_artists`` rebuilds the engine's :class:`ArtistIndex`; the song and
    album lookups read that index to resolve synthetic artist ids, so they only
    know the split artists of the most recent query.
    """

    reader: MediaLibraryReader
    engine: ReconciliationEngine = field(default_factory=ReconciliationEngine)
    config: QueryConfig = field(default_factory=QueryConfig)

    @property
    def index(self) -> ArtistIndex:
        return self.engine.index

    def query_artists(self, *, cancel: threading.Event | None = None) -> list[CanonicalArtist]:
        artist_rows, song_rows = self._load_rows()
        log.info(
            "Loaded %d artist rows and %d song rows",
            len(artist_rows),
            len(song_rows),
        )
        return self.engine.reconcile(artist_rows, song_rows, cancel=cancel)

    def songs_for_artist(self, artist_id: int) -> list[SongRecord]:
        if not is_synthetic_id(artist_id):
            return self.reader.songs_by_artist_id(artist_id)

        artist_strings = self._artist_strings_for(artist_id)
        if artist_strings is None:
            return []
        songs = _unique_by_id(self.reader.songs_by_artist_strings(artist_strings))
        log.info("Found %d songs for split artist id %d", len(songs), artist_id)
        return songs

    def albums_for_artist(self, artist_id: int) -> list[AlbumRecord]:
        if not is_synthetic_id(artist_id):
            return self.reader.albums_by_artist_id(artist_id)

        artist_strings = self._artist_strings_for(artist_id)
        if artist_strings is None:
            return []
        songs = self.reader.songs_by_artist_strings(artist_strings)
        album_ids = {song.album_id for song in songs if song.album_id is not None}
        albums = self.reader.albums_by_ids(album_ids)
        albums.sort(key=lambda album: album.album.casefold())
        log.info("Found %d albums for split artist id %d", len(albums), artist_id)
        return albums

    def close(self) -> None:
        self.reader.dispose()

    def _artist_strings_for(self, artist_id: int) -> frozenset[str] | None:
        """Raw artist strings whose songs belong to a split artist.

        A split artist that never appeared inside a combined string is matched
        by its own name; otherwise by every combined string it was taken from.
        """

        name = self.index.lookup_name(artist_id)
        if name is None:
            log.warning("Unknown split artist id %d; run an artist query first", artist_id)
            return None
        combined = self.index.lookup_combined(name)
        return combined or frozenset({name})

    def _load_rows(self) -> tuple[list[RawArtistRow], list[RawSongRow]]:
        if self.config.fetch_workers < 2:
            return _materialize(self.reader.artist_rows), _materialize(self.reader.song_rows)
        # both sources are read to completion before reconciliation begins
        with ThreadPoolExecutor(
            max_workers=min(self.config.fetch_workers, 2),
            thread_name_prefix="artistsplit-rows",
        ) as pool:
            artist_future = pool.submit(_materialize, self.reader.artist_rows)
            song_future = pool.submit(_materialize, self.reader.song_rows)
            return artist_future.result(), song_future.result()


def _materialize[TRow](source: Callable[[], Iterable[TRow] | None]) -> list[TRow]:
    return list(source() or ())


def _unique_by_id(songs: Iterable[SongRecord]) -> list[SongRecord]:
    seen: set[int] = set()
    unique: list[SongRecord] = []
    for song in songs:
        if song.id in seen:
            continue
        seen.add(song.id)
        unique.append(song)
    return unique


def build_artist_library(
    *,
    media_index: MediaIndexConfig | None = None,
    query: QueryConfig | None = None,
) -> ArtistLibrary:
    """Wire an :class:`ArtistLibrary` from environment configuration."""

    media_index_config = media_index or get_media_index_config()
    query_config = query or get_query_config()
    engine = ReconciliationEngine(splitter=ArtistSplitter(get_separator_policy()))
    # configuration is resolved before any database engine exists
    reader = SqlAlchemyMediaIndex.from_uri(media_index_config.database_uri)
    log.debug("Using media index at %s", media_index_config.database_uri)
    return ArtistLibrary(reader=reader, engine=engine, config=query_config)
