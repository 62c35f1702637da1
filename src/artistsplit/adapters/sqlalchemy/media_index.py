"""Row sources backed by an SQLite media index."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from pydantic import ValidationError
from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from artistsplit.domain.errors import RowSourceError

from .schema import AlbumPayload, ArtistRowPayload, SongPayload, SongRowPayload
from .tables import albums_table, create_media_tables, songs_table

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable, Mapping

    from sqlalchemy.engine import Engine
    from sqlalchemy.sql import Select

    from artistsplit.domain.model import AlbumRecord, RawArtistRow, RawSongRow, SongRecord

log = logging.getLogger(__name__)


class _Payload[TRecord](Protocol):
    def to_domain(self) -> TRecord: ...


def _is_memory_uri(uri: str) -> bool:
    return uri.startswith("sqlite") and (":memory:" in uri or uri.rstrip("/").endswith(":"))


class SqlAlchemyMediaIndex:
    """Read artist, song and album rows from the media index tables."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @classmethod
    def from_uri(cls, uri: str, *, create_tables: bool = False) -> SqlAlchemyMediaIndex:
        if _is_memory_uri(uri):
            # every thread must see the same in-memory database
            engine = create_engine(
                uri,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(uri)
        if create_tables:
            create_media_tables(engine)
        return cls(engine)

    def dispose(self) -> None:
        self.engine.dispose()

    # Row sources consumed by the reconciliation engine

    def artist_rows(self) -> list[RawArtistRow]:
        """Aggregate songs per native artist id: distinct albums and track count."""

        stmt = (
            select(
                songs_table.c.artist_id.label("id"),
                func.min(songs_table.c.artist).label("artist"),
                func.count(songs_table.c.album_id.distinct()).label("number_of_albums"),
                func.count().label("number_of_tracks"),
            )
            .where(songs_table.c.artist_id.is_not(None))
            .group_by(songs_table.c.artist_id)
            .order_by(songs_table.c.artist_id)
        )
        return self._read("artists", stmt, ArtistRowPayload.model_validate)

    def song_rows(self) -> list[RawSongRow]:
        stmt = select(songs_table.c.artist).order_by(songs_table.c.id)
        return self._read("songs", stmt, SongRowPayload.model_validate)

    # Artist-scoped lookups

    def songs_by_artist_id(self, artist_id: int) -> list[SongRecord]:
        stmt = self._songs_select().where(songs_table.c.artist_id == artist_id)
        return self._read("songs", stmt, SongPayload.model_validate)

    def songs_by_artist_strings(self, artist_strings: Collection[str]) -> list[SongRecord]:
        if not artist_strings:
            return []
        stmt = self._songs_select().where(songs_table.c.artist.in_(sorted(artist_strings)))
        return self._read("songs", stmt, SongPayload.model_validate)

    def albums_by_artist_id(self, artist_id: int) -> list[AlbumRecord]:
        stmt = (
            select(albums_table)
            .where(albums_table.c.artist_id == artist_id)
            .order_by(albums_table.c.id)
        )
        return self._read("albums", stmt, AlbumPayload.model_validate)

    def albums_by_ids(self, album_ids: Collection[int]) -> list[AlbumRecord]:
        if not album_ids:
            return []
        stmt = (
            select(albums_table)
            .where(albums_table.c.id.in_(sorted(album_ids)))
            .order_by(albums_table.c.id)
        )
        return self._read("albums", stmt, AlbumPayload.model_validate)

    @staticmethod
    def _songs_select() -> Select[tuple[object, ...]]:
        return select(
            songs_table.c.id,
            songs_table.c.title,
            songs_table.c.artist,
            songs_table.c.artist_id,
            songs_table.c.album,
            songs_table.c.album_id,
        ).order_by(songs_table.c.id)

    def _read[TRecord](
        self,
        source: str,
        stmt: Select[tuple[object, ...]],
        validate: Callable[[Mapping[str, object]], _Payload[TRecord]],
    ) -> list[TRecord]:
        return self._translate(source, self._fetch(source, stmt), validate)

    def _fetch(self, source: str, stmt: Select[tuple[object, ...]]) -> list[Mapping[str, object]]:
        try:
            with self.engine.connect() as connection:
                return [dict(row) for row in connection.execute(stmt).mappings()]
        except SQLAlchemyError as exc:
            raise RowSourceError(source, str(exc)) from exc

    @staticmethod
    def _translate[TRecord](
        source: str,
        rows: Iterable[Mapping[str, object]],
        validate: Callable[[Mapping[str, object]], _Payload[TRecord]],
    ) -> list[TRecord]:
        records: list[TRecord] = []
        for row in rows:
            try:
                payload = validate(row)
            except ValidationError as exc:
                log.warning(
                    "Skipping malformed %s row: %s",
                    source,
                    exc.errors(include_url=False),
                )
                continue
            records.append(payload.to_domain())
        return records
