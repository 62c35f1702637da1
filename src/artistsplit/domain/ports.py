"""Ports implemented by media index adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from .model import AlbumRecord, RawArtistRow, RawSongRow, SongRecord


@runtime_checkable
class MediaLibraryReader(Protocol):
    """Row sources for artist queries plus the artist-scoped song and album lookups.

    Either row source may return ``None``, which counts as an empty source.
    """

    def artist_rows(self) -> Iterable[RawArtistRow] | None: ...

    def song_rows(self) -> Iterable[RawSongRow] | None: ...

    def songs_by_artist_id(self, artist_id: int) -> list[SongRecord]: ...

    def songs_by_artist_strings(self, artist_strings: Collection[str]) -> list[SongRecord]: ...

    def albums_by_artist_id(self, artist_id: int) -> list[AlbumRecord]: ...

    def albums_by_ids(self, album_ids: Collection[int]) -> list[AlbumRecord]: ...

    def dispose(self) -> None: ...
