"""Outbound payloads handed to callers of the artist queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from artistsplit.domain.model import AlbumRecord, SongRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from artistsplit.domain.model import ArtistMapping, CanonicalArtist

_SONGS = TypeAdapter(list[SongRecord])
_ALBUMS = TypeAdapter(list[AlbumRecord])


def artist_payloads(artists: Iterable[CanonicalArtist]) -> list[ArtistMapping]:
    return [artist.as_mapping() for artist in artists]


def song_payloads(songs: Iterable[SongRecord]) -> list[dict[str, Any]]:
    return _SONGS.dump_python(list(songs), mode="json")


def album_payloads(albums: Iterable[AlbumRecord]) -> list[dict[str, Any]]:
    return _ALBUMS.dump_python(list(albums), mode="json")
