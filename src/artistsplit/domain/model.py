"""Records exchanged between the row sources, the engine and its callers.

Raw rows are produced fresh per query and are immutable. ``CanonicalArtist``
is the only mutable record: the reconciliation engine accumulates counts on it
while folding rows and hands the finished objects to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict


class ArtistMapping(TypedDict):
    _id: int
    artist: str
    number_of_albums: int
    number_of_tracks: int


@dataclass(frozen=True, slots=True, kw_only=True)
class RawArtistRow:
    """One row of the artist-aggregate source."""

    native_id: int
    artist_string: str | None
    album_count: int = 0
    track_count: int = 0

    def __post_init__(self) -> None:
        if self.album_count < 0 or self.track_count < 0:
            raise ValueError(
                f"Counts must be non-negative (artist={self.artist_string!r}, "
                f"albums={self.album_count}, tracks={self.track_count})"
            )


@dataclass(frozen=True, slots=True)
class RawSongRow:
    """One row of the track-level source; only the artist text is read."""

    artist_string: str | None


@dataclass(slots=True, kw_only=True)
class CanonicalArtist:
    id: int
    name: str
    album_count: int = 0
    track_count: int = 0

    @property
    def key(self) -> str:
        return self.name.casefold()

    @property
    def is_synthetic(self) -> bool:
        return self.id < 0

    def absorb(self, *, album_count: int, track_count: int) -> None:
        self.album_count += album_count
        self.track_count += track_count

    def as_mapping(self) -> ArtistMapping:
        return {
            "_id": self.id,
            "artist": self.name,
            "number_of_albums": self.album_count,
            "number_of_tracks": self.track_count,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class SongRecord:
    id: int
    title: str
    artist: str | None
    artist_id: int | None = None
    album: str | None = None
    album_id: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AlbumRecord:
    id: int
    album: str
    artist: str | None = None
    artist_id: int | None = None
    num_of_songs: int = 0
