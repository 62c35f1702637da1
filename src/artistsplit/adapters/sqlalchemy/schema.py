"""Pydantic models for rows read from the media index.

The media index hands back loosely typed column mappings. These models pin
down the handful of columns the reconciliation core reads and translate them
into the domain's row records.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from artistsplit.domain.model import AlbumRecord, RawArtistRow, RawSongRow, SongRecord


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _none_to_zero(value: object) -> object:
    return 0 if value is None else value


class MediaIndexBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ArtistRowPayload(MediaIndexBaseModel):
    id: int = Field(ge=0, validation_alias=AliasChoices("id", "_id"))
    artist: str | None = None
    number_of_albums: int = Field(default=0, ge=0)
    number_of_tracks: int = Field(default=0, ge=0)

    _normalize_artist = field_validator("artist", mode="before")(_blank_to_none)
    _normalize_counts = field_validator("number_of_albums", "number_of_tracks", mode="before")(
        _none_to_zero
    )

    def to_domain(self) -> RawArtistRow:
        return RawArtistRow(
            native_id=self.id,
            artist_string=self.artist,
            album_count=self.number_of_albums,
            track_count=self.number_of_tracks,
        )


class SongRowPayload(MediaIndexBaseModel):
    artist: str | None = None

    _normalize_artist = field_validator("artist", mode="before")(_blank_to_none)

    def to_domain(self) -> RawSongRow:
        return RawSongRow(self.artist)


class SongPayload(MediaIndexBaseModel):
    id: int = Field(validation_alias=AliasChoices("id", "_id"))
    title: str = ""
    artist: str | None = None
    artist_id: int | None = None
    album: str | None = None
    album_id: int | None = None

    _normalize_text = field_validator("artist", "album", mode="before")(_blank_to_none)

    @field_validator("title", mode="before")
    @classmethod
    def _title_or_blank(cls, value: object) -> object:
        return "" if value is None else value

    def to_domain(self) -> SongRecord:
        return SongRecord(
            id=self.id,
            title=self.title,
            artist=self.artist,
            artist_id=self.artist_id,
            album=self.album,
            album_id=self.album_id,
        )


class AlbumPayload(MediaIndexBaseModel):
    id: int = Field(validation_alias=AliasChoices("id", "_id"))
    album: str
    artist: str | None = None
    artist_id: int | None = None
    num_of_songs: int = Field(default=0, ge=0)

    _normalize_artist = field_validator("artist", mode="before")(_blank_to_none)
    _normalize_count = field_validator("num_of_songs", mode="before")(_none_to_zero)

    def to_domain(self) -> AlbumRecord:
        return AlbumRecord(
            id=self.id,
            album=self.album,
            artist=self.artist,
            artist_id=self.artist_id,
            num_of_songs=self.num_of_songs,
        )
