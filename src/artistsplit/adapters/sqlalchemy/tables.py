"""SQLAlchemy Core schema of the media index."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, Index, Integer, MetaData, String, Table

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData()

songs_table = Table(
    "songs",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String, nullable=False, default=""),
    Column("artist", String, nullable=True),
    Column("artist_id", Integer, nullable=True),
    Column("album", String, nullable=True),
    Column("album_id", Integer, nullable=True),
    Column("data", String, nullable=True),
    Column("duration", Integer, nullable=True),
    Index("ix_songs_artist", "artist"),
    Index("ix_songs_artist_id", "artist_id"),
)

albums_table = Table(
    "albums",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("album", String, nullable=False),
    Column("artist", String, nullable=True),
    Column("artist_id", Integer, nullable=True),
    Column("num_of_songs", Integer, nullable=False, default=0),
    Column("first_year", Integer, nullable=True),
    Column("last_year", Integer, nullable=True),
)


def create_media_tables(engine: Engine) -> None:
    """Create the media index tables if they are missing."""

    metadata.create_all(engine)
