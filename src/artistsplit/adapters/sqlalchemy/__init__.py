"""SQLAlchemy adapter package for the media index."""

from __future__ import annotations

from .media_index import SqlAlchemyMediaIndex
from .tables import albums_table, create_media_tables, metadata, songs_table

__all__ = [
    "SqlAlchemyMediaIndex",
    "albums_table",
    "create_media_tables",
    "metadata",
    "songs_table",
]
