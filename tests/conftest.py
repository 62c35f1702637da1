from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from artistsplit.adapters.sqlalchemy import SqlAlchemyMediaIndex
from artistsplit.domain import ArtistIndex, ReconciliationEngine
from tests.helpers.media_index import SAMPLE_ALBUMS, SAMPLE_SONGS, seed_media_index

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("ARTISTSPLIT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def media_index_uri(tmp_path: Path) -> str:
    return f"sqlite+pysqlite:///{tmp_path / 'media_index.db'}"


@pytest.fixture
def empty_media_index(media_index_uri: str) -> Iterator[SqlAlchemyMediaIndex]:
    media_index = SqlAlchemyMediaIndex.from_uri(media_index_uri, create_tables=True)
    try:
        yield media_index
    finally:
        media_index.dispose()


@pytest.fixture
def media_index(empty_media_index: SqlAlchemyMediaIndex) -> SqlAlchemyMediaIndex:
    seed_media_index(empty_media_index.engine, songs=SAMPLE_SONGS, albums=SAMPLE_ALBUMS)
    return empty_media_index


@pytest.fixture
def artist_index() -> ArtistIndex:
    return ArtistIndex()


@pytest.fixture
def engine(artist_index: ArtistIndex) -> ReconciliationEngine:
    return ReconciliationEngine(index=artist_index)
