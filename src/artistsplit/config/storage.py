"""Media index location helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "artistsplit"
DEFAULT_DB_FILENAME: Final[str] = "media_index.db"


@dataclass(frozen=True, slots=True)
class MediaIndexConfig:
    database_uri: str


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_data_dir() -> Path:
    env_dir = os.getenv("ARTISTSPLIT_DATA_DIR")
    return Path(env_dir).expanduser().resolve() if env_dir else _default_data_dir()


def get_media_index_config() -> MediaIndexConfig:
    """Locate the media index, respecting ``ARTISTSPLIT_DATABASE_URI`` overrides."""

    env_uri = os.getenv("ARTISTSPLIT_DATABASE_URI")
    if env_uri:
        return MediaIndexConfig(database_uri=env_uri)
    path = get_data_dir() / DEFAULT_DB_FILENAME
    return MediaIndexConfig(database_uri=f"sqlite+pysqlite:///{path}")
