"""Artist query defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_positive_int

DEFAULT_FETCH_WORKERS = 2


@dataclass(frozen=True, slots=True)
class QueryConfig:
    # 1 disables parallel row loading
    fetch_workers: int = DEFAULT_FETCH_WORKERS


def get_query_config() -> QueryConfig:
    return QueryConfig(
        fetch_workers=env_positive_int("ARTISTSPLIT_FETCH_WORKERS", DEFAULT_FETCH_WORKERS)
    )
