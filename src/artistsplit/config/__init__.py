"""Application configuration helpers."""

from __future__ import annotations

from .env import env_list, env_positive_int
from .errors import ConfigurationError
from .logging import configure_logging, log_level_from_env
from .query import QueryConfig, get_query_config
from .separators import get_separator_policy
from .storage import MediaIndexConfig, get_data_dir, get_media_index_config

__all__ = [
    "ConfigurationError",
    "MediaIndexConfig",
    "QueryConfig",
    "configure_logging",
    "env_list",
    "env_positive_int",
    "get_data_dir",
    "get_media_index_config",
    "get_query_config",
    "get_separator_policy",
    "log_level_from_env",
]
