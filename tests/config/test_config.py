from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from artistsplit.config import (
    ConfigurationError,
    QueryConfig,
    env_list,
    env_positive_int,
    get_data_dir,
    get_media_index_config,
    get_query_config,
    get_separator_policy,
    log_level_from_env,
)
from artistsplit.domain import DEFAULT_POLICY, ArtistSplitter

if TYPE_CHECKING:
    from pathlib import Path


def test_env_list_splits_on_semicolons(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTISTSPLIT_NAMES", " Tyler, The Creator ;; Belle & Sebastian ; ")

    assert env_list("ARTISTSPLIT_NAMES") == ("Tyler, The Creator", "Belle & Sebastian")
    assert env_list("ARTISTSPLIT_NAMES", strip=False) == (
        " Tyler, The Creator ",
        " Belle & Sebastian ",
    )
    assert env_list("ARTISTSPLIT_UNSET") == ()


@pytest.mark.parametrize("raw", ["zero", "0", "-3"])
def test_env_positive_int_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("ARTISTSPLIT_COUNT", raw)

    with pytest.raises(ConfigurationError, match="ARTISTSPLIT_COUNT"):
        env_positive_int("ARTISTSPLIT_COUNT", 2)


def test_query_config_defaults_and_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_query_config() == QueryConfig(fetch_workers=2)

    monkeypatch.setenv("ARTISTSPLIT_FETCH_WORKERS", "1")
    assert get_query_config() == QueryConfig(fetch_workers=1)


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert log_level_from_env() == logging.INFO

    monkeypatch.setenv("ARTISTSPLIT_LOG_LEVEL", " debug ")
    assert log_level_from_env() == logging.DEBUG

    monkeypatch.setenv("ARTISTSPLIT_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError, match="chatty"):
        log_level_from_env()


def test_media_index_defaults_to_the_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("ARTISTSPLIT_DATA_DIR", str(tmp_path))

    assert get_data_dir() == tmp_path.resolve()
    assert get_media_index_config().database_uri == (
        f"sqlite+pysqlite:///{tmp_path.resolve() / 'media_index.db'}"
    )


def test_media_index_uri_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTISTSPLIT_DATABASE_URI", "sqlite+pysqlite:///:memory:")

    assert get_media_index_config().database_uri == "sqlite+pysqlite:///:memory:"


def test_separator_policy_without_overrides_is_the_default() -> None:
    assert get_separator_policy() is DEFAULT_POLICY


def test_separator_policy_extended_from_the_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ARTISTSPLIT_EXTRA_SEPARATORS", " + ; ")
    monkeypatch.setenv("ARTISTSPLIT_EXTRA_EXCEPTIONS", "Years & Years")

    splitter = ArtistSplitter(get_separator_policy())

    assert splitter.split("A + B") == ("A", "B")
    assert splitter.split("Years & Years feat. C") == ("Years & Years", "C")
    assert splitter.split("A+B") == ("A+B",)
