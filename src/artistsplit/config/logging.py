"""Shared logging helpers for artistsplit."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError

LOG_LEVEL_ENV = "ARTISTSPLIT_LOG_LEVEL"


def log_level_from_env(default: int = logging.INFO) -> int:
    """Resolve ``ARTISTSPLIT_LOG_LEVEL`` (a level name such as ``DEBUG``)."""

    raw = os.getenv(LOG_LEVEL_ENV)
    if raw is None or not raw.strip():
        return default
    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV}: {raw!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the
    level defaults to ``ARTISTSPLIT_LOG_LEVEL`` or INFO, and the format is terse
    enough for CLI output. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=log_level_from_env() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
