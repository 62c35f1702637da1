"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError

LIST_DELIMITER = ";"


def env_list(
    name: str,
    *,
    delimiter: str = LIST_DELIMITER,
    strip: bool = True,
) -> tuple[str, ...]:
    """Split a delimited variable into its non-blank entries.

    The default delimiter is ``;`` since artist names routinely contain commas.
    With ``strip=False`` entries are returned verbatim (blank ones still dropped).
    """

    raw = os.getenv(name)
    if not raw:
        return ()
    entries = (entry.strip() if strip else entry for entry in raw.split(delimiter))
    return tuple(entry for entry in entries if entry.strip())


def env_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value
