"""Configuration error definitions."""

from __future__ import annotations

from artistsplit.domain.errors import ArtistQueryError


class ConfigurationError(ArtistQueryError):
    """Raised when configuration values are invalid."""
