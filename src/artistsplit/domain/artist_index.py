"""Side index built while reconciling, read by later artist-scoped lookups."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from .identity import normalize_artist_key

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ArtistIndex:
    """Thread-safe mapping of split artists to their origins.

    ``combined_of`` maps a case-folded split name to the original combined
    strings it was taken from; ``name_of`` maps synthetic identifiers back to
    display names. Every operation holds the same lock, so ``reset`` is
    exclusive with all recording and lookups.
    """

    _combined_of: dict[str, set[str]] = field(default_factory=dict[str, set[str]], repr=False)
    _name_of: dict[int, str] = field(default_factory=dict[int, str], repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def record(self, split_name: str, combined: str) -> None:
        key = normalize_artist_key(split_name)
        with self._lock:
            self._combined_of.setdefault(key, set()).add(combined)

    def lookup_combined(self, name: str) -> frozenset[str]:
        key = normalize_artist_key(name)
        with self._lock:
            return frozenset(self._combined_of.get(key, ()))

    def record_id(self, artist_id: int, name: str) -> None:
        with self._lock:
            self._name_of[artist_id] = name

    def lookup_name(self, artist_id: int) -> str | None:
        with self._lock:
            return self._name_of.get(artist_id)

    def reset(self) -> None:
        with self._lock:
            log.debug(
                "Resetting artist index (%d split names, %d synthetic ids)",
                len(self._combined_of),
                len(self._name_of),
            )
            self._combined_of.clear()
            self._name_of.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._combined_of)
