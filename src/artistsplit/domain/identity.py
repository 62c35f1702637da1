"""Identifier assignment for reconciled artists.

Native identifiers come from the media index and are never negative.
Synthetic identifiers are derived from the artist name and are always
negative, so the two ranges cannot overlap. Two different names hashing to the
same synthetic identifier is possible in principle and is not detected.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

_SYNTHETIC_MASK: Final[int] = 0x7FFF_FFFF_FFFF_FFFF


def normalize_artist_key(name: str) -> str:
    return name.casefold()


def synthetic_artist_id(name: str) -> int:
    """Derive a stable negative identifier from ``name``.

    The name is trimmed and case-folded before hashing, so ``" Foo "`` and
    ``"FOO"`` share an identifier. BLAKE2b keeps the value stable across
    processes, unlike the salted builtin ``hash``.
    """

    normalized = name.strip().casefold()
    digest = hashlib.blake2b(normalized.encode("utf-8"), digest_size=8).digest()
    value = int.from_bytes(digest, "big") & _SYNTHETIC_MASK
    return -(value or _SYNTHETIC_MASK)


def is_synthetic_id(artist_id: int) -> bool:
    return artist_id < 0


def assign_artist_id(
    name: str,
    *,
    native_ids: Mapping[str, int],
    single: bool,
    original_id: int | None = None,
) -> int:
    """Pick the identifier for a reconciled artist.

    Prefers the native identifier recorded for ``name`` as a standalone row,
    then the originating row's identifier when the raw string was not a
    combination, and otherwise falls back to :func:`synthetic_artist_id`.
    """

    native_id = native_ids.get(normalize_artist_key(name))
    if native_id is not None:
        return native_id
    if single and original_id is not None:
        return original_id
    return synthetic_artist_id(name)
