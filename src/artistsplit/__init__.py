"""Split combined artist credits from a media index into reconciled artists."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("artistsplit")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"
