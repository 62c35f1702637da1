# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from artistsplit import __version__
from artistsplit.adapters.payloads import album_payloads, artist_payloads, song_payloads
from artistsplit.app import build_artist_library
from artistsplit.config import (
    ConfigurationError,
    MediaIndexConfig,
    configure_logging,
    get_separator_policy,
)
from artistsplit.domain import ArtistQueryError, ArtistSplitter

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="artistsplit",
        description="Query split artists from a media index",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy URI of the media index (defaults to config)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("artists", help="List reconciled artists as JSON")

    split = subparsers.add_parser("split", help="Split one artist string")
    split.add_argument("text", type=str, help="Raw artist string, e.g. 'X feat. Y'")

    songs = subparsers.add_parser("songs", help="List songs of one artist as JSON")
    songs.add_argument("artist_id", type=int, help="Native or split (negative) artist id")

    albums = subparsers.add_parser("albums", help="List albums of one artist as JSON")
    albums.add_argument("artist_id", type=int, help="Native or split (negative) artist id")

    return parser.parse_args(list(argv))


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _run(args: argparse.Namespace) -> None:
    if args.command == "split":
        splitter = ArtistSplitter(get_separator_policy())
        _print_json(list(splitter.split(args.text)))
        return

    media_index = MediaIndexConfig(database_uri=args.database_uri) if args.database_uri else None
    library = build_artist_library(media_index=media_index)
    try:
        artists = library.query_artists()
        if args.command == "artists":
            ordered = sorted(artists, key=lambda artist: artist.name.casefold())
            _print_json(artist_payloads(ordered))
        elif args.command == "songs":
            _print_json(song_payloads(library.songs_for_artist(args.artist_id)))
        elif args.command == "albums":
            _print_json(album_payloads(library.albums_for_artist(args.artist_id)))
        else:
            raise ValueError(f"Unsupported command: {args.command}")
    finally:
        library.close()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        configure_logging()
        parsed_args = _parse_args(args_list)
    except ArtistQueryError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        _run(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except (ArtistQueryError, ValueError):
        log.exception("Artist query failed")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
