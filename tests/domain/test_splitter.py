from __future__ import annotations

import pytest

from artistsplit.domain.separators import DEFAULT_EXCEPTIONS, DEFAULT_POLICY
from artistsplit.domain.splitter import ArtistSplitter, split_artist_string


@pytest.fixture
def splitter() -> ArtistSplitter:
    return ArtistSplitter()


@pytest.mark.parametrize("exception", sorted(DEFAULT_EXCEPTIONS))
def test_exceptions_are_never_split(splitter: ArtistSplitter, exception: str) -> None:
    assert splitter.split(exception) == (exception,)
    assert splitter.split(exception.title()) == (exception.title(),)


@pytest.mark.parametrize("raw", ["Radiohead", "Daft Punk", "Sigur Rós", "  Padded  "])
def test_strings_without_separators_are_returned_unchanged(
    splitter: ArtistSplitter, raw: str
) -> None:
    assert splitter.split(raw) == (raw,)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Artist A, Artist B", ("Artist A", "Artist B")),
        ("X feat. Y", ("X", "Y")),
        ("X FEAT. Y", ("X", "Y")),
        ("X ft. Y", ("X", "Y")),
        ("X featuring Y", ("X", "Y")),
        ("Artist A / Artist B", ("Artist A", "Artist B")),
        ("Artist A/Artist B", ("Artist A", "Artist B")),
        ("Artist A & Artist B", ("Artist A", "Artist B")),
        ("Artist A&Artist B", ("Artist A", "Artist B")),
        ("Artist A and Artist B", ("Artist A", "Artist B")),
        ("Skrillex x Diplo", ("Skrillex", "Diplo")),
        ("Skrillex X Diplo", ("Skrillex", "Diplo")),
    ],
)
def test_each_separator_splits(
    splitter: ArtistSplitter, raw: str, expected: tuple[str, ...]
) -> None:
    assert splitter.split(raw) == expected


def test_mixed_separators_are_split_simultaneously(splitter: ArtistSplitter) -> None:
    assert splitter.split("A feat. B & C / D, E") == ("A", "B", "C", "D", "E")


def test_exception_embedded_in_combined_string_is_protected(splitter: ArtistSplitter) -> None:
    assert splitter.split("Tyler, The Creator, Frank Ocean") == (
        "Tyler, The Creator",
        "Frank Ocean",
    )


def test_protected_text_keeps_its_original_casing(splitter: ArtistSplitter) -> None:
    assert splitter.split("Frank Ocean & EARTH, WIND & FIRE") == (
        "Frank Ocean",
        "EARTH, WIND & FIRE",
    )


def test_every_occurrence_of_an_exception_is_protected(splitter: ArtistSplitter) -> None:
    raw = "Tyler, The Creator, Frank Ocean, tyler, the creator"

    assert splitter.split(raw) == ("Tyler, The Creator", "Frank Ocean", "tyler, the creator")


def test_two_different_exceptions_in_one_string(splitter: ArtistSplitter) -> None:
    assert splitter.split("Hall & Oates feat. Simon & Garfunkel") == (
        "Hall & Oates",
        "Simon & Garfunkel",
    )


def test_exact_exception_is_not_split(splitter: ArtistSplitter) -> None:
    assert splitter.split("Hall & Oates") == ("Hall & Oates",)


@pytest.mark.parametrize("raw", ["&", " / ", "Artist A, ", ", Artist A"])
def test_separator_without_two_names_returns_raw(splitter: ArtistSplitter, raw: str) -> None:
    assert splitter.split(raw) == (raw,)


def test_split_is_idempotent(splitter: ArtistSplitter) -> None:
    raw = "Tyler, The Creator, Frank Ocean feat. X"

    first = splitter.split(raw)
    second = splitter.split(raw)

    assert first == second
    assert ArtistSplitter().split(raw) == first
    assert raw == "Tyler, The Creator, Frank Ocean feat. X"


def test_is_combined(splitter: ArtistSplitter) -> None:
    assert splitter.is_combined("X feat. Y")
    assert not splitter.is_combined("Hall & Oates")
    assert not splitter.is_combined("Radiohead")


def test_custom_policy_adds_separators_and_exceptions() -> None:
    splitter = ArtistSplitter(
        DEFAULT_POLICY.extended(separators=[" vs. "], exceptions=["Belle & Sebastian"])
    )

    assert splitter.split("A vs. B") == ("A", "B")
    assert splitter.split("Belle & Sebastian & Artist C") == ("Belle & Sebastian", "Artist C")


def test_module_level_helper_uses_default_policy() -> None:
    assert split_artist_string("Artist A, Artist B") == ("Artist A", "Artist B")


@pytest.mark.parametrize(
    "raw",
    ["Straße & Co feat. Artist C", "STRASSE & CO feat. Artist C", "strasse & co feat. Artist C"],
)
def test_exceptions_whose_case_folding_changes_length_are_protected(raw: str) -> None:
    splitter = ArtistSplitter(DEFAULT_POLICY.extended(exceptions=["Straße & Co"]))

    assert splitter.split(raw) == (raw.removesuffix(" feat. Artist C"), "Artist C")
    assert splitter.split("Straße & Co") == ("Straße & Co",)
