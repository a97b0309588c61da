"""Tests for show name normalization and target filename building."""

import pytest

from episodes.rename import formatter
from episodes.rename.parser import SeasonEpisode


@pytest.mark.parametrize(
    "name, expected",
    [
        ("the rookie", "The.Rookie"),
        ("The Rookie", "The.Rookie"),
        ("wOnDeR mAn", "Wonder.Man"),
        ("  The Rookie  ", "The.Rookie"),
        ("The   Rookie", "The.Rookie"),
        ("  the   rookie  ", "The.Rookie"),
        ("the\trookie\n", "The.Rookie"),
        ("Friends", "Friends"),
        ("NCIS", "Ncis"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_normalize_show_name(name: str, expected: str) -> None:
    assert formatter.normalize_show_name(name) == expected


@pytest.mark.parametrize("name", ["the rookie", "  wOnDeR   mAn ", "Friends", "law and order svu"])
def test_normalize_show_name_is_idempotent(name: str) -> None:
    once = formatter.normalize_show_name(name)
    assert formatter.normalize_show_name(once.replace(".", " ")) == once


def test_build_episode_filename_keeps_suffix_verbatim() -> None:
    marker = SeasonEpisode("04", "01")
    assert formatter.build_episode_filename("The.Rookie", marker, ".mkv") == "The.Rookie.S04E01.mkv"
    assert formatter.build_episode_filename("The.Rookie", marker, ".MKV") == "The.Rookie.S04E01.MKV"
    assert formatter.build_episode_filename("Show", marker, "") == "Show.S04E01"
