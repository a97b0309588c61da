# python
"""
Utilities to build the canonical on-disk names used for renamed episodes.

This module provides two helpers:

- `normalize_show_name` turns a free-form show name into its dotted token
  form, e.g. "  the   rookie " -> "The.Rookie".
- `build_episode_filename` joins that token with a season/episode marker and
  the original file extension, e.g. "The.Rookie.S04E07.mkv".

Notes:
- Title-casing is naive: the first character of each word is upper-cased and
  the remainder lower-cased, so "NCIS" becomes "Ncis" and "of" becomes "Of".
- The extension is passed through verbatim, including its case.
"""
from episodes.rename.parser import SeasonEpisode
from episodes.utils import file_util


def normalize_show_name(name: str) -> str:
    """
    Convert a human-entered show name into its dotted on-disk form.

    Examples:
    - normalize_show_name("the rookie") -> "The.Rookie"
    - normalize_show_name("wOnDeR mAn") -> "Wonder.Man"
    - normalize_show_name("Friends") -> "Friends"
    """
    return ".".join(file_util.title_case_word(word) for word in name.split())


def build_episode_filename(normalized_name: str, marker: SeasonEpisode, suffix: str) -> str:
    """
    Build the target filename for an episode.

    Parameters:
    - normalized_name (str): Dotted show name from `normalize_show_name`.
    - marker (SeasonEpisode): Zero-padded season and episode.
    - suffix (str): Original file extension including the dot (e.g. ".mkv"), may be empty.

    Returns:
    - str: "<normalized_name>.S<season>E<episode><suffix>"
    """
    return f"{normalized_name}.{marker.token}{suffix}"
