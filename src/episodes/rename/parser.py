"""
Module for parsing episode filenames: locating the season/episode marker,
extracting a candidate show name from the text before it, and checking whether
a confirmed show name appears in a filename.

Every function here is pure and total. A filename without a marker is a
normal outcome and is reported as None, never as an exception.
"""

from dataclasses import dataclass, field

from episodes.utils import BRACKETED_REGEX, LogLevel, SEASON_EPISODE_REGEX, file_util, logger


@dataclass(frozen=True)
class SeasonEpisode:
    """Zero-padded season/episode pair and the offset where its marker starts."""

    season: str
    episode: str
    start: int = field(default=0, compare=False)

    @property
    def token(self) -> str:
        return f"S{self.season}E{self.episode}"


def extract_season_episode(filename: str) -> SeasonEpisode | None:
    """Extract the first S##E## marker from a filename as two-digit strings."""
    match = SEASON_EPISODE_REGEX.search(filename)
    if not match:
        logger.log("parse.no_marker", LogLevel.TRACE, file=filename)
        return None
    return SeasonEpisode(
        season=match.group(1).zfill(2),
        episode=match.group(2).zfill(2),
        start=match.start(),
    )


def extract_show_name_from_filename(filename: str) -> str | None:
    """
    Derive a human-readable show name from the text preceding the S##E## marker.
    Examples:
      "The.Rookie.S04E07.mkv" -> "The Rookie"
      "[Group] wonder_man (2025) - s1e1.mkv" -> "Wonder Man"
      "S01E01.mkv" -> None
    """
    marker = extract_season_episode(filename)
    if marker is None:
        return None

    # Strip release-group, year and resolution tags in brackets or parentheses
    before = BRACKETED_REGEX.sub("", filename[: marker.start])
    words = file_util.split_words(before)
    if not words:
        return None
    return " ".join(file_util.title_case_word(word) for word in words)


def show_name_matches_filename(show_name: str, filename: str) -> bool:
    """
    Check that every word of `show_name` appears as a whole word in `filename`.

    Separators (., -, _) count as word breaks and comparison ignores case, so
    "The Rookie" matches "the_rookie_s04e07.mkv" but "Rookie" does not match
    "Therookie.S04E07.mkv". Word order is not checked.
    """
    show_words = show_name.lower().split()
    filename_words = set(file_util.split_words(filename.lower()))
    return all(word in filename_words for word in show_words)
