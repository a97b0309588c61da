"""
Text and path helpers shared by the filename parser and the command line.

The word-splitting helpers are pure; `list_video_files` is the only function
here that reads the filesystem and is meant for callers outside the engine.
"""
import re
from pathlib import Path

from episodes.utils import SEPARATOR_REGEX, VIDEO_EXTENSIONS


def normalize_text(text: str) -> str:
    """Normalize text by replacing separators with spaces and collapsing whitespace."""
    text = SEPARATOR_REGEX.sub(" ", text)
    return re.sub(r"\s+", " ", text).strip()


def split_words(text: str) -> list[str]:
    """Split text into words on separators (., -, _) and whitespace."""
    return normalize_text(text).split()


def title_case_word(word: str) -> str:
    """Upper-case the first character and lower-case the rest (no acronym handling)."""
    return word[:1].upper() + word[1:].lower()


def is_video_file(filename: str) -> bool:
    """Return True when the filename carries one of the accepted video extensions."""
    return Path(filename).suffix.lower() in VIDEO_EXTENSIONS


def list_video_files(folder: Path) -> list[Path]:
    """List video files directly inside `folder` (non-recursive), sorted by name."""
    return sorted(
        (p for p in Path(folder).iterdir() if p.is_file() and is_video_file(p.name)),
        key=lambda p: p.name,
    )
