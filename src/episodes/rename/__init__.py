"""
Episode filename parsing, show name inference, and rename planning.

This package contains the pure engine behind the episode renamer. It parses
raw episode filenames, infers the show they belong to, formats canonical
names, and plans a conflict-free batch of renames.

Package organization:
- parser: Season/episode marker extraction, per-file show name extraction,
  and matching a confirmed show name against a filename.
- formatter: Dotted show name normalization and target filename building.
- core: Show name inference across a batch with a confidence tier.
- batch: Rename planning, skipped-file reasons, and duplicate target detection.

Public API (top-level exports)
- Parsing:
  - `extract_season_episode`: Zero-padded season/episode, or None.
  - `extract_show_name_from_filename`: "The Rookie" from "The.Rookie.S04E07.mkv", or None.
  - `show_name_matches_filename`: Whole-word, case-insensitive name check.
  - `is_video_file`: Extension check against the accepted video extensions.
- Formatting:
  - `normalize_show_name`: "the rookie" -> "The.Rookie".
- Inference:
  - `infer_show_name`: Best-guess show name with "high"/"medium"/"low" confidence.
  - `confidence_message`: Prompt text for a given inference result.
- Planning:
  - `plan_renames`: One `RenameOperation` per file.
  - `find_conflicts`: Target names shared by several planned operations.
  - `ensure_no_conflicts`: Raises `DuplicateTargetError` on any collision.
  - `summarize`: Valid/skipped/total counts.

Behavior notes:
- Nothing here reads or writes files. Files without a marker are reported as
  None or as skipped operations, never as exceptions.
- A non-empty conflict list blocks the whole batch; callers apply nothing.

Example:
    from pathlib import Path
    import episodes.rename as rename
    result = rename.infer_show_name(["The.Rookie.S04E01.mkv", "The.Rookie.S04E02.mkv"])
    ops = rename.plan_renames(result.show_name, [Path("The.Rookie.S04E01.720p.mkv")])
    rename.ensure_no_conflicts(ops)
"""
from episodes.utils.file_util import is_video_file

# Public parsing functions
from .parser import (
    SeasonEpisode,
    extract_season_episode,
    extract_show_name_from_filename,
    show_name_matches_filename,
)

# Formatting
from .formatter import normalize_show_name

# Inference
from .core import (
    InferenceResult,
    confidence_message,
    infer_show_name,
)

# Batch planning
from .batch import (
    RenameOperation,
    RenameSummary,
    ensure_no_conflicts,
    find_conflicts,
    plan_renames,
    summarize,
)

__all__ = [
    # Parsing
    "SeasonEpisode",
    "extract_season_episode",
    "extract_show_name_from_filename",
    "show_name_matches_filename",
    "is_video_file",
    # Formatting
    "normalize_show_name",
    # Inference
    "InferenceResult",
    "infer_show_name",
    "confidence_message",
    # Batch planning
    "RenameOperation",
    "RenameSummary",
    "plan_renames",
    "find_conflicts",
    "ensure_no_conflicts",
    "summarize",
]
