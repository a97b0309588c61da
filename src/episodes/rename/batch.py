# python
"""Batch rename planning for episode files.

This module proposes a rename for every file in a batch using the parser and
formatter, marks files it cannot handle as skipped with a reason, and detects
planned renames that would collide on the same destination filename. It never
touches the filesystem; applying the plan is left to the caller, which must
run `ensure_no_conflicts` over the whole batch first.
"""
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from episodes.errors import DuplicateTargetError
from episodes.rename import formatter, parser
from episodes.utils import REASON_NAME_MISMATCH, REASON_NO_PATTERN, LogLevel, logger


@dataclass
class RenameOperation:
    """One proposed rename. Skipped operations have no target and carry a reason."""

    old_path: Path
    new_path: Path | None
    old_name: str
    new_name: str
    skipped: bool = False
    reason: str | None = None


@dataclass(frozen=True)
class RenameSummary:
    """Counts shown under a rename preview."""

    valid: int
    skipped: int
    total: int


def plan_renames(
        show_name: str, files: Iterable[Path], normalized_name: str | None = None
) -> list[RenameOperation]:
    """Build one rename operation per file for the confirmed `show_name`.

    For each file:
    - No S##E## marker: skipped with `REASON_NO_PATTERN`.
    - Show name words missing from the filename: skipped with `REASON_NAME_MISMATCH`.
    - Otherwise: renamed to "<Normalized.Name>.S##E##<ext>" in the same folder,
      keeping the original extension verbatim.

    Args:
        show_name (str): Show name as confirmed by the user (e.g. "The Rookie").
        files (Iterable[Path]): Files to plan, in the order they should be listed.
        normalized_name (str | None): Dotted name to use in targets. Defaults to
            `formatter.normalize_show_name(show_name)`.

    Returns:
        list[RenameOperation]: One operation per input file, in input order.
    """
    if normalized_name is None:
        normalized_name = formatter.normalize_show_name(show_name)

    def _skip(file: Path, reason: str) -> RenameOperation:
        logger.log("rename.skip", LogLevel.DEBUG, file=file.name, reason=reason)
        return RenameOperation(
            old_path=file, new_path=None, old_name=file.name, new_name="", skipped=True, reason=reason
        )

    operations: list[RenameOperation] = []
    for file in files:
        file = Path(file)
        marker = parser.extract_season_episode(file.name)
        if marker is None:
            operations.append(_skip(file, REASON_NO_PATTERN))
            continue
        if not parser.show_name_matches_filename(show_name, file.name):
            operations.append(_skip(file, REASON_NAME_MISMATCH))
            continue

        new_name = formatter.build_episode_filename(normalized_name, marker, file.suffix)
        logger.log("rename.plan", LogLevel.DEBUG, file=file.name, target=new_name)
        operations.append(
            RenameOperation(old_path=file, new_path=file.with_name(new_name), old_name=file.name, new_name=new_name)
        )
    return operations


def find_conflicts(operations: Iterable[RenameOperation]) -> list[str]:
    """Return target names shared by two or more planned operations, in first-seen order.

    Skipped operations are ignored.
    """
    counts = Counter(op.new_name for op in operations if not op.skipped)
    return [name for name, count in counts.items() if count > 1]


def ensure_no_conflicts(operations: Iterable[RenameOperation]) -> None:
    """Raise `DuplicateTargetError` if any planned targets collide.

    Callers must run this over the whole batch before applying any rename.
    """
    conflicts = find_conflicts(operations)
    if conflicts:
        logger.log("rename.conflict", LogLevel.WARN, targets=conflicts)
        raise DuplicateTargetError(conflicts)


def summarize(operations: Iterable[RenameOperation]) -> RenameSummary:
    """Count planned and skipped operations."""
    operations = list(operations)
    skipped = sum(1 for op in operations if op.skipped)
    return RenameSummary(valid=len(operations) - skipped, skipped=skipped, total=len(operations))
