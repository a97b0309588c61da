"""Tests for rename planning and duplicate target detection."""

from pathlib import Path

import pytest

from episodes.errors import DuplicateTargetError, RenamerError
from episodes.rename import batch
from episodes.rename.batch import RenameOperation
from episodes.utils import REASON_NAME_MISMATCH, REASON_NO_PATTERN


def _planned(name: str) -> RenameOperation:
    return RenameOperation(old_path=Path("/tv") / f"src-{name}", new_path=Path("/tv") / name, old_name=f"src-{name}",
                           new_name=name)


def _skipped(name: str) -> RenameOperation:
    return RenameOperation(old_path=Path("/tv") / name, new_path=None, old_name=name, new_name="", skipped=True,
                           reason=REASON_NO_PATTERN)


def test_plan_strips_extra_tags_and_keeps_extension() -> None:
    [op] = batch.plan_renames("The Rookie", [Path("/tv/The.Rookie.S04E01.720p.mkv")])
    assert op.new_name == "The.Rookie.S04E01.mkv"
    assert op.new_path == Path("/tv/The.Rookie.S04E01.mkv")
    assert op.old_name == "The.Rookie.S04E01.720p.mkv"
    assert op.skipped is False
    assert op.reason is None


def test_plan_pads_marker_and_keeps_extension_case() -> None:
    [op] = batch.plan_renames("wonder man", [Path("/tv/wonder_man_s1e3.MP4")])
    assert op.new_name == "Wonder.Man.S01E03.MP4"


def test_plan_skips_files_without_marker() -> None:
    [op] = batch.plan_renames("The Rookie", [Path("/tv/The.Rookie.Pilot.mkv")])
    assert op.skipped is True
    assert op.reason == REASON_NO_PATTERN
    assert op.new_name == ""
    assert op.new_path is None


def test_plan_skips_files_of_other_shows() -> None:
    [op] = batch.plan_renames("The Rookie", [Path("/tv/Wonder.Man.S01E01.mkv")])
    assert op.skipped is True
    assert op.reason == REASON_NAME_MISMATCH
    assert op.new_name == ""


def test_plan_checks_marker_before_name() -> None:
    [op] = batch.plan_renames("The Rookie", [Path("/tv/Something.Else.mkv")])
    assert op.reason == REASON_NO_PATTERN


def test_plan_keeps_input_order_and_accepts_explicit_normalized_name() -> None:
    files = [Path("/tv/the.rookie.s04e02.mkv"), Path("/tv/notes.mkv"), Path("/tv/the.rookie.s04e01.mkv")]
    ops = batch.plan_renames("The Rookie", files, normalized_name="The.Rookie.2018")
    assert [op.old_name for op in ops] == ["the.rookie.s04e02.mkv", "notes.mkv", "the.rookie.s04e01.mkv"]
    assert [op.new_name for op in ops] == ["The.Rookie.2018.S04E02.mkv", "", "The.Rookie.2018.S04E01.mkv"]


def test_plan_accepts_string_paths() -> None:
    [op] = batch.plan_renames("Show", ["/tv/show.s01e01.avi"])
    assert op.old_path == Path("/tv/show.s01e01.avi")
    assert op.new_name == "Show.S01E01.avi"


def test_find_conflicts_reports_duplicate_targets() -> None:
    ops = [_planned("Show.S01E01.mkv"), _planned("Show.S01E01.mkv"), _planned("Show.S01E02.mkv")]
    assert batch.find_conflicts(ops) == ["Show.S01E01.mkv"]


def test_find_conflicts_empty_when_targets_unique() -> None:
    assert batch.find_conflicts([_planned("Show.S01E01.mkv"), _planned("Show.S01E02.mkv")]) == []
    assert batch.find_conflicts([]) == []


def test_find_conflicts_ignores_skipped_operations() -> None:
    ops = [_skipped("a.mkv"), _skipped("b.mkv"), _planned("Show.S01E01.mkv")]
    assert batch.find_conflicts(ops) == []


def test_find_conflicts_lists_each_name_once_in_first_seen_order() -> None:
    ops = [_planned(n) for n in ["B.S01E01.mkv", "A.S01E01.mkv", "B.S01E01.mkv", "A.S01E01.mkv", "B.S01E01.mkv"]]
    assert batch.find_conflicts(ops) == ["B.S01E01.mkv", "A.S01E01.mkv"]


def test_planned_duplicates_from_real_files() -> None:
    ops = batch.plan_renames("Show", [Path("/tv/Show.S01E01.720p.mkv"), Path("/tv/show.s1e1.mkv")])
    assert batch.find_conflicts(ops) == ["Show.S01E01.mkv"]


def test_ensure_no_conflicts_raises_with_all_names() -> None:
    ops = [_planned("A.S01E01.mkv"), _planned("A.S01E01.mkv"), _planned("B.S01E01.mkv"), _planned("B.S01E01.mkv")]
    with pytest.raises(DuplicateTargetError) as excinfo:
        batch.ensure_no_conflicts(ops)
    assert excinfo.value.conflicts == ["A.S01E01.mkv", "B.S01E01.mkv"]
    assert str(excinfo.value) == "Duplicate target filenames: A.S01E01.mkv, B.S01E01.mkv"
    assert isinstance(excinfo.value, RenamerError)
    assert excinfo.value.details


def test_ensure_no_conflicts_passes_for_unique_targets() -> None:
    batch.ensure_no_conflicts([_planned("A.S01E01.mkv"), _skipped("x.mkv"), _skipped("y.mkv")])


def test_summarize_counts() -> None:
    summary = batch.summarize([_planned("A.S01E01.mkv"), _skipped("x.mkv"), _skipped("y.mkv")])
    assert (summary.valid, summary.skipped, summary.total) == (1, 2, 3)
