"""
Episode renamer CLI: infer, confirm, preview, and apply episode renames.

Lists the video files in a folder, asks the user to confirm the show name
(seeded with the inferred one when none is given), plans the renames, blocks
the whole batch on duplicate targets, and renames the files in place.
"""

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

import episodes as episodes_module
from episodes import rename
from episodes.errors import RenamerError
from episodes.utils import LogLevel, file_util, logger

from . import __version__

_RULE = "─" * 64


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="episode-renamer",
        description='Rename TV episode files to "Show.Name.S##E##.ext".',
    )
    parser.add_argument("folder", help="Folder containing the episode files")
    parser.add_argument(
        "show_name",
        nargs="?",
        help='Show name in natural format (e.g. "The Rookie"). Inferred from the filenames when omitted.',
    )
    parser.add_argument("--dry-run", action="store_true", help="Preview renames without changing anything")
    parser.add_argument("-y", "--yes", action="store_true", help="Skip the confirmation prompt")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def prompt_show_name(result: rename.InferenceResult) -> str:
    """Ask for the show name, offering the inferred one as the default."""
    message = rename.confidence_message(result)
    default = result.show_name or ""
    suffix = f" [{default}]" if default else ""
    answer = input(f"{message}{suffix} ").strip()
    return answer or default


def confirm_rename() -> bool:
    answer = input("\nProceed with renaming? (y/N): ").strip().lower()
    return answer in {"y", "yes"}


def display_preview(operations: list[rename.RenameOperation]) -> None:
    """Print planned renames, skipped files with their reason, and a summary."""
    valid_ops = [op for op in operations if not op.skipped]
    skipped_ops = [op for op in operations if op.skipped]

    if valid_ops:
        print("\n📋 Files to rename:")
        print(_RULE)
        for op in valid_ops:
            print(f"{op.old_name} → {op.new_name}")

    if skipped_ops:
        print("\n⏭️ Skipped files:")
        print(_RULE)
        for op in skipped_ops:
            print(f"{op.old_name} - {op.reason}")

    summary = rename.summarize(operations)
    print("\nSummary:")
    print(f"  Valid: {summary.valid}")
    print(f"  Skipped: {summary.skipped}")
    print(f"  Total: {summary.total}")


def apply_renames(operations: list[rename.RenameOperation]) -> int:
    """Rename files in order; stops at the first filesystem error. Returns the count renamed."""
    renamed = 0
    for op in tqdm(operations, desc="Renaming files", disable=len(operations) < 2):
        try:
            op.old_path.rename(op.new_path)
        except OSError as e:
            logger.log("rename.failed", LogLevel.ERROR, file=op.old_name, target=op.new_name, error=str(e))
            raise
        logger.log("rename.apply", LogLevel.DEBUG, file=op.old_name, target=op.new_name)
        tqdm.write(f"✓ {op.old_name} → {op.new_name}")
        renamed += 1
    return renamed


def run(args: argparse.Namespace) -> int:
    folder = Path(args.folder).expanduser().resolve()
    if not folder.is_dir():
        print(f"❌ Folder {folder} does not exist")
        return 1

    files = file_util.list_video_files(folder)
    logger.log("cli.start", LogLevel.DEBUG, folder=str(folder), video_files=len(files), dry_run=args.dry_run)
    if not files:
        print("No video files found in the specified folder.")
        return 0

    show_name = args.show_name
    if not show_name:
        show_name = prompt_show_name(rename.infer_show_name(f.name for f in files))
    show_name = show_name.strip()
    if not show_name:
        raise RenamerError("Show name is required")

    operations = rename.plan_renames(show_name, files)
    valid_ops = [op for op in operations if not op.skipped]
    if not valid_ops:
        print("⚠️ No matching files found to rename.")
        display_preview(operations)
        return 0

    # Nothing may be renamed until the whole batch is known to be collision-free
    rename.ensure_no_conflicts(valid_ops)

    display_preview(operations)

    if args.dry_run:
        print("\n🧪 Dry-run mode: no changes will be made.")
        return 0

    if not args.yes and not confirm_rename():
        print("❌ Rename cancelled")
        return 0

    print("\nRenaming files...")
    renamed = apply_renames(valid_ops)
    print(f"\n🎉 Successfully renamed {renamed} file(s)")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.debug or episodes_module.DEBUG:
        episodes_module.DEBUG = True
        logger.set_log_level(LogLevel.DEBUG)

    try:
        return run(args)
    except KeyboardInterrupt:
        print("\n❌ Rename cancelled")
        return 130
    except RenamerError as e:
        logger.log("cli.error", LogLevel.DEBUG, error=e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        if e.details:
            print(e.details, file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        logger.log("cli.error", LogLevel.DEBUG, error=str(e))
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except PermissionError as e:
        logger.log("cli.error", LogLevel.DEBUG, error=str(e))
        print(f"Error: Permission denied: {e.filename}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.log("cli.error", LogLevel.DEBUG, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
