"""
Episode Renamer - rename a folder of TV episodes to "Show.Name.S##E##.ext".

This package provides the command line front end: it lists the video files in
a folder, infers and confirms the show name, previews the planned renames,
and applies them once the whole batch is known to be conflict-free.
"""

__version__ = "1.0.0"

# Import main function for CLI entry point
from .episode_renamer import main

__all__ = ["main", "__version__"]
