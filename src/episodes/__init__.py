"""
Filename inference and rename planning for batches of TV episode files.

This package turns raw, inconsistently formatted episode filenames into the
canonical ``Show.Name.S##E##.ext`` form. It never touches the filesystem:
callers hand it filenames (or paths) and receive structured results.

The package is organized into two categories:
- rename: season/episode parsing, show name extraction and inference, name
  formatting, and batch rename planning with conflict detection.
- utils: constants, structured logging, and small text helpers.
"""

from episodes.utils.constants import DEBUG as _DEFAULT_DEBUG

__version__ = "1.0.0"

# Debug flag for controlling verbose output
DEBUG: bool = _DEFAULT_DEBUG

__all__ = ["__version__", "DEBUG"]
