"""
Exception classes for the episode renamer.
"""


class RenamerError(Exception):
    """Base exception for all episode renamer errors"""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class DuplicateTargetError(RenamerError):
    """Raised when two or more planned renames share a destination filename"""

    def __init__(self, conflicts: list[str]):
        message = f"Duplicate target filenames: {', '.join(conflicts)}"
        details = "No files were renamed. Remove or rename the duplicate episodes and try again."
        super().__init__(message, details)
        self.conflicts = list(conflicts)
