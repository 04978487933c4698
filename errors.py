
# errors.py
"""
Exceptions raised by the folderhash pipeline.
Every failure in a run is fatal; the CLI turns these into a message and exit status.
"""


class FolderHashError(Exception):
    """Base class for all folderhash failures."""
    pass


class InvalidRootError(FolderHashError):
    """Raised when the root folder does not exist or is not a directory."""

    def __init__(self, folder):
        super().__init__(f"Not a directory: {folder}")
        self.folder = folder


class FileAccessError(FolderHashError):
    """Raised when a file cannot be opened or read while digesting."""

    def __init__(self, path, reason):
        super().__init__(f"Failed to hash {path}: {reason}")
        self.path = path


class DuplicatePathError(FolderHashError):
    """Raised when two worker results contain the same path."""

    def __init__(self, path):
        super().__init__(f"Path reported by more than one worker: {path}")
        self.path = path
