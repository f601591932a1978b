"""Error taxonomy for directory listing and file serving."""

from __future__ import annotations

from pathlib import Path


class FileGateError(Exception):
    """Base exception for FileGate errors."""


class DirectoryNotFoundError(FileGateError):
    """Target directory does not exist."""

    def __init__(self, path: Path | str):
        super().__init__(f"Directory not found: {path}")
        self.path = path


class PathOutsideRootError(DirectoryNotFoundError):
    """Requested path resolves outside the configured root.

    Reported like a missing directory so callers cannot probe the tree
    above the root.
    """


class DirectoryReadError(FileGateError):
    """Target directory exists but cannot be enumerated."""

    def __init__(self, path: Path | str, cause: OSError):
        super().__init__(f"Error reading directory {path}: {cause}")
        self.path = path
        self.cause = cause


class EntryError(FileGateError):
    """A single entry could not be stat-ed or probed; it is skipped."""

    def __init__(self, path: Path | str, cause: OSError):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


class EncodeError(FileGateError):
    """The listing could not be serialized to JSON."""
