"""Exceptions raised by ft-sync."""

from typing import Optional


class FtSyncError(Exception):
    """Base exception for all ft-sync errors."""


class TreeBuildError(FtSyncError):
    """Raised when a directory tree cannot be built.

    Any I/O failure while walking the root aborts the whole build, so
    there is never a partial tree to go with this error.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigError(FtSyncError):
    """Raised when the config file is missing or invalid."""
