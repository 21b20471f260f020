"""Error taxonomy reported by the command line."""

from __future__ import annotations

from enum import Enum


class ErrorType(Enum):
    """Outcome of a run; exactly one is reported."""

    NONE = "None"
    ARGUMENT = "Incorrect number of arguments"
    GIT = "Git error"
    SOURCE_FILE = "Source file not found"
    DEST_FILE = "Destination file could not be written"
    HANDLE_FILE = "Handling files"

    @property
    def description(self) -> str:
        return self.value

    @property
    def exit_code(self) -> int:
        return 0 if self is ErrorType.NONE else 1


class GitRevError(Exception):
    """Base class for failures that abort a run."""

    error_type: ErrorType = ErrorType.NONE


class ArgumentError(GitRevError):
    """Raised when the command line does not hold exactly three arguments."""

    error_type = ErrorType.ARGUMENT


class GitError(GitRevError):
    """Raised when any repository query fails."""

    error_type = ErrorType.GIT


class SourceFileError(GitRevError):
    """Raised when the template cannot be opened, read or decoded."""

    error_type = ErrorType.SOURCE_FILE


class DestFileError(GitRevError):
    """Raised when the destination cannot be a file (missing parent, directory)."""

    error_type = ErrorType.DEST_FILE


class HandleFileError(GitRevError):
    """Raised when writing the destination fails at the OS level."""

    error_type = ErrorType.HANDLE_FILE
