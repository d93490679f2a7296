"""Core value types, error kinds and helpers shared across the package."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class ErrorType(enum.Enum):
    """Kinds of failure; each value is the name shown in error messages."""

    UNKNOWN = "Unknown"
    INVALID_ARGUMENT = "InvalidArgument"
    ACCESS_DENIED = "AccessDenied"
    PATH_TOO_LONG = "PathTooLong"
    NOT_SUPPORTED = "NotSupported"
    NO_DATA = "NoData"
    TOO_BIG = "TooBig"
    IO_ERROR = "IoError"


def format_error(error_type: ErrorType, message: str) -> str:
    """Render an error message prefixed with the name of its kind."""
    return f"[{error_type.value}] {message}"


class XtagError(Exception):
    """A failure reported by the tagging library."""

    def __init__(self, error_type: ErrorType, message: str) -> None:
        self.error_type = error_type
        self.message = format_error(error_type, message)
        super().__init__(self.message)

    @property
    def exit_code(self) -> "ExitCode":
        return to_exit_code(self.error_type)


class Panic(RuntimeError):
    """An unrecoverable internal error."""


class ExitCode(enum.IntEnum):
    SUCCESS = 0
    FAILURE = 1
    INVALID_ARGUMENT = 101
    ACCESS_DENIED = 102
    PATH_TOO_LONG = 103
    NOT_SUPPORTED = 104
    NO_DATA = 105
    TOO_BIG = 106
    IO_ERROR = 107


_EXIT_CODES = {
    ErrorType.UNKNOWN: ExitCode.FAILURE,
    ErrorType.INVALID_ARGUMENT: ExitCode.INVALID_ARGUMENT,
    ErrorType.ACCESS_DENIED: ExitCode.ACCESS_DENIED,
    ErrorType.PATH_TOO_LONG: ExitCode.PATH_TOO_LONG,
    ErrorType.NOT_SUPPORTED: ExitCode.NOT_SUPPORTED,
    ErrorType.NO_DATA: ExitCode.NO_DATA,
    ErrorType.TOO_BIG: ExitCode.TOO_BIG,
    ErrorType.IO_ERROR: ExitCode.IO_ERROR,
}


def to_exit_code(error_type: ErrorType) -> ExitCode:
    """Map an error kind to the process exit code that reports it."""
    return _EXIT_CODES.get(error_type, ExitCode.FAILURE)


class TagType(enum.IntFlag):
    NONE = 0
    PRIMARY = 1 << 0
    INHERITED = 1 << 1
    UNTAGGED = 1 << 2


@dataclass(frozen=True)
class ScanTag:
    """A tag found on an entry, either its own or inherited from a parent."""

    value: str
    type: TagType = TagType.NONE


class EntryType(enum.IntFlag):
    NONE = 0
    DIRECTORY = 1 << 0
    FILE = 1 << 1


@dataclass
class Entry:
    type: EntryType = EntryType.NONE
    path: Path = field(default_factory=Path)
    tags: list[ScanTag] = field(default_factory=list)


@dataclass
class EntryList:
    path: Path = field(default_factory=Path)
    entries: list[Entry] = field(default_factory=list)

    def sort_entries(self) -> None:
        """Order directories first, then everything by path."""
        self.entries.sort(key=lambda e: (e.type != EntryType.DIRECTORY, Path(e.path)))


def repoint_through(storage: dict[str, str], key: str) -> str:
    """Return the canonical copy of ``key`` held in ``storage``, adding it if absent."""
    return storage.setdefault(key, key)