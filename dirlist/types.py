"""Domain datatypes for directory entries, file-type tags, and exit statuses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class FileType(IntEnum):
    """Raw ``d_type`` codes reported for one directory entry.

    Not every platform fills the type field, so ``UNKNOWN`` is an ordinary
    value rather than an error.
    """

    UNKNOWN = 0
    FIFO = 1
    CHAR_DEVICE = 2
    DIRECTORY = 4
    BLOCK_DEVICE = 6
    REGULAR_FILE = 8
    SYMBOLIC_LINK = 10
    SOCKET = 12
    WHITEOUT = 14


@dataclass(frozen=True)
class DirectoryEntryView:
    """One entry produced by a directory-stream advance.

    Only valid until the next ``read()`` or ``close()`` on the stream that
    produced it.
    """

    type_tag: FileType
    name: str

    def format_line(self) -> str:
        """Return the ``entry: <type_int> <name>`` output row."""
        return f"entry: {int(self.type_tag)} {self.name}"


class ExitStatus(IntEnum):
    """Literal process exit statuses kept from the original listing tool.

    ``FOUND`` is defined but never returned.
    """

    FOUND = 0
    ERROR = 1
    NOT_FOUND = 2


class ExitCodeScheme(str, Enum):
    """How a finished listing maps onto a process exit code."""

    LEGACY = "legacy"
    CONVENTIONAL = "conventional"

    @classmethod
    def parse(cls, value: object) -> "ExitCodeScheme | None":
        """Return the scheme named by ``value`` or ``None`` when unrecognized."""
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        for scheme in cls:
            if scheme.value == normalized:
                return scheme
        return None

    def success_code(self) -> int:
        if self is ExitCodeScheme.CONVENTIONAL:
            return 0
        return int(ExitStatus.NOT_FOUND)

    def failure_code(self) -> int:
        return int(ExitStatus.ERROR)


__all__ = [
    "FileType",
    "DirectoryEntryView",
    "ExitStatus",
    "ExitCodeScheme",
]
