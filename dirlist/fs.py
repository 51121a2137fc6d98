"""Directory-stream layer: open, advance, close.

The lister only talks to the ``DirectoryFilesystem`` / ``DirectoryStream``
protocols so tests can swap in a fake that counts open and close calls.
``OsFilesystem`` is the real implementation on top of ``os.scandir``.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Protocol

from .errors import OpenFailure
from .logging_config import get_logger
from .types import DirectoryEntryView, FileType

logger = get_logger(__name__)

DOT_ENTRY_NAMES = (".", "..")


class DirectoryStream(Protocol):
    """An open directory handle with a forward-only cursor."""

    def read(self) -> DirectoryEntryView | None:
        """Advance the cursor; ``None`` means the stream is exhausted."""
        ...

    def close(self) -> None: ...

    def __enter__(self) -> "DirectoryStream": ...

    def __exit__(self, exc_type, exc, tb) -> None: ...


class DirectoryFilesystem(Protocol):
    def open(self, path: str | Path) -> DirectoryStream:
        """Open ``path`` as a directory stream or raise ``OpenFailure``."""
        ...


def file_type_from_mode(mode: int) -> FileType:
    """Return the type tag matching ``st_mode`` bits."""
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISREG(mode):
        return FileType.REGULAR_FILE
    if stat.S_ISLNK(mode):
        return FileType.SYMBOLIC_LINK
    if stat.S_ISFIFO(mode):
        return FileType.FIFO
    if stat.S_ISCHR(mode):
        return FileType.CHAR_DEVICE
    if stat.S_ISBLK(mode):
        return FileType.BLOCK_DEVICE
    if stat.S_ISSOCK(mode):
        return FileType.SOCKET
    if stat.S_ISWHT(mode):
        return FileType.WHITEOUT
    return FileType.UNKNOWN


def classify_entry(entry: os.DirEntry[str]) -> FileType:
    """Derive the type tag for a scandir entry without following symlinks.

    The ``is_*`` checks are answered from the platform-supplied entry type
    when available; rarer kinds fall back to ``lstat`` mode bits.
    """
    try:
        if entry.is_symlink():
            return FileType.SYMBOLIC_LINK
        if entry.is_dir(follow_symlinks=False):
            return FileType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return FileType.REGULAR_FILE
        return file_type_from_mode(entry.stat(follow_symlinks=False).st_mode)
    except OSError:
        return FileType.UNKNOWN


class OsDirectoryStream:
    """``os.scandir``-backed directory stream.

    ``os.scandir`` never reports ``.`` and ``..``; when ``include_dot_entries``
    is set they are produced first, tagged as directories, to match what
    ``readdir`` shows.
    """

    def __init__(self, path: str | Path, include_dot_entries: bool = True) -> None:
        self.path = path
        self._iterator = os.scandir(os.fspath(path))
        self._pending_dots = list(DOT_ENTRY_NAMES) if include_dot_entries else []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self) -> DirectoryEntryView | None:
        if self._closed:
            raise ValueError("read from closed directory stream")
        if self._pending_dots:
            return DirectoryEntryView(FileType.DIRECTORY, self._pending_dots.pop(0))
        try:
            entry = next(self._iterator)
        except StopIteration:
            return None
        except OSError as exc:
            # Read errors end the cursor the same way exhaustion does.
            logger.warning("directory read failed for %s: %s", self.path, exc)
            return None
        return DirectoryEntryView(classify_entry(entry), entry.name)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._iterator.close()
        logger.debug("closed directory stream for %s", self.path)

    def __enter__(self) -> "OsDirectoryStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class OsFilesystem:
    """Real filesystem access through ``os.scandir``."""

    def __init__(self, include_dot_entries: bool = True) -> None:
        self.include_dot_entries = include_dot_entries

    def open(self, path: str | Path) -> OsDirectoryStream:
        try:
            stream = OsDirectoryStream(path, include_dot_entries=self.include_dot_entries)
        except OSError as exc:
            raise OpenFailure(path, exc) from exc
        logger.debug("opened directory stream for %s", path)
        return stream


__all__ = [
    "DOT_ENTRY_NAMES",
    "DirectoryStream",
    "DirectoryFilesystem",
    "file_type_from_mode",
    "classify_entry",
    "OsDirectoryStream",
    "OsFilesystem",
]
