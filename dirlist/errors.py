"""Exception types raised by the directory listing layers."""

from __future__ import annotations

from pathlib import Path


class DirlistError(Exception):
    """Base class for dirlist errors."""


class OpenFailure(DirlistError):
    """A directory stream could not be opened.

    Missing paths, non-directories and permission problems all collapse into
    this one kind. The originating ``OSError`` (if any) is kept on ``reason``.
    """

    def __init__(self, path: str | Path, reason: OSError | None = None) -> None:
        self.path = path
        self.reason = reason
        detail = f": {reason.strerror or reason}" if reason is not None else ""
        super().__init__(f"cannot open directory {str(path)!r}{detail}")


__all__ = ["DirlistError", "OpenFailure"]
