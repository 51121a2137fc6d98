"""Public package surface for dirlist.

Exports ``list_directory`` for programmatic use and ``main`` for CLI
invocation. Implementation lives in submodules under ``dirlist``.
"""

from __future__ import annotations

from .errors import DirlistError, OpenFailure
from .lister import list_directory
from .types import DirectoryEntryView, ExitCodeScheme, ExitStatus, FileType


def main(*args, **kwargs):
    """Lazily import the CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "list_directory",
    "DirectoryEntryView",
    "ExitCodeScheme",
    "ExitStatus",
    "FileType",
    "DirlistError",
    "OpenFailure",
]
