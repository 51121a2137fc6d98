"""List one directory as ``entry: <type_int> <name>`` rows.

The stream is held inside a ``with`` block so it is released exactly once on
every path after a successful open. A failed open acquires nothing, prints
``dirp: NULL`` and returns the error status.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .errors import OpenFailure
from .fs import DirectoryFilesystem, DirectoryStream, OsFilesystem
from .logging_config import get_logger
from .types import DirectoryEntryView, ExitCodeScheme

logger = get_logger(__name__)

DEFAULT_PATH = "."
OPEN_FAILURE_MESSAGE = "dirp: NULL"


def _write_text(out: TextIO, text: str) -> None:
    """Write ``text`` to ``out`` keeping undecodable name bytes intact.

    Names that are not valid in the filesystem encoding come back from
    ``os.scandir`` as surrogate escapes. Streams exposing a binary ``buffer``
    get the original bytes via ``os.fsencode``.
    """
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(text)
        return
    out.flush()
    buffer.write(os.fsencode(text))


def _flush(out: TextIO) -> None:
    buffer = getattr(out, "buffer", None)
    if buffer is not None:
        buffer.flush()
    out.flush()


def iter_entries(stream: DirectoryStream) -> Iterator[DirectoryEntryView]:
    """Yield entries from ``stream`` until ``read()`` reports exhaustion."""
    while True:
        entry = stream.read()
        if entry is None:
            return
        yield entry


def list_directory(
    path: str | Path = DEFAULT_PATH,
    out: TextIO | None = None,
    filesystem: DirectoryFilesystem | None = None,
    scheme: ExitCodeScheme = ExitCodeScheme.LEGACY,
) -> int:
    """Print every entry of ``path`` to ``out`` and return the exit code.

    Under the legacy scheme a completed listing returns ``2`` (``NOT_FOUND``)
    and an open failure returns ``1``. Entries are written in stream order.
    """
    if out is None:
        out = sys.stdout
    if filesystem is None:
        filesystem = OsFilesystem()

    try:
        stream = filesystem.open(path)
    except OpenFailure as exc:
        logger.info("%s", exc)
        _write_text(out, OPEN_FAILURE_MESSAGE)
        _flush(out)
        return scheme.failure_code()

    count = 0
    with stream:
        for entry in iter_entries(stream):
            _write_text(out, entry.format_line() + "\n")
            count += 1
    _flush(out)
    logger.debug("listed %d entries from %s", count, path)
    return scheme.success_code()


__all__ = [
    "DEFAULT_PATH",
    "OPEN_FAILURE_MESSAGE",
    "iter_entries",
    "list_directory",
]
