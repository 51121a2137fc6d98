"""Command-line front door for dirlist.

Parses CLI options, merges them with persisted config, configures logging and
runs the directory lister. ``main`` returns the exit code; ``run`` turns it
into a process exit.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import config
from .fs import OsFilesystem
from .lister import list_directory
from .logging_config import VALID_LEVELS, configure_logging
from .types import ExitCodeScheme


def _log_level(value: str) -> str:
    """argparse type for logging level names."""
    normalized = value.strip().upper()
    if normalized not in VALID_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid log level: {value!r} (choose from {', '.join(VALID_LEVELS)})"
        )
    return normalized


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirlist",
        description="Print each directory entry's raw file-type code and name.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to list. Defaults to the configured path or the current directory.",
    )
    parser.add_argument(
        "--exit-codes",
        choices=[scheme.value for scheme in ExitCodeScheme],
        default=None,
        help="Exit-code scheme: legacy (2 on success) or conventional (0 on success).",
    )
    parser.add_argument(
        "--no-dot-entries",
        action="store_true",
        help="Do not report the '.' and '..' pseudo-entries.",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help="Diagnostic log level written to stderr (default: WARNING).",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given path and --exit-codes choice as defaults for later runs.",
    )
    return parser


def main(default_path: Path | str | None = None, argv: list[str] | None = None) -> int:
    """Parse CLI arguments, list the target directory, and return the exit code.

    ``default_path`` is primarily for tests; when omitted the configured path
    (or ``"."``) is used.
    """
    args = build_parser().parse_args(argv)

    configure_logging(args.log_level or config.load_log_level())

    if default_path is None:
        default_path = config.load_default_path()
    path = args.path if args.path is not None else default_path

    if args.exit_codes is not None:
        scheme = ExitCodeScheme(args.exit_codes)
    else:
        scheme = config.load_exit_code_scheme()

    if args.save_defaults:
        if args.path is not None:
            config.save_default_path(Path(args.path).resolve())
        if args.exit_codes is not None:
            config.save_exit_code_scheme(scheme)

    include_dot_entries = config.load_include_dot_entries() and not args.no_dot_entries
    filesystem = OsFilesystem(include_dot_entries=include_dot_entries)
    return list_directory(path, out=sys.stdout, filesystem=filesystem, scheme=scheme)


def run() -> None:
    """Console-script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
