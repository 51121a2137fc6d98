"""Persistent JSON config helpers.

Stores the default target directory, the exit-code scheme, dot-entry
visibility and the log level. Malformed or missing config falls back to
defaults; nothing here raises.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .lister import DEFAULT_PATH
from .types import ExitCodeScheme

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, ignoring write errors."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_default_path() -> str:
    """Return the configured listing target, ``"."`` when unset or blank."""
    value = load_config().get("path")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_PATH
    return value


def save_default_path(path: str | Path) -> None:
    text = str(path)
    if not text.strip():
        return
    config = load_config()
    config["path"] = text
    save_config(config)


def load_exit_code_scheme() -> ExitCodeScheme:
    """Return the persisted exit-code scheme, defaulting to ``legacy``."""
    scheme = ExitCodeScheme.parse(load_config().get("exit_codes"))
    return scheme if scheme is not None else ExitCodeScheme.LEGACY


def save_exit_code_scheme(scheme: ExitCodeScheme) -> None:
    config = load_config()
    config["exit_codes"] = scheme.value
    save_config(config)


def load_include_dot_entries() -> bool:
    """Return whether ``.``/``..`` are listed; only real booleans override ``True``."""
    value = load_config().get("include_dot_entries")
    return value if isinstance(value, bool) else True


def load_log_level() -> str | None:
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_default_path",
    "save_default_path",
    "load_exit_code_scheme",
    "save_exit_code_scheme",
    "load_include_dot_entries",
    "load_log_level",
]
