"""Persistent JSON defaults for tree builds.

Stores the build worker count, always-skipped names and the hidden-entry
preference. Bad or missing values resolve to the built-in defaults, so a
broken config file never stops a build. The fetch-failure policy is not
stored here; ``build_tree`` takes it per call.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_MAX_WORKERS = 8


def load_config() -> dict[str, object]:
    """Return the saved settings mapping.

    A missing file means no overrides. Unreadable or non-JSON content is
    logged and treated the same way, as is JSON whose top level is not an
    object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` to ``CONFIG_PATH``, creating the config directory.

    Write failures are only logged; the caller keeps its in-memory values.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_max_workers() -> int:
    """Return the persisted worker count, or ``DEFAULT_MAX_WORKERS``.

    Booleans and non-positive integers are rejected.
    """
    value = load_config().get("max_workers")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_MAX_WORKERS
    return value


def save_max_workers(max_workers: int) -> None:
    if max_workers <= 0:
        return
    config = load_config()
    config["max_workers"] = int(max_workers)
    save_config(config)


def load_skip_names() -> tuple[str, ...]:
    """Return child names that builds always skip; non-string items are dropped."""
    value = load_config().get("skip_names")
    if not isinstance(value, list):
        return ()
    return tuple(name for name in value if isinstance(name, str) and name)


def save_skip_names(names: list[str] | tuple[str, ...]) -> None:
    config = load_config()
    config["skip_names"] = [str(name) for name in names if str(name)]
    save_config(config)


def load_show_hidden() -> bool:
    """Return whether dot-named children are kept; defaults to ``True``."""
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else True


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_MAX_WORKERS",
    "load_config",
    "save_config",
    "load_max_workers",
    "save_max_workers",
    "load_skip_names",
    "save_skip_names",
    "load_show_hidden",
    "save_show_hidden",
]
