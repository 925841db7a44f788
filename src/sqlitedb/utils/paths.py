from __future__ import annotations

import os
import sys
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_SCHEMA_FILE = PACKAGE_DIR / "TableSchema.sqlite"


def get_project_root() -> Path:
    """Return the project root directory.

    The location can be overridden by the ``SQLITEDB_PROJECT_ROOT`` environment
    variable. Otherwise the function looks for repository markers such as
    ``.git`` or ``pyproject.toml`` starting from this file's location. If no
    marker is found (e.g. when running from an installed package), the package
    location itself is used.
    """
    env_root = os.getenv("SQLITEDB_PROJECT_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / ".git").exists() or (parent / "pyproject.toml").exists():
            return parent

    return PACKAGE_DIR


def get_data_dir() -> Path:
    """Return the user application-data directory databases are stored under.

    ``SQLITEDB_DATA_DIR`` has priority. Otherwise ``%APPDATA%`` is used on
    Windows and ``$XDG_DATA_HOME`` (falling back to ``~/.local/share``)
    elsewhere. Nothing is created on disk.
    """
    env_dir = os.getenv("SQLITEDB_DATA_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    if sys.platform == "win32" and os.getenv("APPDATA"):
        return Path(os.environ["APPDATA"])
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg).expanduser()
    return Path.home() / ".local" / "share"
