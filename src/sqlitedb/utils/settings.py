from __future__ import annotations

import os
from datetime import tzinfo
from pathlib import Path
from typing import Any, Dict

import pandas as pd
import yaml

from sqlitedb.logger import get_logger
from sqlitedb.utils.paths import DEFAULT_SCHEMA_FILE, get_project_root

DEFAULT_APP_NAME = "SQLiteDatabaseExample"
DEFAULT_DB_EXTENSION = "db"

_config: Dict[str, Any] | None = None
_config_path: Path | None = None
logger = get_logger(__name__)


def load_config(path: str | Path | None = None, force_reload: bool = False) -> Dict[str, Any]:
    """Load configuration from a YAML file or environment variables.

    The search order is:
    1. ``path`` if provided;
    2. ``SQLITEDB_CONFIG`` environment variable;
    3. ``config.yml`` in the project root.

    Loaded values are cached for subsequent calls. Set ``force_reload`` to
    ``True`` or pass a new ``path`` to reload the configuration.
    """
    global _config, _config_path
    base_dir = get_project_root()
    cfg_path = Path(path or os.getenv("SQLITEDB_CONFIG", base_dir / "config.yml"))
    if force_reload or _config is None or _config_path != cfg_path:
        data: Dict[str, Any] = {}
        if cfg_path.exists():
            with cfg_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        _config = data
        _config_path = cfg_path
    return _config


def find_setting(name: str, default: Any | None = None) -> Any:
    """Return configuration value by ``name``.

    Environment variables take precedence over the ``settings`` section of
    the config file. If the key is missing, ``default`` is returned.
    """
    cfg = load_config(force_reload=True).get("settings") or {}
    return os.getenv(name) or cfg.get(name, default)


def get_app_name() -> str:
    return str(find_setting("APP_NAME", default=DEFAULT_APP_NAME)).strip()


def get_db_extension() -> str:
    """Return the database file extension without its leading dot."""
    ext = str(find_setting("DB_EXTENSION", default=DEFAULT_DB_EXTENSION)).strip()
    return ext.lstrip(".") or DEFAULT_DB_EXTENSION


def get_schema_path() -> Path:
    """Return the schema script applied to new databases.

    ``TABLE_SCHEMA_FILE`` overrides the bundled ``TableSchema.sqlite``.
    Relative paths are resolved against the project root.
    """
    value = find_setting("TABLE_SCHEMA_FILE")
    if not value:
        return DEFAULT_SCHEMA_FILE
    path = Path(str(value)).expanduser()
    if not path.is_absolute():
        path = get_project_root() / path
    return path


def parse_date(dt, tz: str | tzinfo | None = None) -> pd.Timestamp:
    """Parse various date formats into a timezone-aware ``pd.Timestamp``.

    Supports ``dd.mm.yyyy``, ``yyyy-mm-dd`` and arbitrary ISO-like formats.
    The returned timestamp is in UTC unless ``tz`` is provided to convert it to
    another timezone.
    """
    s = str(dt).replace("T", " ").replace("/", ".").strip()
    if s == "":
        raise ValueError("empty date")
    ts = pd.to_datetime(s, utc=True, dayfirst="." in s)
    if tz is not None:
        ts = ts.tz_convert(tz)
    return ts
