from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from sqlitedb.utils.paths import get_project_root

LOG_FILE_NAME = "sqlitedb.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_file() -> Path:
    """Return the log file path; ``SQLITEDB_LOG_DIR`` overrides ``<root>/log``."""
    log_dir = os.getenv("SQLITEDB_LOG_DIR")
    base = Path(log_dir).expanduser() if log_dir else get_project_root() / "log"
    return base / LOG_FILE_NAME


def setup_logging() -> None:
    """Send records to the log file and stderr, once per process.

    The level comes from ``SQLITEDB_LOG_LEVEL`` (default ``INFO``).
    """
    if logging.getLogger().hasHandlers():
        return
    log_file = get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=os.getenv("SQLITEDB_LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)
