import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

import sqlitedb.utils.settings as settings


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Keep every database created by a test under ``tmp_path``."""
    root = tmp_path / "appdata"
    monkeypatch.setenv("SQLITEDB_DATA_DIR", str(root))
    for key in ("APP_NAME", "DB_EXTENSION", "TABLE_SCHEMA_FILE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(settings, "_config", None)
    return root


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "TableSchema.sqlite"
    path.write_text(
        "CREATE TABLE Profile (Id INTEGER PRIMARY KEY, Name TEXT NOT NULL);\n"
        "CREATE TABLE Image (Id INTEGER PRIMARY KEY, ProfileId INTEGER, Path TEXT);\n",
        encoding="utf-8",
    )
    return path
