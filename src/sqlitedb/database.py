"""Lifecycle of named SQLite database files.

A database is addressed by name; its file lives at
``<data dir>/<APP_NAME>/<name>.<DB_EXTENSION>``. The module level functions
accept either a name or a :class:`Database` handle.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from sqlitedb.errors import DatabaseInitializationError, InvalidArgumentError
from sqlitedb.logger import get_logger
from sqlitedb.utils.paths import get_data_dir
from sqlitedb.utils.settings import get_app_name, get_db_extension, get_schema_path
from sqlitedb.utils.strings import list_contains_all

logger = get_logger(__name__)

TABLES_QUERY = "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
SCHEMA_QUERY = """
    SELECT sql FROM sqlite_master
    WHERE type IN ('table', 'index', 'trigger')
    AND name NOT LIKE 'sqlite_%'
"""

DatabaseRef = Union[str, "Database"]


@dataclass
class SchemaResult:
    """Outcome of applying a schema script."""

    applied: bool
    tables_before: int = 0
    tables_after: int = 0
    error: Optional[Exception] = None

    def __bool__(self) -> bool:
        return self.applied


def _require_name(database: Optional[DatabaseRef]) -> str:
    if database is None:
        raise InvalidArgumentError("A database name needs to be provided.")
    name = str(database)
    if not name.strip():
        raise InvalidArgumentError("A database name needs to be provided.")
    return name


def get_database_path(database: DatabaseRef) -> Path:
    """Return where the database file for ``database`` lives.

    Pure path arithmetic: the file may or may not exist.
    """
    name = _require_name(database)
    try:
        filename = Path(name).with_suffix(f".{get_db_extension()}")
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid database name: {name!r}") from exc
    return get_data_dir() / get_app_name() / filename


def get_connection_string(database: DatabaseRef) -> str:
    return f"Data Source={get_database_path(database)};Version=3"


def parse_connection_string(text: str) -> Dict[str, str]:
    """Split ``key=value;`` pairs of a connection string into a dict."""
    if text is None or not text.strip():
        raise InvalidArgumentError("A connection string needs to be provided.")
    out: Dict[str, str] = {}
    for segment in text.split(";"):
        if not segment.strip():
            continue
        key, sep, value = segment.partition("=")
        if not sep or not key.strip():
            raise InvalidArgumentError(f"Malformed connection string segment: {segment!r}")
        out[key.strip()] = value.strip()
    return out


def exists(database: DatabaseRef) -> bool:
    return get_database_path(database).is_file()


def create(database: DatabaseRef) -> bool:
    """Create an empty database file.

    Returns ``False`` without touching anything if the database already
    exists, otherwise whether the file exists after creation.
    """
    name = _require_name(database)
    if exists(name):
        logger.warning("Database %s already exists", name)
        return False

    path = get_database_path(name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=False)
    logger.info("Created database %s at %s", name, path)
    return exists(name)


def connect(database: DatabaseRef) -> sqlite3.Connection:
    """Open a connection to an existing database.

    The caller owns the connection and must close it.
    """
    name = _require_name(database)
    if not exists(name):
        raise InvalidArgumentError(
            f"Unable to connect to database {name}. Ensure it has been initialized."
        )
    return sqlite3.connect(get_database_path(name))


def _table_count(name: str) -> int:
    try:
        return len(list_tables(name))
    except sqlite3.DatabaseError:
        logger.warning("Database %s is not a readable SQLite file", name)
        return 0


def list_tables(database: DatabaseRef) -> List[str]:
    """Return the user tables of ``database`` in catalog order."""
    with closing(connect(database)) as conn:
        rows = conn.execute(TABLES_QUERY).fetchall()
    return [row[0] for row in rows if row[0] and str(row[0]).strip()]


def has_tables(database: DatabaseRef, *expected: str) -> bool:
    """Return ``True`` if ``database`` contains every table in ``expected``."""
    tables = list_tables(database)
    if not tables:
        return False
    return list_contains_all(tables, *expected)


def apply_schema_result(
    database: DatabaseRef, schema_file: str | Path | None = None
) -> SchemaResult:
    """Run the schema script against ``database`` as a single batch.

    Errors raised by the script are logged and returned on
    :attr:`SchemaResult.error` instead of being raised.
    """
    name = _require_name(database)
    if not exists(name):
        logger.warning("Cannot apply schema: database %s does not exist", name)
        return SchemaResult(False)

    schema_path = Path(schema_file) if schema_file else _schema_of(database)
    if not schema_path.is_file():
        logger.warning("Cannot apply schema: schema file %s not found", schema_path)
        return SchemaResult(False)

    before = _table_count(name)
    error: Optional[Exception] = None
    try:
        sql = schema_path.read_text(encoding="utf-8")
        with closing(connect(name)) as conn:
            conn.executescript(sql)
            conn.commit()
    except (sqlite3.Error, OSError, UnicodeDecodeError) as exc:
        logger.exception("Failed to apply schema %s to database %s", schema_path, name)
        error = exc
    after = _table_count(name)

    applied = before < after
    if applied:
        logger.info("Applied schema %s to %s: %d -> %d tables", schema_path, name, before, after)
    return SchemaResult(applied, before, after, error)


def apply_schema(database: DatabaseRef, schema_file: str | Path | None = None) -> bool:
    return apply_schema_result(database, schema_file).applied


def initialize(database: DatabaseRef, schema_file: str | Path | None = None) -> bool:
    """Make sure ``database`` exists and holds tables.

    An existing database is only checked: it is sound if it has at least one
    table and is never repaired. A missing database is created and the schema
    applied. Returns ``False`` when the database is unsound or could not be
    set up; the reason is logged.
    """
    name = _require_name(database)
    if exists(name):
        sound = _table_count(name) != 0
        if not sound:
            logger.warning("Database %s exists but has no tables", name)
        return sound

    if not create(name):
        logger.error("Failed to create database %s", name)
        return False
    result = apply_schema_result(database, schema_file)
    if not result:
        logger.error("Failed to create tables in database %s: %s", name, result.error)
        return False
    return True


def delete(database: DatabaseRef) -> bool:
    """Delete the database file.

    Returns ``False`` if there is nothing to delete, otherwise whether the
    file is gone afterwards.
    """
    name = _require_name(database)
    if not exists(name):
        logger.warning("Database %s does not exist", name)
        return False

    connect(name).close()
    get_database_path(name).unlink()
    logger.info("Deleted database %s", name)
    return not exists(name)


def dump_schema(database: DatabaseRef, output: str | Path) -> int:
    """Write the schema of ``database`` to ``output``.

    Returns the number of statements written.
    """
    with closing(connect(database)) as conn:
        schema = [row[0] for row in conn.execute(SCHEMA_QUERY).fetchall() if row[0]]
    with Path(output).open("w", encoding="utf-8") as f:
        for stmt in schema:
            f.write(stmt.strip() + ";\n\n")
    logger.info("Dumped %d statements from %s to %s", len(schema), database, output)
    return len(schema)


def _schema_of(database: DatabaseRef) -> Path:
    if isinstance(database, Database):
        return database.schema_file
    return get_schema_path()


class Database:
    """Handle pairing a database name with the schema used to initialize it.

    With ``initialize=True`` (the default) the database is created and the
    schema applied when missing; failure raises
    :class:`DatabaseInitializationError`.
    """

    def __init__(
        self,
        name: str,
        schema_file: str | Path | None = None,
        initialize: bool = True,
    ) -> None:
        if name is None or not str(name).strip():
            raise InvalidArgumentError("A database name needs to be provided.")
        schema_path = Path(schema_file) if schema_file else get_schema_path()
        if not schema_path.is_file():
            raise InvalidArgumentError(f"A valid table schema file must be provided: {schema_path}")

        self.name = str(name)
        self.schema_file = schema_path
        if initialize and not self.initialize():
            raise DatabaseInitializationError(f"Failed to initialize database {self.name}.")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Database(name={self.name!r}, schema_file={str(self.schema_file)!r})"

    @property
    def path(self) -> Path:
        return get_database_path(self.name)

    @property
    def connection_string(self) -> str:
        return get_connection_string(self.name)

    def exists(self) -> bool:
        return exists(self.name)

    def create(self) -> bool:
        return create(self.name)

    def connect(self) -> sqlite3.Connection:
        return connect(self.name)

    def list_tables(self) -> List[str]:
        return list_tables(self.name)

    def has_tables(self, *expected: str) -> bool:
        return has_tables(self.name, *expected)

    def apply_schema(self) -> bool:
        return apply_schema(self.name, self.schema_file)

    def initialize(self) -> bool:
        return initialize(self.name, self.schema_file)

    def delete(self) -> bool:
        return delete(self.name)

    def dump_schema(self, output: str | Path) -> int:
        return dump_schema(self.name, output)
