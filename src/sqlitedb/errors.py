from __future__ import annotations


class SqliteDbError(Exception):
    """Base class for errors raised by sqlitedb."""


class InvalidArgumentError(SqliteDbError, ValueError):
    """Raised for missing, empty or whitespace-only arguments."""


class EmptyListError(SqliteDbError, IndexError):
    """Raised when an operation needs a non-empty list."""


class UnsupportedTypeError(SqliteDbError, TypeError):
    """Raised when a value cannot be mapped to an SQLite parameter type."""


class DatabaseInitializationError(SqliteDbError, RuntimeError):
    """Raised when a database handle cannot be initialized."""
