from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from sqlitedb.database import Database
from sqlitedb.errors import DatabaseInitializationError
from sqlitedb.logger import get_logger, setup_logging

logger = get_logger(__name__)


def create_db(name: str, schema: Optional[Path] = None) -> Database:
    """Create database ``name`` and apply ``schema`` to it."""
    return Database(name, schema)


def main(
    name: str = typer.Option(..., help="Name of the database to create."),
    schema: Optional[Path] = typer.Option(None, help="Path to SQL schema file."),
) -> None:
    """Create an SQLite database and initialize it from a schema file."""
    setup_logging()
    try:
        database = create_db(name, schema)
    except DatabaseInitializationError as exc:
        logger.error("%s", exc)
        typer.echo(f"Failed to create database {name}.")
        raise typer.Exit(code=1)
    typer.echo(f"Database created at {database.path}")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    typer.run(main)
