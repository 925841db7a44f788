from __future__ import annotations

from typing import List, Optional

import typer

from sqlitedb.database import exists, list_tables
from sqlitedb.logger import get_logger, setup_logging
from sqlitedb.utils.strings import list_contains

logger = get_logger(__name__)


def format_tables(name: str, tables: List[str]) -> str:
    """Return the table report printed for ``name``."""
    lines = [f"{name} has {len(tables)} tables{':' if tables else ''}"]
    lines.extend(f"  - {table}" for table in tables)
    return "\n".join(lines)


def main(
    name: str = typer.Option(..., help="Name of the database."),
    expect: Optional[List[str]] = typer.Option(None, help="Table that must exist."),
) -> None:
    """List the tables of an SQLite database."""
    setup_logging()
    if not exists(name):
        typer.echo(f"Database {name} does not exist.")
        raise typer.Exit(code=1)

    tables = list_tables(name)
    typer.echo(format_tables(name, tables))

    missing = [t for t in expect or [] if not tables or not list_contains(tables, t)]
    if missing:
        logger.warning("Database %s is missing tables: %s", name, ", ".join(missing))
        typer.echo(f"Missing tables: {', '.join(missing)}")
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    typer.run(main)
