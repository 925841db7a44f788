"""Walk one database through its lifecycle.

Creates a timestamped database, reports its tables and asks whether to
delete it before exiting.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import typer

from sqlitedb.database import Database, exists
from sqlitedb.logger import get_logger, setup_logging
from sqlitedb.scripts.list_tables import format_tables

logger = get_logger(__name__)


def default_name(now: Optional[datetime] = None) -> str:
    return f"MyDatabase-{(now or datetime.now()):%Y%m%d%I%M%S}"


def create_database(name: str) -> Database:
    database = Database(name)
    if exists(database):
        logger.info("Example database %s ready at %s", database, database.path)
        typer.echo(f"Created Database: {database}.")
    else:
        logger.error("Example database %s was not created", database)
        typer.echo(f"Failed to create Database: {database}.")
    return database


def report_tables(database: Database) -> None:
    typer.echo(format_tables(database.name, database.list_tables()))


def exit_operation(database: Database) -> None:
    while True:
        answer = typer.prompt("Would you like to delete the database before exit? (Y/N)")
        answer = answer.strip().upper()
        if answer == "Y":
            if database.delete():
                logger.info("Example database %s deleted on exit", database)
                typer.echo(f"Successfully deleted Database: {database}.")
            else:
                typer.echo(f"Failed to delete Database: {database}.")
            break
        if answer == "N":
            logger.info("Example database %s kept at %s", database, database.path)
            typer.echo(f"Database located at: {database.path}")
            break
        typer.echo("Invalid input. Please enter either Y or N.")


def main(
    name: Optional[str] = typer.Option(None, help="Database name (default: timestamped)."),
) -> None:
    """Create a database, list its tables and optionally delete it."""
    setup_logging()
    database = create_database(name or default_name())
    report_tables(database)
    exit_operation(database)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    typer.run(main)
