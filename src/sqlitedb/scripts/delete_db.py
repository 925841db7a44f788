from __future__ import annotations

import typer

from sqlitedb.database import delete
from sqlitedb.logger import setup_logging


def main(name: str = typer.Option(..., help="Name of the database to delete.")) -> None:
    """Delete an SQLite database."""
    setup_logging()
    if not delete(name):
        typer.echo(f"Failed to delete Database: {name}.")
        raise typer.Exit(code=1)
    typer.echo(f"Successfully deleted Database: {name}.")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    typer.run(main)
