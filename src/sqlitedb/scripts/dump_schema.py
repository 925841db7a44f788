from __future__ import annotations

from pathlib import Path

import typer

from sqlitedb.database import dump_schema
from sqlitedb.errors import InvalidArgumentError
from sqlitedb.logger import setup_logging


def main(
    name: str = typer.Option(..., help="Name of the database."),
    output: Path = typer.Option(Path("schema.sql"), help="Path for output schema file."),
) -> None:
    """Dump SQL schema from an SQLite database."""
    setup_logging()
    try:
        dump_schema(name, output)
    except InvalidArgumentError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1)
    typer.echo(f"Schema dumped to {output}")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    typer.run(main)
