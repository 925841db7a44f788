"""Command line interface for sqlitedb scripts."""

import pkgutil
import sqlite3
from importlib import import_module
from pathlib import Path

import typer

from sqlitedb.database import (
    Database,
    delete,
    dump_schema,
    exists,
    get_database_path,
    list_tables,
)
from sqlitedb.errors import SqliteDbError
from sqlitedb.logger import setup_logging
from sqlitedb.scripts.list_tables import format_tables

app = typer.Typer(help="SQLite database lifecycle command line interface")


def _register_script(module_name: str) -> None:
    module = import_module(f"sqlitedb.scripts.{module_name}")
    if not hasattr(module, "main"):
        return
    app.command(module_name)(module.main)


scripts_dir = Path(__file__).resolve().parent / "scripts"
if scripts_dir.exists():
    for module_info in pkgutil.iter_modules([str(scripts_dir)]):
        _register_script(module_info.name)


def _prompt_name(prompt: str = "Database name", must_exist: bool = False) -> str:
    while True:
        name = typer.prompt(prompt).strip()
        if not name:
            typer.echo("A database name needs to be provided.")
            continue
        if must_exist and not exists(name):
            typer.echo(f"Database {name} does not exist. Please try again.")
            continue
        return name


def _prompt_path(prompt: str, default: Path) -> Path:
    while True:
        path = Path(typer.prompt(prompt, default=str(default))).expanduser()
        if not path.parent.exists():
            typer.echo("Directory does not exist. Please try again.")
            continue
        return path


@app.command()
def menu() -> None:
    """Interactive menu to run common commands."""
    setup_logging()
    menu_text = (
        "=========== SQLite databases ===========\n"
        " 1. Create and initialize database\n"
        " 2. List tables\n"
        " 3. Show database path\n"
        " 4. Dump schema\n"
        " 5. Delete database\n"
        " 0. Exit\n"
        "========================================"
    )
    while True:
        typer.echo(menu_text)
        choice = typer.prompt("Select an option").strip()
        try:
            if choice == "1":
                database = Database(_prompt_name())
                typer.echo(f"Database ready at {database.path}")
            elif choice == "2":
                name = _prompt_name(must_exist=True)
                typer.echo(format_tables(name, list_tables(name)))
            elif choice == "3":
                name = _prompt_name()
                typer.echo(str(get_database_path(name)))
            elif choice == "4":
                name = _prompt_name(must_exist=True)
                output = _prompt_path("Output schema path", Path("schema.sql"))
                count = dump_schema(name, output)
                typer.echo(f"Dumped {count} statements to {output}")
            elif choice == "5":
                name = _prompt_name(must_exist=True)
                if delete(name):
                    typer.echo(f"Successfully deleted Database: {name}.")
                else:
                    typer.echo(f"Failed to delete Database: {name}.")
            elif choice == "0":
                break
            else:
                typer.echo("Invalid choice. Please try again.")
                continue
        except (SqliteDbError, sqlite3.Error, OSError) as exc:
            typer.echo(f"Error: {exc}")
        if not typer.confirm("Return to main menu?", default=True):
            break
    typer.echo("Goodbye!")


def main() -> None:
    """Entry point for console_scripts."""
    app()
