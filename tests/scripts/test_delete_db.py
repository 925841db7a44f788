import sys
from pathlib import Path

from typer.testing import CliRunner

# Ensure src is importable
sys.path.append(str(Path(__file__).resolve().parents[2] / "src"))

from sqlitedb.cli import app
from sqlitedb.database import create, exists

runner = CliRunner()


def test_delete_db_command():
    assert create("Doomed")
    result = runner.invoke(app, ["delete_db", "--name", "Doomed"])
    assert result.exit_code == 0, result.output
    assert "Successfully deleted Database: Doomed." in result.output
    assert not exists("Doomed")


def test_delete_db_command_absent():
    result = runner.invoke(app, ["delete_db", "--name", "Doomed"])
    assert result.exit_code == 1
    assert "Failed to delete Database: Doomed." in result.output
