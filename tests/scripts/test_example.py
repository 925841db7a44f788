import sys
from datetime import datetime
from pathlib import Path

from typer.testing import CliRunner

# Ensure src is importable
sys.path.append(str(Path(__file__).resolve().parents[2] / "src"))

from sqlitedb.cli import app
from sqlitedb.database import exists, get_database_path
from sqlitedb.scripts.example import default_name

runner = CliRunner()


def test_default_name():
    assert default_name(datetime(2024, 3, 5, 14, 7, 9)) == "MyDatabase-20240305020709"


def test_example_delete_on_exit():
    result = runner.invoke(app, ["example", "--name", "Demo"], input="x\ny\n")
    assert result.exit_code == 0, result.output
    assert "Created Database: Demo." in result.output
    assert "Demo has 2 tables:" in result.output
    assert "  - Profile" in result.output
    assert "Invalid input. Please enter either Y or N." in result.output
    assert "Successfully deleted Database: Demo." in result.output
    assert not exists("Demo")


def test_example_keep_on_exit():
    result = runner.invoke(app, ["example", "--name", "Demo"], input="N\n")
    assert result.exit_code == 0, result.output
    assert f"Database located at: {get_database_path('Demo')}" in result.output
    assert exists("Demo")


def test_example_default_name(monkeypatch):
    from sqlitedb.scripts import example

    monkeypatch.setattr(example, "default_name", lambda: "MyDatabase-1")
    result = runner.invoke(app, ["example"], input="n\n")
    assert result.exit_code == 0, result.output
    assert exists("MyDatabase-1")


def test_example_logs_outcomes(caplog):
    with caplog.at_level("INFO"):
        result = runner.invoke(app, ["example", "--name", "Logged"], input="y\n")
    assert result.exit_code == 0, result.output
    assert "Example database Logged ready at" in caplog.text
    assert "Example database Logged deleted on exit" in caplog.text
