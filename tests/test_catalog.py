"""Tests for the command-line entry point."""
import logging

import pytest

import catalog
from src.config import Config


def test_parser_defaults():
    args = catalog.build_parser().parse_args([])
    
    assert args.capacity == Config.CATALOG_CAPACITY
    assert args.table_format == Config.TABLE_FORMAT
    assert args.log_level == Config.LOG_LEVEL.upper()
    assert args.pause is Config.PAUSE_AFTER_ACTION


def test_parser_overrides():
    args = catalog.build_parser().parse_args(
        ["--capacity", "3", "--table-format", "grid", "--log-level", "debug", "--no-pause"]
    )
    
    assert args.capacity == 3
    assert args.table_format == "grid"
    assert args.log_level == "DEBUG"
    assert args.pause is False


def test_main_rejects_zero_capacity():
    with pytest.raises(SystemExit) as exc_info:
        catalog.main(["--capacity", "0"])
    
    assert exc_info.value.code == 2


def test_main_runs_menu_until_exit(monkeypatch, capsys):
    """The menu reads from stdin and stops on option 7."""
    lines = iter(["1", "fiction", "B1", "978", "Dune", "Herbert", "1st", "Chilton", "6", "7"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    
    catalog.main(["--no-pause"])
    
    output = capsys.readouterr().out
    assert "Book added successfully!" in output
    assert "Dune" in output
    assert "Exiting program. Goodbye!" in output


def test_main_reports_interrupt(monkeypatch, caplog):
    """Ctrl-C exits cleanly and is visible at the default log level."""
    def interrupted(prompt=""):
        raise KeyboardInterrupt
    monkeypatch.setattr("builtins.input", interrupted)
    
    with caplog.at_level(logging.WARNING):
        with pytest.raises(SystemExit) as exc_info:
            catalog.main(["--no-pause", "--log-level", "WARNING"])
    
    assert exc_info.value.code == 0
    assert "Interrupted by user" in caplog.text
