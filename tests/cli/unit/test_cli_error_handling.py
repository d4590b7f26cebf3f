"""CLI error-handling tests."""

from __future__ import annotations

from workload_executor.cli import main


def test_missing_workload_argument_returns_clean_click_error(capsys) -> None:
    exit_code = main(["run", "mongodb://localhost:27017"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing argument" in captured.err
    assert "WORKLOAD" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["run", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_connection_string_exits_non_zero(capsys) -> None:
    exit_code = main(["run", "not-a-uri", '{"database": "d", "collection": "c", "operations": []}'])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Invalid connection string" in captured.err
    assert "Traceback" not in captured.err


def test_malformed_workload_exits_non_zero(capsys) -> None:
    exit_code = main(["run", "mongodb://localhost:27017", '{"database": "d"'])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to parse workload JSON" in captured.err


def test_workload_missing_collection_names_the_field(capsys) -> None:
    exit_code = main(["run", "mongodb://localhost:27017", '{"database": "d", "operations": []}'])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "collection is required" in captured.err
