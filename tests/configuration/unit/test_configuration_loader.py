"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from workload_executor.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_no_configuration_path_yields_defaults() -> None:
    configuration = load_configuration(None)

    assert configuration.path is None
    assert configuration.output.path == Path("results.json")
    assert configuration.client.server_selection_timeout_ms == 10000
    assert configuration.run.idle_poll_interval_ms == 100
    assert configuration.logging.level == "INFO"


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "executor.yaml",
        """
output:
  path: reports/final.json
client:
  server_selection_timeout_ms: 2500
  app_name: " perf-suite "
run:
  idle_poll_interval_ms: 20
logging:
  level: debug
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.output.path == (tmp_path / "reports" / "final.json").resolve()
    assert configuration.client.server_selection_timeout_ms == 2500
    assert configuration.client.app_name == "perf-suite"
    assert configuration.run.idle_poll_interval_ms == 20
    assert configuration.logging.level == "DEBUG"


def test_loads_json_configuration_with_absolute_output(tmp_path: Path) -> None:
    absolute = tmp_path / "abs.json"
    config_path = _write_file(
        tmp_path / "executor.json",
        json.dumps({"output": {"path": str(absolute)}}),
    )

    configuration = load_configuration(config_path)

    assert configuration.output.path == absolute


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "executor.yaml", ""))

    assert configuration.client.server_selection_timeout_ms == 10000
    assert configuration.output.path == (tmp_path / "results.json").resolve()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_unparseable_yaml_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "executor.yaml", "output: [unclosed")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path)


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "executor.yaml", "- a\n- b\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("output: 5", "section 'output' must be a mapping"),
        ("output:\n  path: ''", "output.path must not be empty"),
        ("client:\n  server_selection_timeout_ms: 0", "must be greater than zero"),
        ("client:\n  server_selection_timeout_ms: true", "must be an integer"),
        ("client:\n  app_name: 5", "client.app_name must be a string"),
        ("run:\n  idle_poll_interval_ms: fast", "run.idle_poll_interval_ms must be an integer"),
        ("logging:\n  level: chatty", "logging.level must be one of"),
    ],
)
def test_invalid_values_raise(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "executor.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
