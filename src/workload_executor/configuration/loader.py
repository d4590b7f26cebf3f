"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_IDLE_POLL_INTERVAL_MS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RESULTS_PATH,
    DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    ClientSettings,
    Configuration,
    LoggingSettings,
    OutputSettings,
    RunSettings,
    default_configuration,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> Configuration:
    """Load and validate the configuration file; ``None`` yields the defaults."""
    if config_path is None:
        return default_configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        output=_parse_output_section(parsed.get("output"), path.parent),
        client=_parse_client_section(parsed.get("client")),
        run=_parse_run_section(parsed.get("run")),
        logging=_parse_logging_section(parsed.get("logging")),
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    raw_path = _require_non_empty_string(
        section.get("path", DEFAULT_RESULTS_PATH), "output.path"
    )
    return OutputSettings(path=_resolve_path(base_path, raw_path))


def _parse_client_section(value: Any) -> ClientSettings:
    section = _optional_mapping(value, "client")
    timeout = _require_positive_int(
        section.get("server_selection_timeout_ms", DEFAULT_SERVER_SELECTION_TIMEOUT_MS),
        "client.server_selection_timeout_ms",
    )
    app_name = _optional_string(section.get("app_name"), "client.app_name")
    return ClientSettings(server_selection_timeout_ms=timeout, app_name=app_name)


def _parse_run_section(value: Any) -> RunSettings:
    section = _optional_mapping(value, "run")
    interval = _require_positive_int(
        section.get("idle_poll_interval_ms", DEFAULT_IDLE_POLL_INTERVAL_MS),
        "run.idle_poll_interval_ms",
    )
    return RunSettings(idle_poll_interval_ms=interval)


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = _require_non_empty_string(
        section.get("level", DEFAULT_LOG_LEVEL), "logging.level"
    ).upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of: {', '.join(_LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
