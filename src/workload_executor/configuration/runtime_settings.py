"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_RESULTS_PATH = "results.json"
DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 10000
DEFAULT_IDLE_POLL_INTERVAL_MS = 100
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class OutputSettings:
    """Where the final counters are written."""

    path: Path


@dataclass(frozen=True)
class ClientSettings:
    """MongoDB client options."""

    server_selection_timeout_ms: int
    app_name: str | None


@dataclass(frozen=True)
class RunSettings:
    """Run loop tuning."""

    idle_poll_interval_ms: int


@dataclass(frozen=True)
class LoggingSettings:
    """Diagnostics emitted while the workload runs."""

    level: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    output: OutputSettings
    client: ClientSettings
    run: RunSettings
    logging: LoggingSettings


def default_configuration() -> Configuration:
    """Return the configuration used when no configuration file is given."""
    return Configuration(
        path=None,
        output=OutputSettings(path=Path(DEFAULT_RESULTS_PATH)),
        client=ClientSettings(
            server_selection_timeout_ms=DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
            app_name=None,
        ),
        run=RunSettings(idle_poll_interval_ms=DEFAULT_IDLE_POLL_INTERVAL_MS),
        logging=LoggingSettings(level=DEFAULT_LOG_LEVEL),
    )
