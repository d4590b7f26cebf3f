"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "executor.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Executor configuration for workload-executor.
# Every setting is optional; delete a line to fall back to its default.

output:
  # File receiving numErrors/numFailures/numSuccesses once the run is interrupted.
  path: "results.json"

client:
  # How long the driver waits for a suitable server before an operation errors.
  server_selection_timeout_ms: 10000
  # app_name: "<OPTIONAL>"

run:
  # Sleep between cancellation checks when the workload has no operations.
  idle_poll_interval_ms: 100

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
  level: "INFO"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML executor configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
