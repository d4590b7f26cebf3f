"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from workload_executor.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from workload_executor.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_workload_run,
)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="workload-executor")
def cli() -> None:
    """Workload-driven test executor for MongoDB deployments."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML executor configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML executor configuration with the default settings."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.argument("connection_string")
@click.argument("workload")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON executor configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Results file path, overriding output.path from the configuration",
)
def run_workload(
    connection_string: str,
    workload: str,
    config_path: str | None,
    output_path: str | None,
) -> None:
    """Replay WORKLOAD (extended JSON) against CONNECTION_STRING until interrupted."""
    try:
        configuration = load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    _configure_logging(configuration.logging.level)

    try:
        outcome = execute_workload_run(
            RunRequest(
                connection_string=connection_string,
                workload=workload,
                config_path=config_path,
                output_path=output_path,
            ),
            configuration=configuration,
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    snapshot = outcome.snapshot
    click.echo(str(outcome.output_path))
    click.echo(
        f"numSuccesses={snapshot.num_successes} "
        f"numFailures={snapshot.num_failures} "
        f"numErrors={snapshot.num_errors}"
    )


class _ClickEchoHandler(logging.Handler):
    """Logging handler that writes through click to the current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


def _configure_logging(level: str) -> None:
    package_logger = logging.getLogger("workload_executor")
    if not any(isinstance(handler, _ClickEchoHandler) for handler in package_logger.handlers):
        handler = _ClickEchoHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(level)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
