"""Run execution use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from workload_executor.configuration import (
    Configuration,
    ConfigurationError,
    load_configuration,
)
from workload_executor.data_store import (
    ConnectionStringError,
    StoreClient,
    open_store_client,
    validate_connection_string,
)
from workload_executor.data_store.store_client import StoreClientFactory
from workload_executor.operation_dispatch import OperationDispatcher, StoreHandles
from workload_executor.results_writing import ReportWriteError, write_results_report
from workload_executor.workload_ingestion import Workload, WorkloadParseError, parse_workload

from .cancellation import CancellationSignal, install_interrupt_handler
from .run_contracts import RunOutcome, RunRequest
from .workload_run_loop import WorkloadRunLoop

LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_workload_run(
    request: RunRequest,
    *,
    configuration: Configuration | None = None,
    client_factory: StoreClientFactory | None = None,
    dispatcher: OperationDispatcher | None = None,
    cancellation: CancellationSignal | None = None,
    install_signal_handler: bool = True,
) -> RunOutcome:
    """Replay the workload until interrupted and persist the final counters once."""
    resolved_configuration = configuration or _load_run_configuration(request.config_path)
    output_path = (
        Path(request.output_path) if request.output_path else resolved_configuration.output.path
    )
    workload = _prepare_workload(request)
    resolved_cancellation = cancellation or CancellationSignal()

    restore_handler = (
        install_interrupt_handler(resolved_cancellation) if install_signal_handler else None
    )
    try:
        client = _open_client(request.connection_string, resolved_configuration, client_factory)
        try:
            loop = WorkloadRunLoop(
                workload,
                _resolve_handles(client, workload),
                resolved_cancellation,
                dispatcher=dispatcher,
                idle_poll_interval_ms=resolved_configuration.run.idle_poll_interval_ms,
            )
            LOGGER.info(
                "Replaying %d operations against %s",
                len(workload.operations),
                workload.namespace,
            )
            snapshot = loop.run()
            try:
                written_path = write_results_report(snapshot, output_path)
            except ReportWriteError as exc:
                raise RunExecutionError(str(exc)) from exc
            loop.mark_reported()
        finally:
            client.close()
    finally:
        if restore_handler is not None:
            restore_handler()

    return RunOutcome(output_path=written_path, snapshot=snapshot)


def _load_run_configuration(config_path: str | None) -> Configuration:
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc


def _prepare_workload(request: RunRequest) -> Workload:
    try:
        validate_connection_string(request.connection_string)
        return parse_workload(request.workload)
    except (ConnectionStringError, WorkloadParseError) as exc:
        raise RunExecutionError(str(exc)) from exc


def _open_client(
    connection_string: str,
    configuration: Configuration,
    client_factory: StoreClientFactory | None,
) -> StoreClient:
    try:
        return open_store_client(connection_string, configuration.client, client_factory)
    except ConnectionStringError as exc:
        raise RunExecutionError(str(exc)) from exc


def _resolve_handles(client: StoreClient, workload: Workload) -> StoreHandles:
    database = client[workload.database]
    return StoreHandles(database=database, collection=database[workload.collection])
