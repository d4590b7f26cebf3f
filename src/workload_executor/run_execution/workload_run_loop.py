"""Unbounded replay of a workload's operations."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from workload_executor.operation_dispatch import (
    OperationDispatcher,
    OperationOutcome,
    OperationResult,
    StoreHandles,
    default_dispatcher,
)
from workload_executor.results_writing.report_models import ResultSnapshot
from workload_executor.workload_ingestion import Operation, Workload

from .cancellation import CancellationSignal
from .run_contracts import ResultCounters, RunState

LOGGER = logging.getLogger(__name__)


class WorkloadRunLoop:
    """Replays the operation list until cancellation is requested.

    The loop is single threaded. Cancellation is checked before every pass and
    before every operation; an operation already in flight always completes
    and is counted.
    """

    def __init__(
        self,
        workload: Workload,
        handles: StoreHandles,
        cancellation: CancellationSignal,
        *,
        dispatcher: OperationDispatcher | None = None,
        idle_poll_interval_ms: int = 100,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._workload = workload
        self._handles = handles
        self._cancellation = cancellation
        self._dispatcher = dispatcher or default_dispatcher()
        self._idle_poll_seconds = idle_poll_interval_ms / 1000.0
        self._sleep = sleep
        self._counters = ResultCounters()
        self._state = RunState.RUNNING

    @property
    def state(self) -> RunState:
        return self._state

    def run(self) -> ResultSnapshot:
        """Run until cancelled and return the counters recorded so far."""
        if self._state is not RunState.RUNNING:
            raise RuntimeError(f"Run loop cannot start from state {self._state.value}.")

        passes = 0
        while not self._cancellation.requested:
            if not self._workload.operations:
                self._sleep(self._idle_poll_seconds)
                continue
            self._run_pass()
            passes += 1

        self._state = RunState.DRAINING
        snapshot = self._counters.snapshot()
        LOGGER.info(
            "Cancellation requested after %d complete passes: %d successes, %d failures, "
            "%d errors",
            passes,
            snapshot.num_successes,
            snapshot.num_failures,
            snapshot.num_errors,
        )
        return snapshot

    def mark_reported(self) -> None:
        """Record that the final counters were persisted."""
        if self._state is not RunState.DRAINING:
            raise RuntimeError(f"Run loop cannot report from state {self._state.value}.")
        self._state = RunState.REPORTED

    def _run_pass(self) -> None:
        for operation in self._workload.operations:
            if self._cancellation.requested:
                return
            self._execute(operation)

    def _execute(self, operation: Operation) -> None:
        result = self._dispatcher.dispatch(operation, self._handles)
        self._counters.record(result.outcome)
        _log_result(operation, result)


def _log_result(operation: Operation, result: OperationResult) -> None:
    if result.outcome is OperationOutcome.SUCCESS:
        LOGGER.debug("%s.%s succeeded", operation.target.value, operation.name)
        return
    LOGGER.warning(
        "%s.%s %s: %s",
        operation.target.value,
        operation.name,
        "failed" if result.outcome is OperationOutcome.FAILURE else "errored",
        result.message,
    )
