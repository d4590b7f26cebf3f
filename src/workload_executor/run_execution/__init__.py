"""Run execution domain exports."""

from .cancellation import CancellationSignal, install_interrupt_handler
from .run_contracts import ResultCounters, RunOutcome, RunRequest, RunState
from .workload_run_loop import WorkloadRunLoop
from .workload_run_use_case import RunExecutionError, execute_workload_run

__all__ = [
    "CancellationSignal",
    "ResultCounters",
    "RunExecutionError",
    "RunOutcome",
    "RunRequest",
    "RunState",
    "WorkloadRunLoop",
    "execute_workload_run",
    "install_interrupt_handler",
]
