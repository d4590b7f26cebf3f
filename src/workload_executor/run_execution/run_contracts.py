"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from workload_executor.operation_dispatch.dispatch_outcomes import OperationOutcome
from workload_executor.results_writing.report_models import ResultSnapshot


class RunState(str, Enum):
    """Lifecycle of one workload run."""

    RUNNING = "running"
    DRAINING = "draining"
    REPORTED = "reported"


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    connection_string: str
    workload: str
    config_path: str | None = None
    output_path: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    output_path: Path
    snapshot: ResultSnapshot


@dataclass
class ResultCounters:
    """Per-outcome tallies, owned and mutated by the run loop only."""

    num_successes: int = 0
    num_failures: int = 0
    num_errors: int = 0

    def record(self, outcome: OperationOutcome) -> None:
        if outcome is OperationOutcome.SUCCESS:
            self.num_successes += 1
        elif outcome is OperationOutcome.FAILURE:
            self.num_failures += 1
        else:
            self.num_errors += 1

    def snapshot(self) -> ResultSnapshot:
        return ResultSnapshot(
            num_errors=self.num_errors,
            num_failures=self.num_failures,
            num_successes=self.num_successes,
        )
