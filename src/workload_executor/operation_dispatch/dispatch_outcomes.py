"""Operation dispatch entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OperationOutcome(str, Enum):
    """Tri-state result of executing one operation."""

    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of dispatching one workload operation."""

    operation_name: str
    outcome: OperationOutcome
    message: str | None

    @staticmethod
    def success(operation_name: str) -> OperationResult:
        return OperationResult(
            operation_name=operation_name,
            outcome=OperationOutcome.SUCCESS,
            message=None,
        )

    @staticmethod
    def failure(operation_name: str, message: str) -> OperationResult:
        return OperationResult(
            operation_name=operation_name,
            outcome=OperationOutcome.FAILURE,
            message=message,
        )

    @staticmethod
    def error(operation_name: str, error: Exception | str) -> OperationResult:
        return OperationResult(
            operation_name=operation_name,
            outcome=OperationOutcome.ERROR,
            message=str(error),
        )
