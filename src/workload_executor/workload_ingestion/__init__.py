"""Workload ingestion domain exports."""

from .workload_models import Operation, OperationTarget, Workload
from .workload_parser import WorkloadParseError, parse_workload

__all__ = [
    "Operation",
    "OperationTarget",
    "Workload",
    "WorkloadParseError",
    "parse_workload",
]
