"""Results writing domain exports."""

from .report_models import ResultSnapshot
from .run_report_writer import ReportWriteError, write_results_report

__all__ = [
    "ReportWriteError",
    "ResultSnapshot",
    "write_results_report",
]
