"""Results file writer service."""

from __future__ import annotations

import logging
from pathlib import Path

from bson import json_util

from .report_models import ResultSnapshot

LOGGER = logging.getLogger(__name__)


class ReportWriteError(Exception):
    """Raised when the results file cannot be written."""


def write_results_report(snapshot: ResultSnapshot, output_path: Path | str) -> Path:
    """Serialize the final counters to ``output_path`` and return its resolved path."""
    output = Path(output_path)
    payload = json_util.dumps(snapshot.as_document(), json_options=json_util.RELAXED_JSON_OPTIONS)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload, encoding="utf-8")
    except OSError as exc:
        LOGGER.error("Could not write results to %s: %s", output, exc)
        raise ReportWriteError(f"Could not write results file {output}: {exc}") from exc
    LOGGER.info("Wrote results to %s: %s", output, payload)
    return output.resolve()
