"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultSnapshot:
    """Terminal copy of the run counters, as persisted in the results file."""

    num_errors: int
    num_failures: int
    num_successes: int

    def as_document(self) -> dict[str, int]:
        """Return the counters under their persisted field names."""
        return {
            "numErrors": self.num_errors,
            "numFailures": self.num_failures,
            "numSuccesses": self.num_successes,
        }
