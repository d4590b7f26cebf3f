"""Result verification entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class VerificationReport:
    """Outcome of comparing a live document stream with an expected set."""

    expected_count: int
    actual_count: int
    unexpected_documents: tuple[Mapping[str, object], ...]

    @property
    def is_ok(self) -> bool:
        """Return True when every live document was expected and counts agree."""
        return not self.unexpected_documents and self.actual_count == self.expected_count
