"""Order-independent verification of live query results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from .document_equality import values_equal
from .verification_outcomes import VerificationReport

RESULT_FIELD = "result"


class ResultStructureError(Exception):
    """Raised when expected or live results do not have the document shape."""


def expected_documents(
    raw_operation: Mapping[str, object],
) -> tuple[Mapping[str, object], ...] | None:
    """Return the operation's expected document set, or None when it asserts nothing."""
    if RESULT_FIELD not in raw_operation:
        return None
    value = raw_operation[RESULT_FIELD]
    if not isinstance(value, list):
        raise ResultStructureError(f"{RESULT_FIELD} must be an array of documents.")
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise ResultStructureError(f"{RESULT_FIELD}[{index}] must be a document.")
    return tuple(value)


def verify_result_set(
    actual_documents: Iterable[object],
    expected: Sequence[object],
) -> VerificationReport:
    """Compare a live document stream with an unordered expected multiset.

    Every live document has to be structurally present in ``expected`` and the
    number of live documents has to equal ``len(expected)``. The stream is
    consumed exactly once.
    """
    actual_count = 0
    unexpected: list[Mapping[str, object]] = []
    for document in actual_documents:
        actual_count += 1
        if not document_in_set(document, expected):
            unexpected.append(document)  # type: ignore[arg-type]
    return VerificationReport(
        expected_count=len(expected),
        actual_count=actual_count,
        unexpected_documents=tuple(unexpected),
    )


def document_in_set(candidate: object, expected: Sequence[object]) -> bool:
    """Return True when ``candidate`` structurally equals an element of ``expected``."""
    if not isinstance(candidate, Mapping):
        raise ResultStructureError("Live result entries must be documents.")
    for index, item in enumerate(expected):
        if not isinstance(item, Mapping):
            raise ResultStructureError(f"{RESULT_FIELD}[{index}] must be a document.")
        if values_equal(item, candidate):
            return True
    return False
