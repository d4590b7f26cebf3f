"""Result verification domain exports."""

from .document_equality import values_equal
from .result_verifier import (
    ResultStructureError,
    document_in_set,
    expected_documents,
    verify_result_set,
)
from .verification_outcomes import VerificationReport

__all__ = [
    "ResultStructureError",
    "VerificationReport",
    "document_in_set",
    "expected_documents",
    "values_equal",
    "verify_result_set",
]
