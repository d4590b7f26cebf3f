"""Collection-level operation handlers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from bson import json_util

from workload_executor.data_store.store_client import CollectionHandle
from workload_executor.result_verification import (
    VerificationReport,
    expected_documents,
    verify_result_set,
)
from workload_executor.result_verification.result_verifier import RESULT_FIELD

from .dispatch_outcomes import OperationResult


class OperationArgumentError(Exception):
    """Raised when operation arguments do not have the expected shape."""


def run_find(
    arguments: Mapping[str, Any],
    raw_operation: Mapping[str, Any],
    collection: CollectionHandle,
) -> OperationResult:
    """Run a find query and verify the returned documents against ``result``."""
    query_filter = _optional_document(arguments, "filter") or {}
    sort = _optional_document(arguments, "sort")
    options: dict[str, Any] = {}
    projection = _optional_document(arguments, "projection")
    if projection is not None:
        options["projection"] = projection
    for key in ("skip", "limit"):
        value = _optional_non_negative_int(arguments, key)
        if value is not None:
            options[key] = value
    expected = expected_documents(raw_operation)

    try:
        cursor = collection.find(
            query_filter,
            sort=list(sort.items()) if sort else None,
            **options,
        )
    except (TypeError, ValueError) as exc:
        raise OperationArgumentError(f"Invalid find arguments: {exc}") from exc
    return _verify_cursor("find", cursor, expected)


def run_aggregate(
    arguments: Mapping[str, Any],
    raw_operation: Mapping[str, Any],
    collection: CollectionHandle,
) -> OperationResult:
    """Run an aggregation pipeline and verify its output against ``result``."""
    pipeline = _require_document_array(arguments, "pipeline")
    expected = expected_documents(raw_operation)
    cursor = collection.aggregate(pipeline)
    return _verify_cursor("aggregate", cursor, expected)


def run_count_documents(
    arguments: Mapping[str, Any],
    raw_operation: Mapping[str, Any],
    collection: CollectionHandle,
) -> OperationResult:
    """Count matching documents, comparing with an integer ``result`` when given."""
    query_filter = _optional_document(arguments, "filter") or {}
    expected = raw_operation.get(RESULT_FIELD)
    if RESULT_FIELD in raw_operation and (
        isinstance(expected, bool) or not isinstance(expected, int)
    ):
        raise OperationArgumentError(f"{RESULT_FIELD} must be an integer for countDocuments.")

    count = collection.count_documents(query_filter)
    if expected is None or count == expected:
        return OperationResult.success("countDocuments")
    return OperationResult.failure(
        "countDocuments",
        f"expected count {expected}, actual count {count}",
    )


def run_insert_one(
    arguments: Mapping[str, Any],
    raw_operation: Mapping[str, Any],  # pylint: disable=unused-argument
    collection: CollectionHandle,
) -> OperationResult:
    """Insert a copy of ``document`` so the workload stays unchanged across passes."""
    document = _require_document(arguments, "document")
    collection.insert_one(dict(document))
    return OperationResult.success("insertOne")


def run_insert_many(
    arguments: Mapping[str, Any],
    raw_operation: Mapping[str, Any],  # pylint: disable=unused-argument
    collection: CollectionHandle,
) -> OperationResult:
    """Insert copies of ``documents``."""
    documents = _require_document_array(arguments, "documents")
    if not documents:
        raise OperationArgumentError("documents must not be empty.")
    ordered = arguments.get("ordered", True)
    if not isinstance(ordered, bool):
        raise OperationArgumentError("ordered must be a boolean.")
    collection.insert_many([dict(document) for document in documents], ordered=ordered)
    return OperationResult.success("insertMany")


def _verify_cursor(
    operation_name: str,
    cursor: Iterable[Any],
    expected: tuple[Mapping[str, object], ...] | None,
) -> OperationResult:
    if expected is None:
        # Drain the cursor so every getMore round trip is part of the load.
        for _ in cursor:
            pass
        return OperationResult.success(operation_name)

    report = verify_result_set(cursor, expected)
    if report.is_ok:
        return OperationResult.success(operation_name)
    return OperationResult.failure(operation_name, _describe_mismatch(report))


def _describe_mismatch(report: VerificationReport) -> str:
    parts = [f"expected {report.expected_count} documents, got {report.actual_count}"]
    if report.unexpected_documents:
        parts.append(
            f"{len(report.unexpected_documents)} unexpected, first: "
            f"{json_util.dumps(report.unexpected_documents[0])}"
        )
    return "; ".join(parts)


def _optional_document(arguments: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    if key not in arguments:
        return None
    value = arguments[key]
    if not isinstance(value, Mapping):
        raise OperationArgumentError(f"{key} must be a document.")
    return value


def _require_document(arguments: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = _optional_document(arguments, key)
    if value is None:
        raise OperationArgumentError(f"{key} is required.")
    return value


def _require_document_array(arguments: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    if key not in arguments:
        raise OperationArgumentError(f"{key} is required.")
    value = arguments[key]
    if not isinstance(value, list):
        raise OperationArgumentError(f"{key} must be an array of documents.")
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise OperationArgumentError(f"{key}[{index}] must be a document.")
    return value


def _optional_non_negative_int(arguments: Mapping[str, Any], key: str) -> int | None:
    if key not in arguments:
        return None
    value = arguments[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperationArgumentError(f"{key} must be an integer.")
    if value < 0:
        raise OperationArgumentError(f"{key} must not be negative.")
    return int(value)
