"""Workload ingestion and validation service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bson import json_util
from bson.errors import BSONError

from .workload_models import Operation, OperationTarget, Workload


class WorkloadParseError(Exception):
    """Raised when a workload document is malformed."""


def parse_workload(raw: bytes | str) -> Workload:
    """Decode extended JSON workload text into a validated workload.

    Args:
      raw: Workload text, as passed on the command line.

    Returns:
      The parsed workload. Parsing is all-or-nothing.

    Raises:
      WorkloadParseError: If the text cannot be decoded or a required field is
        missing or has the wrong type.
    """
    try:
        parsed = json_util.loads(raw)
    except (ValueError, TypeError, BSONError) as exc:
        raise WorkloadParseError(f"Failed to parse workload JSON: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise WorkloadParseError("Workload root must be a document.")

    database = _require_non_empty_string(parsed.get("database"), "database")
    collection = _require_non_empty_string(parsed.get("collection"), "collection")
    operations = _parse_operations(parsed.get("operations"))
    return Workload(database=database, collection=collection, operations=operations)


def _parse_operations(value: Any) -> tuple[Operation, ...]:
    if value is None:
        raise WorkloadParseError("operations is required.")
    if not isinstance(value, list):
        raise WorkloadParseError("operations must be an array.")
    return tuple(_parse_operation(item, index) for index, item in enumerate(value))


def _parse_operation(value: Any, index: int) -> Operation:
    label = f"operations[{index}]"
    if not isinstance(value, Mapping):
        raise WorkloadParseError(f"{label} must be a document.")

    target = _parse_target(value.get("object"), f"{label}.object")
    name = _require_non_empty_string(value.get("name"), f"{label}.name")
    arguments = value.get("arguments")
    if arguments is None:
        arguments = {}
    elif not isinstance(arguments, Mapping):
        raise WorkloadParseError(f"{label}.arguments must be a document.")
    return Operation(target=target, name=name, arguments=arguments, raw=value)


def _parse_target(value: Any, field_name: str) -> OperationTarget:
    raw_target = _require_non_empty_string(value, field_name)
    try:
        return OperationTarget(raw_target)
    except ValueError as exc:
        allowed = ", ".join(target.value for target in OperationTarget)
        raise WorkloadParseError(
            f"{field_name} '{raw_target}' is not one of: {allowed}."
        ) from exc


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if value is None:
        raise WorkloadParseError(f"{field_name} is required.")
    if not isinstance(value, str):
        raise WorkloadParseError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise WorkloadParseError(f"{field_name} must not be empty.")
    return stripped
