"""Routing of workload operations to their handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from workload_executor.data_store.store_client import CollectionHandle, DatabaseHandle
from workload_executor.result_verification import ResultStructureError
from workload_executor.workload_ingestion import Operation, OperationTarget

from .collection_operations import (
    OperationArgumentError,
    run_aggregate,
    run_count_documents,
    run_find,
    run_insert_many,
    run_insert_one,
)
from .dispatch_outcomes import OperationResult

LOGGER = logging.getLogger(__name__)

OperationHandler = Callable[[Mapping[str, Any], Mapping[str, Any], Any], OperationResult]

_UNSUPPORTED_MESSAGES = {
    OperationTarget.DATABASE: "unsupported database command",
    OperationTarget.COLLECTION: "unsupported collection operation",
}


@dataclass(frozen=True)
class StoreHandles:
    """Data store handles an operation can target."""

    database: DatabaseHandle
    collection: CollectionHandle

    def for_target(self, target: OperationTarget) -> Any:
        if target is OperationTarget.DATABASE:
            return self.database
        return self.collection


class OperationDispatcher:
    """Lookup table from ``(target, name)`` to operation handlers."""

    def __init__(
        self,
        handlers: Mapping[tuple[OperationTarget, str], OperationHandler] | None = None,
    ) -> None:
        self._handlers: dict[tuple[OperationTarget, str], OperationHandler] = dict(handlers or {})

    def register(self, target: OperationTarget, name: str, handler: OperationHandler) -> None:
        """Add or replace the handler for one ``(target, name)`` pair."""
        self._handlers[(target, name)] = handler

    def supports(self, target: OperationTarget, name: str) -> bool:
        """Return True when a handler is registered for ``(target, name)``."""
        return (target, name) in self._handlers

    def dispatch(self, operation: Operation, handles: StoreHandles) -> OperationResult:
        """Execute one operation; problems are returned as results, never raised."""
        handler = self._handlers.get((operation.target, operation.name))
        if handler is None:
            return OperationResult.error(
                operation.name,
                f"{_UNSUPPORTED_MESSAGES[operation.target]}: {operation.name}",
            )
        try:
            return handler(
                operation.arguments,
                operation.raw,
                handles.for_target(operation.target),
            )
        except (OperationArgumentError, ResultStructureError) as exc:
            return OperationResult.error(operation.name, exc)
        except PyMongoError as exc:
            LOGGER.debug("Data store call failed for %s", operation.name, exc_info=True)
            return OperationResult.error(operation.name, f"data store error: {exc}")
        except BSONError as exc:
            LOGGER.debug("Document codec failed for %s", operation.name, exc_info=True)
            return OperationResult.error(operation.name, f"invalid document: {exc}")
        except Exception as exc:  # pylint: disable=broad-exception-caught
            LOGGER.debug("Handler for %s raised", operation.name, exc_info=True)
            return OperationResult.error(operation.name, exc)


def default_dispatcher() -> OperationDispatcher:
    """Build a dispatcher with every built-in operation registered."""
    return OperationDispatcher(
        {
            (OperationTarget.COLLECTION, "find"): run_find,
            (OperationTarget.COLLECTION, "aggregate"): run_aggregate,
            (OperationTarget.COLLECTION, "countDocuments"): run_count_documents,
            (OperationTarget.COLLECTION, "insertOne"): run_insert_one,
            (OperationTarget.COLLECTION, "insertMany"): run_insert_many,
        }
    )
