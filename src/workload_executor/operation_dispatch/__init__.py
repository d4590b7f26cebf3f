"""Operation dispatch domain exports."""

from .collection_operations import (
    OperationArgumentError,
    run_aggregate,
    run_count_documents,
    run_find,
    run_insert_many,
    run_insert_one,
)
from .dispatch_outcomes import OperationOutcome, OperationResult
from .dispatch_table import (
    OperationDispatcher,
    OperationHandler,
    StoreHandles,
    default_dispatcher,
)

__all__ = [
    "OperationArgumentError",
    "OperationDispatcher",
    "OperationHandler",
    "OperationOutcome",
    "OperationResult",
    "StoreHandles",
    "default_dispatcher",
    "run_aggregate",
    "run_count_documents",
    "run_find",
    "run_insert_many",
    "run_insert_one",
]
