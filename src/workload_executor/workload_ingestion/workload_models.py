"""Workload ingestion entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

DocumentValue = Mapping[str, object]


class OperationTarget(str, Enum):
    """Kind of handle an operation is executed against."""

    DATABASE = "database"
    COLLECTION = "collection"


@dataclass(frozen=True)
class Operation:
    """One decoded entry of the workload's operation list."""

    target: OperationTarget
    name: str
    arguments: DocumentValue
    raw: DocumentValue


@dataclass(frozen=True)
class Workload:
    """Target namespace plus the ordered operations replayed against it."""

    database: str
    collection: str
    operations: tuple[Operation, ...]

    @property
    def namespace(self) -> str:
        """Return the ``database.collection`` namespace string."""
        return f"{self.database}.{self.collection}"
