"""Data store client domain exports."""

from .store_client import (
    CollectionHandle,
    ConnectionStringError,
    DatabaseHandle,
    StoreClient,
    open_store_client,
    validate_connection_string,
)

__all__ = [
    "CollectionHandle",
    "ConnectionStringError",
    "DatabaseHandle",
    "StoreClient",
    "open_store_client",
    "validate_connection_string",
]
