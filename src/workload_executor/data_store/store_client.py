"""MongoDB client wrapper service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Protocol

from pymongo import MongoClient
from pymongo.errors import PyMongoError
from pymongo.uri_parser import parse_uri

from workload_executor.configuration.runtime_settings import ClientSettings

_DRIVER_LOGGER = logging.getLogger("pymongo")
_DRIVER_LOGGER.addHandler(logging.NullHandler())
_DRIVER_LOGGER.propagate = False
_DRIVER_LOGGER.setLevel(logging.CRITICAL + 1)


class ConnectionStringError(Exception):
    """Raised when the connection string cannot be parsed."""


class CollectionHandle(Protocol):
    """Subset of the driver collection API used by operation handlers."""

    def find(self, filter: Mapping[str, Any], **kwargs: Any) -> Iterable[Any]: ...  # noqa: A002

    def aggregate(self, pipeline: Sequence[Mapping[str, Any]], **kwargs: Any) -> Iterable[Any]: ...

    def count_documents(self, filter: Mapping[str, Any], **kwargs: Any) -> int: ...  # noqa: A002

    def insert_one(self, document: Mapping[str, Any], **kwargs: Any) -> Any: ...

    def insert_many(self, documents: Iterable[Mapping[str, Any]], **kwargs: Any) -> Any: ...


class DatabaseHandle(Protocol):
    """Subset of the driver database API used by the run loop."""

    def __getitem__(self, name: str) -> CollectionHandle: ...


class StoreClient(Protocol):
    """Protocol implemented by both real and fake clients."""

    def __getitem__(self, name: str) -> DatabaseHandle: ...

    def close(self) -> None: ...


StoreClientFactory = Callable[..., StoreClient]


def validate_connection_string(connection_string: str) -> None:
    """Fail fast when the connection string is not a valid MongoDB URI."""
    try:
        parse_uri(connection_string)
    except (PyMongoError, ValueError) as exc:
        raise ConnectionStringError(f"Invalid connection string: {exc}") from exc


def open_store_client(
    connection_string: str,
    settings: ClientSettings,
    client_factory: StoreClientFactory | None = None,
) -> StoreClient:
    """Create a client for ``connection_string``; the driver connects lazily."""
    factory = client_factory or MongoClient
    options: dict[str, Any] = {
        "serverSelectionTimeoutMS": settings.server_selection_timeout_ms,
    }
    if settings.app_name:
        options["appname"] = settings.app_name
    try:
        return factory(connection_string, **options)
    except (PyMongoError, ValueError) as exc:
        raise ConnectionStringError(f"Invalid connection string: {exc}") from exc
