"""Scenario-style integration tests for core run behaviors."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from workload_executor.configuration.runtime_settings import (
    ClientSettings,
    Configuration,
    LoggingSettings,
    OutputSettings,
    RunSettings,
)
from workload_executor.results_writing.report_models import ResultSnapshot
from workload_executor.run_execution.cancellation import CancellationSignal
from workload_executor.run_execution.run_contracts import RunRequest
from workload_executor.run_execution.workload_run_use_case import execute_workload_run


class InMemoryCollection:
    """Stores documents in insertion order and requests cancellation after N calls."""

    def __init__(
        self,
        documents: list[dict[str, Any]],
        cancellation: CancellationSignal,
        cancel_after: int,
    ) -> None:
        self.documents = list(documents)
        self._cancellation = cancellation
        self._cancel_after = cancel_after
        self.calls: list[str] = []

    def _track(self, name: str) -> None:
        self.calls.append(name)
        if len(self.calls) >= self._cancel_after:
            self._cancellation.request()

    def find(self, filter, sort=None, **kwargs):  # noqa: A002
        self._track("find")
        return iter(list(self.documents))

    def count_documents(self, filter, **kwargs) -> int:  # noqa: A002
        self._track("countDocuments")
        return len(self.documents)

    def insert_one(self, document, **kwargs):
        self._track("insertOne")
        document.setdefault("_id", len(self.documents))
        self.documents.append(document)


class InMemoryClient:
    def __init__(self, collection: InMemoryCollection) -> None:
        self._collection = collection

    def __getitem__(self, name: str):
        return {"c": self._collection}

    def close(self) -> None:
        pass


def _configuration(tmp_path: Path) -> Configuration:
    return Configuration(
        path=None,
        output=OutputSettings(path=tmp_path / "results.json"),
        client=ClientSettings(server_selection_timeout_ms=1000, app_name=None),
        run=RunSettings(idle_poll_interval_ms=1),
        logging=LoggingSettings(level="INFO"),
    )


def _run(
    tmp_path: Path,
    operations: list[dict[str, Any]],
    documents: list[dict[str, Any]],
    *,
    cancel_after: int,
) -> tuple[ResultSnapshot, InMemoryCollection, dict[str, int]]:
    cancellation = CancellationSignal()
    collection = InMemoryCollection(documents, cancellation, cancel_after)
    workload = json.dumps({"database": "d", "collection": "c", "operations": operations})

    outcome = execute_workload_run(
        RunRequest(connection_string="mongodb://localhost:27017", workload=workload),
        configuration=_configuration(tmp_path),
        client_factory=lambda *args, **kwargs: InMemoryClient(collection),
        cancellation=cancellation,
        install_signal_handler=False,
    )
    persisted = json.loads(outcome.output_path.read_text(encoding="utf-8"))
    return outcome.snapshot, collection, persisted


_FIND_A1_A2 = {
    "object": "collection",
    "name": "find",
    "arguments": {"filter": {}},
    "result": [{"a": 1}, {"a": 2}],
}


@pytest.mark.parametrize("stored", [[{"a": 1}, {"a": 2}], [{"a": 2}, {"a": 1}]])
def test_find_matching_collection_in_any_storage_order_succeeds(
    tmp_path: Path, stored: list[dict[str, Any]]
) -> None:
    snapshot, _, persisted = _run(tmp_path, [_FIND_A1_A2], stored, cancel_after=1)

    assert snapshot == ResultSnapshot(num_errors=0, num_failures=0, num_successes=1)
    assert persisted == {"numErrors": 0, "numFailures": 0, "numSuccesses": 1}


def test_find_against_collection_missing_a_document_fails(tmp_path: Path) -> None:
    snapshot, _, persisted = _run(tmp_path, [_FIND_A1_A2], [{"a": 1}], cancel_after=1)

    assert snapshot.num_failures == 1
    assert persisted == {"numErrors": 0, "numFailures": 1, "numSuccesses": 0}


def test_find_returning_unexpected_document_fails(tmp_path: Path) -> None:
    snapshot, _, _ = _run(tmp_path, [_FIND_A1_A2], [{"a": 1}, {"a": 3}], cancel_after=1)

    assert snapshot.num_failures == 1


def test_unknown_operation_is_counted_as_error_and_loop_continues(tmp_path: Path) -> None:
    operations = [
        {"object": "collection", "name": "unknownOp", "arguments": {}},
        _FIND_A1_A2,
    ]

    snapshot, collection, _ = _run(tmp_path, operations, [{"a": 1}, {"a": 2}], cancel_after=1)

    assert snapshot == ResultSnapshot(num_errors=1, num_failures=0, num_successes=1)
    assert collection.calls == ["find"]


def test_cancellation_between_operations_skips_rest_of_pass(tmp_path: Path) -> None:
    operations = [
        {"object": "collection", "name": "insertOne", "arguments": {"document": {"a": 9}}},
        {"object": "collection", "name": "countDocuments", "arguments": {}},
        _FIND_A1_A2,
    ]

    snapshot, collection, persisted = _run(tmp_path, operations, [], cancel_after=1)

    assert collection.calls == ["insertOne"]
    assert persisted == {"numErrors": 0, "numFailures": 0, "numSuccesses": 1}
    assert snapshot.num_successes == 1


def test_workload_with_no_operations_reports_zero_counters(tmp_path: Path) -> None:
    cancellation = CancellationSignal()
    cancellation.request()
    collection = InMemoryCollection([], cancellation, cancel_after=1)

    outcome = execute_workload_run(
        RunRequest(
            connection_string="mongodb://localhost:27017",
            workload=json.dumps({"database": "d", "collection": "c", "operations": []}),
        ),
        configuration=_configuration(tmp_path),
        client_factory=lambda *args, **kwargs: InMemoryClient(collection),
        cancellation=cancellation,
        install_signal_handler=False,
    )

    assert json.loads(outcome.output_path.read_text(encoding="utf-8")) == {
        "numErrors": 0,
        "numFailures": 0,
        "numSuccesses": 0,
    }


def test_replayed_inserts_do_not_mutate_the_workload(tmp_path: Path) -> None:
    operations = [
        {"object": "collection", "name": "insertOne", "arguments": {"document": {"a": 1}}},
    ]

    _, collection, persisted = _run(tmp_path, operations, [], cancel_after=3)

    assert persisted["numSuccesses"] == 3
    assert collection.documents == [{"a": 1, "_id": 0}, {"a": 1, "_id": 1}, {"a": 1, "_id": 2}]
