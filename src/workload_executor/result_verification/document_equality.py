"""Structural equality over BSON document values."""

from __future__ import annotations

from collections.abc import Mapping

from bson.int64 import Int64

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def values_equal(expected: object, actual: object) -> bool:
    """Return True when two document values are structurally identical.

    Documents must carry the same keys in the same order, arrays must match
    positionally and scalars must share their BSON type, so ``1``, ``1.0``,
    ``True`` and ``Int64(1)`` are all distinct. A plain integer outside the
    int32 range is stored as int64 and therefore equals the ``Int64`` read
    back from the data store.
    """
    if isinstance(expected, Mapping):
        return isinstance(actual, Mapping) and _documents_equal(expected, actual)
    if isinstance(expected, list | tuple):
        return isinstance(actual, list | tuple) and _arrays_equal(expected, actual)
    if isinstance(actual, Mapping | list | tuple):
        return False
    return _scalar_type(expected) is _scalar_type(actual) and expected == actual


def _scalar_type(value: object) -> type:
    # pylint: disable-next=unidiomatic-typecheck
    if type(value) is int and not _INT32_MIN <= value <= _INT32_MAX:
        return Int64
    return type(value)


def _documents_equal(expected: Mapping, actual: Mapping) -> bool:
    if len(expected) != len(actual):
        return False
    if list(expected.keys()) != list(actual.keys()):
        return False
    return all(values_equal(expected[key], actual[key]) for key in expected)


def _arrays_equal(expected: list | tuple, actual: list | tuple) -> bool:
    if len(expected) != len(actual):
        return False
    return all(
        values_equal(expected_item, actual_item)
        for expected_item, actual_item in zip(expected, actual, strict=True)
    )
