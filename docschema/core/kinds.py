"""Closed classification of decoded runtime values."""
from __future__ import annotations

import datetime
import decimal
from collections.abc import Mapping
from enum import Enum
from typing import Any

from bson import Binary, Decimal128, Int64, ObjectId, Timestamp
from bson.datetime_ms import DatetimeMS


class DataKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    LONG = "long"
    DECIMAL = "decimal"
    DATE = "date"
    TIMESTAMP = "timestamp"
    OBJECT_ID = "objectId"
    BINARY = "binData"
    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"


NUMERIC_KINDS = frozenset({DataKind.NUMBER, DataKind.LONG})


def kind_of(value: Any) -> DataKind:
    """Return the single kind a decoded value belongs to.

    Order matters: ``bool`` and ``Int64`` are both ``int`` subclasses and
    ``Binary`` is a ``bytes`` subclass.
    """
    if value is None:
        return DataKind.NULL
    if isinstance(value, bool):
        return DataKind.BOOLEAN
    if isinstance(value, str):
        return DataKind.STRING
    if isinstance(value, Int64):
        return DataKind.LONG
    if isinstance(value, (int, float)):
        return DataKind.NUMBER
    if isinstance(value, (Decimal128, decimal.Decimal)):
        return DataKind.DECIMAL
    if isinstance(value, (datetime.datetime, DatetimeMS)):
        return DataKind.DATE
    if isinstance(value, Timestamp):
        return DataKind.TIMESTAMP
    if isinstance(value, ObjectId):
        return DataKind.OBJECT_ID
    if isinstance(value, (Binary, bytes, bytearray, memoryview)):
        return DataKind.BINARY
    if isinstance(value, (list, tuple)):
        return DataKind.ARRAY
    if isinstance(value, Mapping):
        return DataKind.OBJECT
    return DataKind.UNKNOWN


def is_integral(value: Any) -> bool:
    if isinstance(value, int):
        return True
    return float(value).is_integer()


def values_equal(left: Any, right: Any) -> bool:
    """Structural equality used by ``enum`` and ``uniqueItems``.

    Booleans never equal numbers, sequences compare element-wise and
    mappings compare key sets and values regardless of insertion order.
    """
    left_kind = kind_of(left)
    right_kind = kind_of(right)
    if DataKind.BOOLEAN in (left_kind, right_kind):
        return left_kind == right_kind and left == right
    if left_kind == DataKind.ARRAY or right_kind == DataKind.ARRAY:
        if left_kind != right_kind or len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right))
    if left_kind == DataKind.OBJECT or right_kind == DataKind.OBJECT:
        if left_kind != right_kind or set(left.keys()) != set(right.keys()):
            return False
        return all(values_equal(left[key], right[key]) for key in left)
    return left == right


__all__ = ["DataKind", "NUMERIC_KINDS", "is_integral", "kind_of", "values_equal"]
